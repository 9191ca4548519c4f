"""Small numeric and random helpers."""

from __future__ import annotations

import random
from datetime import datetime

_rng = random.Random()


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b`` by ``t``."""
    return a + t * (b - a)


def randi(lower_bound: int, upper_bound: int) -> int:
    """Uniform random integer in the closed range [lower_bound, upper_bound]."""
    if lower_bound > upper_bound:
        raise ValueError(
            f"lower bound {lower_bound} is greater than upper bound {upper_bound}"
        )
    return _rng.randint(lower_bound, upper_bound)


def probability_check(probability: float) -> bool:
    """Return True with the given probability, which must lie in [0, 1]."""
    if not 0.0 <= probability <= 1.0:
        raise ValueError("Probability out of range. It should be between 0 and 1.")
    return _rng.random() < probability


def timestamp_str(now: datetime | None = None) -> str:
    """Local time as ``YYYY-MM-DDTHH:MM:SS``."""
    if now is None:
        now = datetime.now()
    return now.strftime("%Y-%m-%dT%H:%M:%S")