"""Mathematical constants and helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable

PI = math.pi


def percentile(values: Iterable[float], p: float) -> float:
    """Linearly interpolated percentile of ``values`` for ``p`` in [0, 1].

    An empty input gives 0.0.
    """
    ordered = sorted(values)
    if not ordered:
        return 0.0
    idx = p * (len(ordered) - 1)
    i = int(idx)
    frac = idx - i
    if i + 1 < len(ordered):
        return ordered[i] * (1 - frac) + ordered[i + 1] * frac
    return ordered[i]