"""Cooldown overlay that sweeps away as a weapon becomes ready again."""

from __future__ import annotations

import time
from collections.abc import Callable

from .position import Rect

Color = tuple[int, int, int, int]

OVERLAY_COLOR: Color = (0, 0, 0, 180)
FULL_ANGLE = 360.0


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class CooldownItem:
    """An icon with a shrinking pie-shaped shade while its cooldown runs."""

    def __init__(
        self,
        pixmap: object,
        width: float = 0.0,
        height: float = 0.0,
        update_interval_ms: int = 100,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        self.pixmap = pixmap
        self.width = width
        self.height = height
        self.update_interval_ms = update_interval_ms
        self.color = OVERLAY_COLOR
        self.cooldown_angle = FULL_ANGLE
        self.cooldown_duration_ms = 0.0
        self.in_progress = False
        self._clock = clock
        self._started_at = clock()

    def bounding_rect(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def elapsed_ms(self) -> float:
        """Milliseconds since the current cooldown started."""
        return self._clock() - self._started_at

    def start_cooldown(self, duration_ms: float) -> None:
        """Start a cooldown unless one is already running."""
        if self.in_progress:
            return
        self._started_at = self._clock()
        self.in_progress = True
        self.cooldown_duration_ms = duration_ms
        self.cooldown_angle = FULL_ANGLE

    def update_cooldown(self) -> None:
        """Refresh the remaining angle; ends the cooldown once it has run out."""
        elapsed = self.elapsed_ms()
        if self.cooldown_duration_ms <= 0:
            self.cooldown_angle = 0.0
            self.in_progress = False
            return
        proportion = (self.cooldown_duration_ms - elapsed) / self.cooldown_duration_ms
        self.cooldown_angle = proportion * FULL_ANGLE
        if elapsed >= self.cooldown_duration_ms:
            self.in_progress = False

    def sweep_angle(self) -> float:
        """Angle in degrees swept clockwise from the top; 0 when idle."""
        if not self.in_progress or self.cooldown_duration_ms <= 0:
            return 0.0
        return -FULL_ANGLE * (self.elapsed_ms() / self.cooldown_duration_ms)