"""Sprite-sheet animation played frame by frame."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence

from .position import Rect


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class AnimatedItem:
    """Steps through frames of a sprite sheet, a fixed number of cycles."""

    def __init__(
        self,
        animation_cycles: int = 1,
        delay_between_frames_ms: float = 50,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        self.cycle_count = animation_cycles
        self.delay_between_frames_ms = delay_between_frames_ms
        self.spritesheet: object | None = None
        self.frame_size: tuple[float, float] = (0, 0)
        self.frame_offsets: list[tuple[float, float]] = []
        self.frame_count = 0
        self.source_rect = Rect()
        self.visible = False
        self._clock = clock
        self._last_tick = clock()
        self._started = False
        self._finished = False
        self._accumulated_ms = 0.0
        self._frame_index = 0
        self._cycle_index = 0

    def __bool__(self) -> bool:
        return self.spritesheet is not None

    def bounding_rect(self) -> Rect:
        return self.source_rect

    def start(self) -> None:
        self._started = True
        self._finished = False
        self._accumulated_ms = 0.0
        self._frame_index = 0
        self._cycle_index = 0
        self._last_tick = self._clock()

    def stop(self) -> None:
        self._started = False
        self.visible = False

    def show_next_frame(self) -> None:
        """Advance to the next frame once enough time has passed."""
        if not self._started or self._finished:
            self.visible = False
            return
        now = self._clock()
        self._accumulated_ms += now - self._last_tick
        self._last_tick = now
        if self._accumulated_ms >= self.delay_between_frames_ms:
            x, y = self.frame_offsets[self._frame_index]
            width, height = self.frame_size
            self.source_rect = Rect(x, y, width, height)
            self._frame_index += 1
            if self._frame_index >= self.frame_count:
                self._frame_index = 0
                self._cycle_index += 1
            self._finished = self._cycle_index >= self.cycle_count
            self._accumulated_ms = 0.0
            self.visible = True

    def animation_finished(self) -> bool:
        """True once all cycles have played, or if there is nothing to play."""
        if self.spritesheet is None:
            return True
        return self._finished

    def set_frame_offsets(self, offsets: Sequence[tuple[float, float]]) -> None:
        self.frame_offsets = list(offsets)
        self.frame_count = len(self.frame_offsets)