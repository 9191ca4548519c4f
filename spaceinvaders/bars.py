"""Progress bars for health and energy."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .position import Rect

Color = tuple[int, int, int]

BACKGROUND_COLOR: Color = (98, 98, 103)
TEXT_COLOR: Color = (255, 255, 255)


class ProgressBar(ABC):
    """A horizontal bar whose filled width tracks a clamped progress value."""

    def __init__(
        self,
        max_progress: float,
        width: float,
        height: float,
        show_numeric_progression: bool = False,
    ) -> None:
        self.current_progress = float(max_progress)
        self.max_progress = float(max_progress)
        self.progress_percentage = 1.0
        self.max_width = float(width)
        self.height = float(height)
        self.current_width = float(width)
        self.show_numeric_progression = show_numeric_progression

    def bounding_rect(self) -> Rect:
        return Rect(0, 0, self.max_width, self.height)

    def filled_rect(self) -> Rect:
        """The part of the bar drawn in the progress colour."""
        return Rect(0, 0, self.current_width, self.height)

    def update_progress(self, amount: float) -> None:
        """Add ``amount`` to the progress, clamped to [0, max]."""
        self.set_progress(self.current_progress + amount)

    def set_progress(self, new_progress: float) -> None:
        """Set the progress, clamped to [0, max]."""
        self.current_progress = min(max(new_progress, 0.0), self.max_progress)
        if self.max_progress:
            self.progress_percentage = self.current_progress / self.max_progress
        else:
            self.progress_percentage = 0.0
        self.current_width = self.max_width * self.progress_percentage

    @abstractmethod
    def select_color(self) -> Color:
        """Colour of the filled part of the bar."""

    def progress_text(self) -> str:
        """The numeric label shown over the bar, e.g. ``"3 / 10"``."""
        return f"{int(self.current_progress)} / {self.max_progress:g}"


class HealthBar(ProgressBar):
    """Bar that turns from green through orange to red as it empties."""

    def select_color(self) -> Color:
        if self.progress_percentage < 0.3:
            return (211, 82, 105)
        if self.progress_percentage < 0.6:
            return (248, 178, 98)
        return (23, 184, 144)


class EnergyBar(ProgressBar):
    """Bar in a single blue colour."""

    def select_color(self) -> Color:
        return (86, 123, 179)