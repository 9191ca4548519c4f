"""On-screen text counters."""

from __future__ import annotations

from dataclasses import dataclass, field

WHITE = (255, 255, 255)
DEFAULT_FONT = ("times", 12)


@dataclass
class FPSCounter:
    """Shows the current frame rate."""

    text: str = ""
    color: tuple[int, int, int] = WHITE
    font: tuple[str, int] = field(default=DEFAULT_FONT)

    def update_fps(self, fps: int) -> None:
        self.text = f"FPS: {fps}"


@dataclass
class GameObjectCounter:
    """Shows how many game objects are alive."""

    object_count: int = 0
    text: str = ""
    color: tuple[int, int, int] = WHITE
    font: tuple[str, int] = field(default=DEFAULT_FONT)

    def update_object_count(self, amount: int) -> None:
        """Change the count by ``amount`` and refresh the text."""
        self.object_count += amount
        self._refresh()

    def set_object_count(self, count: int) -> None:
        self.object_count = count
        self._refresh()

    def _refresh(self) -> None:
        self.text = f"Object count: {self.object_count}"