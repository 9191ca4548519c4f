"""Registry of preload callbacks run once at start-up."""

from __future__ import annotations

from collections.abc import Callable


class PixmapRegistry:
    """Collects callables and runs them all on demand, in order of addition."""

    def __init__(self) -> None:
        self._funcs: list[Callable[[], object]] = []

    def __len__(self) -> int:
        return len(self._funcs)

    def add(self, func: Callable[[], object]) -> None:
        self._funcs.append(func)

    def preload_all(self) -> None:
        for func in self._funcs:
            func()


default_registry = PixmapRegistry()