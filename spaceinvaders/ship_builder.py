"""Fluent builder for ship prototypes."""

from __future__ import annotations

from collections.abc import Callable

from .gameobject import (
    MovementStrategy,
    ObjectType,
    PixmapData,
    SoundInfo,
    StationaryMovementStrategy,
)
from .position import Position
from .projectiles import BuilderError
from .ship import Ship


class ShipBuilder:
    """Configures a ship and hands out copies of it.

    Setters called before ``create_ship`` are ignored; ``build`` then raises.
    """

    def __init__(self) -> None:
        self._ship: Ship | None = None

    def create_ship(self, ship_type: Callable[[float, Position], Ship]) -> ShipBuilder:
        """Start from a new ship made as ``ship_type(0, Position(0, 0, 0, 0))``."""
        ship = ship_type(0, Position(0, 0, 0, 0))
        ship.movement_strategy = StationaryMovementStrategy()
        self._ship = ship
        return self

    def with_object_type(self, object_type: ObjectType) -> ShipBuilder:
        if self._ship is not None:
            self._ship.add_object_type(object_type)
        return self

    def with_position(self, position: Position) -> ShipBuilder:
        if self._ship is not None:
            self._ship.position = position.copy()
        return self

    def with_speed(self, speed: float) -> ShipBuilder:
        if self._ship is not None:
            self._ship.speed = float(speed)
        return self

    def with_health(self, health: float) -> ShipBuilder:
        if self._ship is not None:
            self._ship.max_health = float(health)
            self._ship.fully_restore_health()
        return self

    def with_energy(self, energy: float) -> ShipBuilder:
        if self._ship is not None:
            self._ship.max_energy = float(energy)
            self._ship.fully_restore_energy()
        return self

    def with_energy_regeneration_rate(self, rate: float) -> ShipBuilder:
        if self._ship is not None:
            self._ship.energy_regeneration_rate = float(rate)
        return self

    def with_movement_strategy(self, strategy: MovementStrategy) -> ShipBuilder:
        if self._ship is not None:
            self._ship.movement_strategy = strategy
        return self

    def with_graphics(self, pixmap_data: PixmapData) -> ShipBuilder:
        if self._ship is not None:
            self._ship.pixmap_data = pixmap_data
        return self

    def with_spawn_sound(self, spawn_sound: SoundInfo) -> ShipBuilder:
        if self._ship is not None:
            self._ship.spawn_sound_info = spawn_sound
        return self

    def with_destruction_sound(self, destruction_sound: SoundInfo) -> ShipBuilder:
        if self._ship is not None:
            self._ship.destruction_sound_info = destruction_sound
        return self

    def build(self) -> Ship:
        """A new copy of the configured ship."""
        if self._ship is None:
            raise BuilderError("create_ship must be called before building a ship.")
        return self._ship.clone()