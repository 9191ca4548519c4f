"""Enemy ships that drop coins and health when destroyed."""

from __future__ import annotations

import copy
import random
from collections.abc import Callable
from dataclasses import replace
from typing import Any

from .collectables import Health, Stellar
from .gameobject import GameObject, ObjectType, Signal, SoundInfo
from .position import Position, Vec2
from .ship import ShipWithHealthBar, _monotonic_ms
from .utils import probability_check

LESSER_ENEMY_DESTROYED_SOUND = "LESSER_ENEMY_DESTROYED"


class EnemyShip(ShipWithHealthBar):
    """A hostile ship with a health bar and loot drops."""

    def __init__(
        self,
        max_hp: float,
        position: Position,
        rng: random.Random | None = None,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        super().__init__(max_hp, 0, position, clock)
        self.stellar_coin_spawn_range: tuple[int, int] = (2, 5)
        self._health_spawn_probability = 0.10
        self.pixmap_data.pixmap_resource_path = ":/Images/alien.png"
        self.pixmap_data.on_hit_pixmap_resource_path = ":/Images/alien_on_hit.png"
        self.pixmap_data.pixmap_scale = Vec2(50.0, 50.0)
        self.magnetic_targets = {ObjectType.PROJECTILE}
        self.enemy_ship_deleted = Signal()
        self._bottom_edge_signal_emitted = False
        self._rng = rng or random.Random()

    @property
    def health_spawn_probability(self) -> float:
        return self._health_spawn_probability

    @health_spawn_probability.setter
    def health_spawn_probability(self, value: float) -> None:
        self._health_spawn_probability = min(max(float(value), 0.0), 1.0)

    def update_health_spawn_probability(self, multiplier: float) -> None:
        self.health_spawn_probability = self._health_spawn_probability * multiplier

    def collide_with(self, other: GameObject) -> None:
        other.collide_with_enemy_ship(self)

    def collide_with_projectile(self, projectile: Any) -> None:
        self.take_damage(projectile.damage)
        if not self.is_dead():
            self.play_on_hit_animation()

    def collide_with_enemy_ship(self, enemy_ship: Any) -> None:
        self.take_damage(0)

    def initialize_object_type(self) -> None:
        super().initialize_object_type()
        self.object_types.add(ObjectType.ENEMY_SHIP)

    def initialize_sounds(self) -> None:
        self.destruction_sound_info = SoundInfo(
            self.sound_enabled, LESSER_ENEMY_DESTROYED_SOUND
        )

    def execute_destruction_procedure(self) -> None:
        super().execute_destruction_procedure()
        self.spawn_stellar_coins()
        self.spawn_health()

    def _drop_position(self) -> Position:
        center = self.bounding_box().center()
        position = Position(center.x, center.y)
        position.bounds = self.position.bounds
        return position

    def spawn_stellar_coins(self) -> None:
        """Emit a random number of coins from the lower bound up to the upper."""
        low, high = self.stellar_coin_spawn_range
        amount = self._rng.randrange(low, high)
        position = self._drop_position()
        for _ in range(amount):
            stellar = Stellar(position)
            stellar.initialize()
            self.object_created.emit(stellar)

    def spawn_health(self) -> None:
        if probability_check(self._health_spawn_probability):
            health = Health(self._drop_position())
            health.initialize()
            self.object_created.emit(health)

    def clone(self) -> EnemyShip:
        """An initialised copy carrying clones of this ship's primary weapons."""
        ship = EnemyShip(self.max_health, self.position, clock=self._clock)
        ship.pixmap_data = replace(self.pixmap_data)
        ship.destruction_sound_info = replace(self.destruction_sound_info)
        ship.object_types = set(self.object_types)
        ship._health_spawn_probability = self._health_spawn_probability
        ship.stellar_coin_spawn_range = self.stellar_coin_spawn_range
        ship.magnetic_targets = set(self.magnetic_targets)
        ship.fire_cooldown_ms = self.fire_cooldown_ms
        ship.movement_strategy = copy.deepcopy(self.movement_strategy)
        ship.energy_regeneration_rate = self.energy_regeneration_rate
        ship.current_health = self.current_health
        ship.current_energy = self.current_energy
        ship.max_energy = self.max_energy
        ship.auto_fire = self.auto_fire
        for weapon in self.primary_weapons:
            ship.add_primary_weapon(weapon.clone())
        ship.initialize()
        return ship

    def should_be_deleted(self) -> bool:
        if self.position.is_beyond_bottom() and not self._bottom_edge_signal_emitted:
            self.bottom_edge_reached.emit()
            self._bottom_edge_signal_emitted = True
        deleted = super().should_be_deleted()
        if deleted:
            self.enemy_ship_deleted.emit()
        return deleted