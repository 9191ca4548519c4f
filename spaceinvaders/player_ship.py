"""The player's ship: inertial steering, energy and collectable pickup."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any

from .gameobject import GameObject, Magnetism, ObjectType, Signal, SoundInfo, UpdateContext
from .position import Position, Vec2
from .ship import Ship, _monotonic_ms
from .weapons import Weapon

PLAYER_DESTROYED_SOUND = "PLAYER_DESTROYED"
DEFAULT_ACCELERATION = 1250.0


def _toward_zero(speed: float, step: float) -> float:
    if speed > 0:
        return max(speed - step, 0.0)
    if speed < 0:
        return min(speed + step, 0.0)
    return speed


class PlayerShip(Ship):
    """The ship steered by the player; it attracts collectables."""

    def __init__(
        self,
        speed: float,
        position: Position,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        super().__init__(0, speed, position, clock)
        self.magnetism = Magnetism(True, True, 100.0, 100.0)
        self.pixmap_data.pixmap_resource_path = ":/Images/player_ship.png"
        self.pixmap_data.pixmap_scale = Vec2(50.0, 50.0)
        self.current_speed_x = 0.0
        self.current_speed_y = 0.0
        self.acceleration = DEFAULT_ACCELERATION
        self.stellar_token_collected = Signal()
        self.player_secondary_weapons_changed = Signal()
        self.player_secondary_weapon_fired = Signal()
        self.player_energy_updated = Signal()
        self.player_max_energy_set = Signal()
        self.player_health_updated = Signal()
        self.player_max_health_set = Signal()

    def update(self, context: UpdateContext) -> None:
        super().update(context)
        self.regenerate_energy(context.delta_time)
        self.player_energy_updated.emit(self.current_energy)

    def should_be_deleted(self) -> bool:
        return (
            self.is_dead()
            and self.destruction_animation.animation_finished()
            and self.destruction_effect.effect_finished()
        )

    def initialize_object_type(self) -> None:
        super().initialize_object_type()
        self.object_types.add(ObjectType.PLAYER_SHIP)

    def initialize_sounds(self) -> None:
        self.destruction_sound_info = SoundInfo(self.sound_enabled, PLAYER_DESTROYED_SOUND)

    def clone(self) -> PlayerShip:
        ship = PlayerShip(self.speed, self.position, clock=self._clock)
        ship.pixmap_data = replace(self.pixmap_data)
        ship.destruction_sound_info = replace(self.destruction_sound_info)
        ship.object_types = set(self.object_types)
        ship.magnetism = replace(self.magnetism)
        ship.max_health = self.max_health
        ship.max_energy = self.max_energy
        ship.current_energy = self.current_energy
        ship.current_health = self.current_health
        ship.current_speed_x = self.current_speed_x
        ship.current_speed_y = self.current_speed_y
        ship.acceleration = self.acceleration
        return ship

    def accelerate_left(self, delta_time: float) -> None:
        self.current_speed_x = max(
            self.current_speed_x - self.acceleration * delta_time, -self.speed
        )

    def accelerate_right(self, delta_time: float) -> None:
        self.current_speed_x = min(
            self.current_speed_x + self.acceleration * delta_time, self.speed
        )

    def decelerate_x(self, delta_time: float) -> None:
        self.current_speed_x = _toward_zero(
            self.current_speed_x, self.acceleration * delta_time
        )

    def accelerate_up(self, delta_time: float) -> None:
        self.current_speed_y = max(
            self.current_speed_y - self.acceleration * delta_time, -self.speed
        )

    def accelerate_down(self, delta_time: float) -> None:
        self.current_speed_y = min(
            self.current_speed_y + self.acceleration * delta_time, self.speed
        )

    def decelerate_y(self, delta_time: float) -> None:
        self.current_speed_y = _toward_zero(
            self.current_speed_y, self.acceleration * delta_time
        )

    def move_horizontal(self, delta_time: float) -> None:
        self.move_x(self.current_speed_x * delta_time)

    def move_vertical(self, delta_time: float) -> None:
        self.move_y(self.current_speed_y * delta_time)

    def move_x(self, amount: float) -> None:
        """Shift horizontally, staying within the screen bounds."""
        self.position.x = self.position.x + amount
        self.clamp_to_x_bounds()

    def move_y(self, amount: float) -> None:
        """Shift vertically, staying within the screen bounds."""
        self.position.y = self.position.y + amount
        self.clamp_to_y_bounds()

    def set_max_energy(self, max_energy: float) -> None:
        self.max_energy = float(max_energy)
        self.player_max_energy_set.emit(self.max_energy)

    def set_max_health(self, max_health: float) -> None:
        self.max_health = float(max_health)
        self.player_max_health_set.emit(int(max_health))
        self.player_health_updated.emit(int(max_health))

    def set_secondary_weapon(self, weapon: Weapon, weapon_index: int) -> None:
        super().set_secondary_weapon(weapon, weapon_index)
        self.player_secondary_weapons_changed.emit(self.secondary_weapons)

    def fire_secondary_weapon(self, weapon_index: int) -> bool:
        success = super().fire_secondary_weapon(weapon_index)
        if success:
            weapon = self.secondary_weapons[weapon_index]
            self.player_secondary_weapon_fired.emit(weapon_index, weapon.cooldown_ms)
            self.player_energy_updated.emit(self.current_energy)
        return success

    def collide_with(self, other: GameObject) -> None:
        other.collide_with_player_ship(self)

    def collide_with_projectile(self, projectile: Any) -> None:
        self.take_damage(projectile.damage)
        self.player_health_updated.emit(int(self.current_health))
        if not self.is_dead():
            self.play_on_hit_animation()

    def collide_with_collectable(self, collectable: Any) -> None:
        types = collectable.object_types
        if ObjectType.STELLAR_COIN in types:
            self.stellar_token_collected.emit()
        elif ObjectType.HEALTH in types:
            self.heal(1)
            self.player_health_updated.emit(int(self.current_health))

    def disable_movement(self) -> None:
        self.current_speed_x = 0.0
        self.current_speed_y = 0.0
        self.acceleration = 0.0