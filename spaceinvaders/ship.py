"""Ships: health, energy, weapons and destruction effects."""

from __future__ import annotations

import time
from collections.abc import Callable

from .attractable import AttractableGameObject
from .bars import HealthBar
from .gameobject import ObjectType, Signal, UpdateContext
from .position import Position, Vec2
from .projectiles import Projectile
from .weapons import Weapon

SECONDARY_WEAPON_SLOTS = 4
ON_HIT_DURATION_MS = 100.0
EXPLOSION_SPRITESHEET = ":/Images/explosion.png"
EXPLOSION_COLUMNS = 4
EXPLOSION_ROWS = 4
EXPLOSION_SIZE = 200
HEALTH_BAR_WIDTH = 50
HEALTH_BAR_HEIGHT = 5
HEALTH_BAR_OFFSET = Vec2(0, 45)
_FULL_BAR_CHANGE = 9999999


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Ship(AttractableGameObject):
    """A game object with health, energy and weapons."""

    def __init__(
        self,
        max_hp: float,
        speed: float,
        position: Position,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        super().__init__(position)
        self.immortal = False
        self.fire_cooldown_ms = 0
        self.pixel_width = 50
        self.pixel_height = 50
        self.destruction_particle_count = 200
        self.current_health = float(max_hp)
        self.max_health = float(max_hp)
        self.speed = float(speed)
        self.max_energy = 0.0
        self.current_energy = 0.0
        self.energy_regeneration_rate = 0.0
        self.primary_weapons: list[Weapon] = []
        self.secondary_weapons: list[Weapon | None] = [None] * SECONDARY_WEAPON_SLOTS
        self.on_hit_animation_in_progress = False
        self.auto_fire = False
        self.bottom_edge_reached = Signal()
        self._clock = clock
        self._on_hit_started = 0.0

    @property
    def current_hp(self) -> int:
        return int(self.current_health)

    def update(self, context: UpdateContext) -> None:
        if (
            self.on_hit_animation_in_progress
            and self._clock() - self._on_hit_started >= ON_HIT_DURATION_MS
        ):
            self.end_on_hit_animation()
        super().update(context)
        if self.auto_fire:
            self.fire_primary_weapons()

    def should_be_deleted(self) -> bool:
        return super().should_be_deleted() or (
            self.is_dead()
            and self.destruction_animation.animation_finished()
            and self.destruction_effect.effect_finished()
        )

    def is_dead(self) -> bool:
        return self.current_health <= 0

    def take_damage(self, amount: float) -> None:
        if not self.immortal:
            self.current_health = max(self.current_health - amount, 0.0)

    def heal(self, amount: float) -> None:
        if not self.is_dead():
            self.current_health = min(self.current_health + amount, self.max_health)

    def kill(self) -> None:
        self.current_health = 0.0

    def restore_health(self) -> None:
        self.current_health = self.max_health

    def fire_primary_weapons(self) -> None:
        for weapon in self.primary_weapons:
            weapon.fire()

    def fire_secondary_weapon(self, weapon_index: int) -> bool:
        """Fire a secondary weapon if the slot is filled and energy suffices."""
        if not 0 <= weapon_index < SECONDARY_WEAPON_SLOTS:
            return False
        weapon = self.secondary_weapons[weapon_index]
        if weapon is None or self.current_energy < weapon.energy_consumption:
            return False
        if not weapon.fire():
            return False
        self.current_energy -= weapon.energy_consumption
        return True

    def update_fire_rate(self, amount: float = 1) -> None:
        for weapon in self.primary_weapons:
            weapon.update_weapon_cooldown(amount)

    def add_primary_weapon(self, weapon: Weapon) -> None:
        weapon.owner = self
        weapon.projectile_fired.connect(self._on_projectile_fired)
        self.primary_weapons.append(weapon)

    def set_secondary_weapon(self, weapon: Weapon, weapon_index: int) -> None:
        if not 0 <= weapon_index < SECONDARY_WEAPON_SLOTS:
            raise IndexError(f"secondary weapon slot {weapon_index} does not exist")
        previous = self.secondary_weapons[weapon_index]
        if previous is not None:
            previous.projectile_fired.disconnect(self._on_projectile_fired)
        weapon.owner = self
        weapon.projectile_fired.connect(self._on_projectile_fired)
        self.secondary_weapons[weapon_index] = weapon

    def clear_weapons(self) -> None:
        for weapon in self.primary_weapons:
            weapon.projectile_fired.disconnect(self._on_projectile_fired)
        self.primary_weapons.clear()
        for index, weapon in enumerate(self.secondary_weapons):
            if weapon is not None:
                weapon.projectile_fired.disconnect(self._on_projectile_fired)
                self.secondary_weapons[index] = None

    def fully_restore_energy(self) -> None:
        self.current_energy = self.max_energy

    def fully_restore_health(self) -> None:
        self.current_health = self.max_health

    def regenerate_energy(self, delta_time: float) -> None:
        energy = self.current_energy + self.energy_regeneration_rate * delta_time
        self.current_energy = min(max(energy, 0.0), self.max_energy)

    def play_on_hit_animation(self) -> None:
        """Show the on-hit image for a short while."""
        if self.on_hit_animation_in_progress:
            return
        self._item().pixmap_path = self.on_hit_pixmap_path()
        self.on_hit_animation_in_progress = True
        self._on_hit_started = self._clock()

    def end_on_hit_animation(self) -> None:
        self._item().pixmap_path = self.pixmap_path()
        self.on_hit_animation_in_progress = False

    def initialize_object_type(self) -> None:
        self.object_types.add(ObjectType.SHIP)

    def initialize_destruction_animation(self) -> None:
        offsets = [
            (col * EXPLOSION_SIZE / EXPLOSION_COLUMNS, row * EXPLOSION_SIZE / EXPLOSION_ROWS)
            for row in range(EXPLOSION_ROWS)
            for col in range(EXPLOSION_COLUMNS)
        ]
        self.destruction_animation.spritesheet = EXPLOSION_SPRITESHEET
        self.destruction_animation.set_frame_offsets(offsets)
        self.destruction_animation.frame_size = (self.pixel_width, self.pixel_height)

    def initialize_destruction_effects(self) -> None:
        self.destruction_effect.spawn_particles(self.destruction_particle_count)

    def _on_projectile_fired(self, projectile: Projectile) -> None:
        self.object_created.emit(projectile)


class ShipWithHealthBar(Ship):
    """A ship that shows its health in a bar beneath it."""

    def __init__(
        self,
        max_hp: float,
        speed: float,
        position: Position,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        super().__init__(max_hp, speed, position, clock)
        self.health_bar: HealthBar | None = None
        self.health_bar_offset = HEALTH_BAR_OFFSET

    def initialize(self) -> None:
        super().initialize()
        self.health_bar = HealthBar(
            self.current_health, HEALTH_BAR_WIDTH, HEALTH_BAR_HEIGHT, False
        )

    def take_damage(self, amount: float) -> None:
        bar = self._bar()
        super().take_damage(amount)
        if not self.immortal:
            bar.update_progress(-float(amount))

    def heal(self, amount: float) -> None:
        bar = self._bar()
        super().heal(amount)
        bar.update_progress(amount)

    def kill(self) -> None:
        bar = self._bar()
        super().kill()
        bar.update_progress(-_FULL_BAR_CHANGE)

    def restore_health(self) -> None:
        bar = self._bar()
        super().restore_health()
        bar.update_progress(_FULL_BAR_CHANGE)

    def _bar(self) -> HealthBar:
        if self.health_bar is None:
            raise RuntimeError("ship has not been initialized")
        return self.health_bar