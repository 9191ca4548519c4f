"""Projectiles fired by weapons, and a builder for projectile prototypes."""

from __future__ import annotations

import copy
from dataclasses import replace
from enum import Enum, auto
from typing import Any

from .gameobject import (
    GameObject,
    Magnetism,
    MovementStrategy,
    ObjectType,
    PixmapData,
    SoundInfo,
    StationaryMovementStrategy,
    UpdateContext,
)
from .position import Position, Vec2

LASER_SOUND = "LASER"
LESSER_ENEMY_LASER_SOUND = "LESSER_ENEMY_LASER"
VORTEX_CANNON_SOUND = "VORTEX_CANNON"


class ProjectileProperty(Enum):
    PIERCING = auto()
    HOMING = auto()


class BuilderError(RuntimeError):
    """Raised when a builder is used before it has something to build."""


class Projectile(GameObject):
    """A projectile that deals damage and disappears on its first hit."""

    def __init__(
        self,
        damage: int = 1,
        properties: set[ProjectileProperty] | None = None,
    ) -> None:
        super().__init__(Position(0, 0))
        self.damage = damage
        self.properties: set[ProjectileProperty] = set(properties or ())

    def _copy_state_into(self, projectile: Projectile) -> Projectile:
        projectile.object_types = set(self.object_types)
        projectile.magnetism = replace(self.magnetism)
        projectile.spawn_sound_info = replace(self.spawn_sound_info)
        projectile.destruction_sound_info = replace(self.destruction_sound_info)
        projectile.damage = self.damage
        projectile.properties = set(self.properties)
        projectile.pixmap_data = replace(self.pixmap_data)
        projectile.movement_strategy = copy.deepcopy(self.movement_strategy)
        return projectile

    def clone(self) -> Projectile:
        return self._copy_state_into(Projectile())

    def should_be_deleted(self) -> bool:
        piercing = ProjectileProperty.PIERCING in self.properties
        return super().should_be_deleted() or (not piercing and self.has_collided)

    def collide_with(self, other: GameObject) -> None:
        other.collide_with_projectile(self)

    def collide_with_enemy_ship(self, enemy_ship: Any) -> None:
        self.has_collided = True

    def collide_with_player_ship(self, player_ship: Any) -> None:
        self.has_collided = True

    def add_property(self, prop: ProjectileProperty) -> None:
        self.properties.add(prop)

    def remove_property(self, prop: ProjectileProperty) -> None:
        self.properties.discard(prop)

    def initialize_object_type(self) -> None:
        self.object_types.add(ObjectType.PROJECTILE)

    def initialize_sounds(self) -> None:
        pass


class EnemyProjectile(Projectile):
    """A projectile fired by an enemy."""


class PlayerProjectile(Projectile):
    """A projectile fired by the player."""


class EnemyLaserProjectile(Projectile):
    """The basic laser shot of enemy ships."""

    def clone(self) -> EnemyLaserProjectile:
        laser = EnemyLaserProjectile()
        laser.pixmap_data = replace(self.pixmap_data)
        laser.damage = self.damage
        laser.properties = set(self.properties)
        laser.movement_strategy = copy.deepcopy(self.movement_strategy)
        return laser

    def initialize_object_type(self) -> None:
        super().initialize_object_type()
        self.object_types.add(ObjectType.ENEMY_PROJECTILE)

    def initialize_sounds(self) -> None:
        self.spawn_sound_info = SoundInfo(self.sound_enabled, LESSER_ENEMY_LASER_SOUND)


class PlayerLaserProjectile(Projectile):
    """The basic laser shot of the player ship."""

    def __init__(
        self,
        damage: int = 1,
        properties: set[ProjectileProperty] | None = None,
    ) -> None:
        super().__init__(damage, properties)
        self.pixmap_data.pixmap_resource_path = ":/Images/player_laser_projectile.png"
        self.pixmap_data.pixmap_scale = Vec2(30, 30)

    def clone(self) -> PlayerLaserProjectile:
        laser = PlayerLaserProjectile()
        laser.damage = self.damage
        laser.properties = set(self.properties)
        laser.movement_strategy = copy.deepcopy(self.movement_strategy)
        return laser

    def initialize_object_type(self) -> None:
        super().initialize_object_type()
        self.object_types.add(ObjectType.PLAYER_PROJECTILE)

    def initialize_sounds(self) -> None:
        self.spawn_sound_info = SoundInfo(self.sound_enabled, LASER_SOUND)


class Vortex(Projectile):
    """An orb that becomes a black hole pulling in enemies when it hits one."""

    TIME_TO_LIVE_SECONDS = 5.0
    ON_HIT_SCALE = Vec2(100, 100)

    def __init__(self) -> None:
        super().__init__()
        self.time_to_live = self.TIME_TO_LIVE_SECONDS
        self.time_since_spawn = 0.0
        self.magnetism = Magnetism(True, False, 200, 200)
        self.spawn_sound_info = SoundInfo(True, VORTEX_CANNON_SOUND)
        self.pixmap_data.pixmap_resource_path = ":/Images/black_orb.png"
        self.pixmap_data.on_hit_pixmap_resource_path = ":/Images/black_hole.png"
        self.pixmap_data.hud_pixmap_resource_path = ":/Images/black_hole_hud.png"
        self.pixmap_data.pixmap_scale = Vec2(25, 25)

    def update(self, context: UpdateContext) -> None:
        super().update(context)
        self.time_since_spawn += context.delta_time

    def collide_with_enemy_ship(self, enemy_ship: Any) -> None:
        item = self._item()
        self.magnetism.enabled = True
        self.collidable = False
        self.pixmap_data.pixmap_scale = self.ON_HIT_SCALE
        item.pixmap_path = self.on_hit_pixmap_path()
        item.width = self.ON_HIT_SCALE.x
        item.height = self.ON_HIT_SCALE.y
        self.disable_movement()

    def should_be_deleted(self) -> bool:
        return (
            GameObject.should_be_deleted(self)
            or self.time_since_spawn >= self.time_to_live
        )

    def clone(self) -> Vortex:
        return self._copy_state_into(Vortex())


class WaveOfDestruction(Projectile):
    """A wide wave that sweeps the whole screen vertically."""

    def __init__(self) -> None:
        super().__init__()
        self.spawn_sound_info.enabled = False
        self.pixmap_data.pixmap_resource_path = ":/Images/wave.png"
        self.pixmap_data.hud_pixmap_resource_path = ":/Images/wave_of_destruction_hud.png"
        self.pixmap_data.pixmap_scale = Vec2(250, 20)
        self.pixmap_data.keep_aspect_ratio = False

    def should_be_deleted(self) -> bool:
        return self.position.is_beyond_bottom(50) or self.position.is_beyond_top(50)

    def clone(self) -> WaveOfDestruction:
        return self._copy_state_into(WaveOfDestruction())


class ProjectileBuilder:
    """Fluent builder that configures a projectile prototype and clones it."""

    def __init__(self) -> None:
        self._projectile: Projectile | None = None

    def _require(self) -> Projectile:
        if self._projectile is None:
            raise BuilderError(
                "create_projectile must be called before setting any projectile properties."
            )
        return self._projectile

    def clone(self) -> ProjectileBuilder:
        builder = ProjectileBuilder()
        builder._projectile = self._require().clone()
        return builder

    def create_projectile(self, projectile_type: type[Projectile]) -> ProjectileBuilder:
        projectile = projectile_type()
        projectile.movement_strategy = StationaryMovementStrategy()
        projectile.damage = 1
        self._projectile = projectile
        return self

    def with_object_type(self, object_type: ObjectType) -> ProjectileBuilder:
        if self._projectile is not None:
            self._projectile.add_object_type(object_type)
        return self

    def with_damage(self, damage: int) -> ProjectileBuilder:
        self._require().damage = damage
        return self

    def with_movement_strategy(self, strategy: MovementStrategy) -> ProjectileBuilder:
        self._require().movement_strategy = strategy
        return self

    def with_property(self, prop: ProjectileProperty) -> ProjectileBuilder:
        self._require().add_property(prop)
        return self

    def with_spawn_sound(self, spawn_sound: SoundInfo) -> ProjectileBuilder:
        if self._projectile is not None:
            self._projectile.spawn_sound_info = spawn_sound
        return self

    def with_destruction_sound(self, destruction_sound: SoundInfo) -> ProjectileBuilder:
        if self._projectile is not None:
            self._projectile.destruction_sound_info = destruction_sound
        return self

    def with_graphics(self, pixmap_data: PixmapData) -> ProjectileBuilder:
        if self._projectile is not None:
            self._projectile.pixmap_data = pixmap_data
        return self

    def build(self) -> Projectile:
        """A new copy of the configured projectile."""
        return self._require().clone()