"""Base game object: position, movement, collisions and destruction."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol

from .animation import AnimatedItem
from .particles import ParticleSystem
from .position import Position, Rect, Vec2


class Signal:
    """A list of callables invoked together when the signal is emitted."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove a slot; raises ValueError if it was never connected."""
        self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


class ObjectType(Enum):
    BASE = auto()
    SHIP = auto()
    PLAYER_SHIP = auto()
    ENEMY_SHIP = auto()
    PROJECTILE = auto()
    PLAYER_PROJECTILE = auto()
    ENEMY_PROJECTILE = auto()
    COLLECTABLE = auto()
    STELLAR_COIN = auto()
    HEALTH = auto()


@dataclass
class Magnetism:
    is_magnetic: bool = False
    enabled: bool = False
    magnetic_radius: float = 0.0
    magnetic_strength: float = 0.0


@dataclass
class UpdateContext:
    delta_time: float
    player_ship: Any = None
    magnetic_game_objects: Mapping[int, GameObject] = field(default_factory=dict)


@dataclass
class PixmapData:
    pixmap_scale: Vec2
    pixmap_resource_path: str
    on_hit_pixmap_resource_path: str = ""
    hud_pixmap_resource_path: str = ""
    keep_aspect_ratio: bool = True


@dataclass
class SoundInfo:
    enabled: bool = True
    effect: str | None = None


@dataclass
class GraphicsItem:
    """The on-screen sprite of a game object."""

    pos: Vec2
    width: float
    height: float
    pixmap_path: str
    visible: bool = True

    def bounding_rect(self) -> Rect:
        return Rect(self.pos.x, self.pos.y, self.width, self.height)


class MovementStrategy(Protocol):
    def move(self, pos: Vec2, anchor: Vec2, delta_time: float) -> tuple[Vec2, Vec2]:
        ...


class StationaryMovementStrategy:
    """Leaves the position where it is."""

    def move(self, pos: Vec2, anchor: Vec2, delta_time: float) -> tuple[Vec2, Vec2]:
        return pos, anchor


_ids = itertools.count()


class GameObject(ABC):
    """Anything that lives in the game scene."""

    def __init__(self, position: Position) -> None:
        self.position = position.copy()
        self.id = next(_ids)
        self.object_types: set[ObjectType] = {ObjectType.BASE}
        self.pixmap_data = PixmapData(Vec2(30, 30), ":/Images/placeholder.png")
        self.graphics_item: GraphicsItem | None = None
        self.has_collided = False
        self.collidable = True
        self.sound_enabled = True
        self.magnetism = Magnetism()
        self.movement_strategy: MovementStrategy = StationaryMovementStrategy()
        self.spawn_sound_info = SoundInfo()
        self.destruction_sound_info = SoundInfo()
        self.destruction_effect = ParticleSystem()
        self.destruction_animation = AnimatedItem()
        self.destruction_initiated = False
        self._collisions: set[int] = set()
        self.object_created = Signal()
        self.object_destroyed = Signal()
        self.sound_requested = Signal()

    @abstractmethod
    def clone(self) -> GameObject:
        """A fresh, uninitialised copy of this object."""

    @abstractmethod
    def initialize_object_type(self) -> None:
        """Add the object's own types to ``object_types``."""

    @abstractmethod
    def initialize_sounds(self) -> None:
        """Set up spawn and destruction sounds."""

    def initialize_destruction_animation(self) -> None:
        """Hook for subclasses that play an animation when destroyed."""

    def initialize_destruction_effects(self) -> None:
        """Hook for subclasses that spawn particles when destroyed."""

    def initialize(self) -> None:
        self.initialize_object_type()
        self.initialize_sounds()
        self._play_sound(self.spawn_sound_info)
        scale = self.pixmap_data.pixmap_scale
        self.graphics_item = GraphicsItem(
            self.position.pos, scale.x, scale.y, self.pixmap_path()
        )
        self.initialize_destruction_animation()
        self.initialize_destruction_effects()

    def should_be_deleted(self) -> bool:
        return self.position.is_beyond_limits(25, 25, 50, 30)

    def collide_with(self, other: GameObject) -> None:
        pass

    def collide_with_projectile(self, projectile: Any) -> None:
        pass

    def collide_with_enemy_ship(self, enemy_ship: Any) -> None:
        pass

    def collide_with_player_ship(self, player_ship: Any) -> None:
        pass

    def collide_with_collectable(self, collectable: Any) -> None:
        pass

    def update(self, context: UpdateContext) -> None:
        if self.is_dead() and not self.destruction_initiated:
            self.execute_destruction_procedure()
        self._apply_movement_strategy(context.delta_time)
        if self.graphics_item is not None:
            self.graphics_item.pos = self.position.pos
        if self.destruction_initiated:
            self.destruction_animation.show_next_frame()
            self.destruction_effect.update(context.delta_time)

    def show(self) -> None:
        self._item().visible = True

    def hide(self) -> None:
        self._item().visible = False

    def bounding_box(self) -> Rect:
        return self._item().bounding_rect()

    def center_position(self) -> Vec2:
        return self.bounding_box().center()

    @property
    def hud_pixmap_path(self) -> str:
        return self.pixmap_data.hud_pixmap_resource_path

    def pixmap_path(self) -> str:
        return self.pixmap_data.pixmap_resource_path

    def on_hit_pixmap_path(self) -> str:
        """The on-hit image, falling back to the regular one."""
        return self.pixmap_data.on_hit_pixmap_resource_path or self.pixmap_path()

    def move_to(self, point: Vec2) -> None:
        self.position.pos = point

    def collide(self, other: GameObject) -> None:
        """Let both objects react to each other, once per pair."""
        if other.id not in self._collisions:
            self.collide_with(other)
            self._collisions.add(other.id)
        if self.id not in other._collisions:
            other.collide_with(self)
            other._collisions.add(self.id)

    def is_colliding_with(self, other: GameObject) -> bool:
        if not self.collidable or not other.collidable:
            return False
        return self.bounding_box().intersects(other.bounding_box())

    def add_object_type(self, object_type: ObjectType) -> None:
        self.object_types.add(object_type)

    def is_dead(self) -> bool:
        return False

    def disable_movement(self) -> None:
        self.movement_strategy = StationaryMovementStrategy()

    def execute_destruction_procedure(self) -> None:
        self.collidable = False
        self.destruction_initiated = True
        self._play_sound(self.destruction_sound_info)
        self.disable_movement()
        if self.destruction_effect:
            self.play_destruction_effects()
        if self.destruction_animation:
            self.play_destruction_animation()
        self.object_destroyed.emit()

    def play_destruction_animation(self) -> None:
        self.hide()
        self.destruction_animation.start()

    def play_destruction_effects(self) -> None:
        rect = self._item().bounding_rect()
        self.destruction_effect.set_position(
            Vec2(self.position.x + rect.width / 2, self.position.y + rect.height / 2)
        )

    def clamp_to_x_bounds(self) -> None:
        if self.position.is_beyond_right():
            self.position.go_to_right_limit()
        elif self.position.is_beyond_left():
            self.position.go_to_left_limit()

    def clamp_to_y_bounds(self) -> None:
        if self.position.is_beyond_top():
            self.position.go_to_top_limit()
        elif self.position.is_beyond_bottom():
            self.position.go_to_bottom_limit()

    def _item(self) -> GraphicsItem:
        if self.graphics_item is None:
            raise RuntimeError("game object has not been initialized")
        return self.graphics_item

    def _apply_movement_strategy(self, delta_time: float) -> None:
        pos, anchor = self.movement_strategy.move(
            self.position.pos, self.position.anchor_pos, delta_time
        )
        self.position.pos = pos
        self.position.anchor_pos = anchor

    def _play_sound(self, info: SoundInfo) -> None:
        if info.enabled and info.effect is not None:
            self.sound_requested.emit(info)