"""Collectable items dropped by destroyed enemies."""

from __future__ import annotations

import math
import random
from collections import deque
from typing import Any

from .attractable import AttractableGameObject
from .gameobject import GameObject, ObjectType, SoundInfo, UpdateContext
from .mathutils import PI
from .position import Position, Vec2

HEALTH_COLLECTED_SOUND = "HEALTH_COLLECTED"
STELLAR_COIN_COLLECTED_SOUND = "STELLAR_COIN_COLLECTED"

START_BLINKING_AT = 0.2
BLINK_START_FREQUENCY = 1.0
BLINK_MAX_FREQUENCY = 5.0


class Collectable(AttractableGameObject):
    """An item that scatters, is drawn to the player, and expires with a blink."""

    def __init__(self, position: Position, rng: random.Random | None = None) -> None:
        super().__init__(position)
        self.magnetic_targets = {ObjectType.PLAYER_SHIP}
        self.attraction_enabled = False
        self.collected = False
        self.time_to_live_ms = 30000.0
        self.lifetime_elapsed_ms = 0.0
        self.life_span_exceeded = False
        self.blink_accumulator = 0.0
        self.initial_velocity = Vec2(0.0, 0.0)
        self._rng = rng or random.Random()

    def update(self, context: UpdateContext) -> None:
        self._update_lifetime(context.delta_time)
        self._handle_blinking(context.delta_time)
        self._handle_initial_movement(context.delta_time)
        if context.player_ship:
            super().update(context)

    def should_be_deleted(self) -> bool:
        return (
            GameObject.should_be_deleted(self)
            or self.collected
            or self.life_span_exceeded
        )

    def collide_with_player_ship(self, player_ship: Any) -> None:
        self.collected = True

    def collide_with(self, other: GameObject) -> None:
        other.collide_with_collectable(self)

    def is_dead(self) -> bool:
        return self.collected

    def initialize_object_type(self) -> None:
        self.object_types.add(ObjectType.COLLECTABLE)

    def _update_lifetime(self, delta_time: float) -> None:
        self.lifetime_elapsed_ms += delta_time * 1000
        self.life_span_exceeded = self.lifetime_elapsed_ms >= self.time_to_live_ms

    def _handle_blinking(self, delta_time: float) -> None:
        remaining = 1.0 - self.lifetime_elapsed_ms / self.time_to_live_ms
        if remaining <= START_BLINKING_AT:
            self.blink_accumulator += delta_time
            self._item().visible = self._blink_visible(remaining, self.blink_accumulator)

    @staticmethod
    def _blink_visible(remaining: float, accumulator: float) -> bool:
        adjusted = (START_BLINKING_AT - remaining) / START_BLINKING_AT
        frequency = BLINK_START_FREQUENCY + (
            BLINK_MAX_FREQUENCY - BLINK_START_FREQUENCY
        ) * adjusted
        return int(accumulator * frequency) % 2 == 0

    def _handle_initial_movement(self, delta_time: float) -> None:
        if self.attraction_enabled:
            return
        if not self.has_initiated_movement:
            self._initiate_movement()
        self.initial_velocity = self.initial_velocity * self.damping_factor
        if self.initial_velocity.length() < 0.1:
            self.attraction_enabled = True
        else:
            self.apply_movement(delta_time, self.initial_velocity)

    def _initiate_movement(self) -> None:
        angle = self._rng.uniform(0.0, 2.0 * PI)
        speed = self._rng.randrange(50, 200)
        self.initial_velocity = Vec2(speed * math.cos(angle), speed * math.sin(angle))
        self.has_initiated_movement = True


class Health(Collectable):
    """Restores one point of the player's health."""

    def __init__(self, position: Position, rng: random.Random | None = None) -> None:
        super().__init__(position, rng)
        self.pixmap_data.pixmap_resource_path = ":/Images/health.png"
        self.pixmap_data.pixmap_scale = Vec2(22.0, 22.0)

    def initialize_sounds(self) -> None:
        self.destruction_sound_info = SoundInfo(self.sound_enabled, HEALTH_COLLECTED_SOUND)

    def initialize_object_type(self) -> None:
        super().initialize_object_type()
        self.object_types.add(ObjectType.HEALTH)

    def clone(self) -> Health:
        health = Health(self.position)
        health.pixmap_data = self.pixmap_data
        health.destruction_sound_info = self.destruction_sound_info
        health.object_types = set(self.object_types)
        return health


class Stellar(Collectable):
    """A stellar coin, the in-game currency."""

    def __init__(self, position: Position, rng: random.Random | None = None) -> None:
        super().__init__(position, rng)
        self.pixmap_data.pixmap_resource_path = ":/Images/coin.png"
        self.pixmap_data.pixmap_scale = Vec2(5.0, 5.0)

    def initialize_sounds(self) -> None:
        self.destruction_sound_info = SoundInfo(
            self.sound_enabled, STELLAR_COIN_COLLECTED_SOUND
        )

    def initialize_object_type(self) -> None:
        super().initialize_object_type()
        self.object_types.add(ObjectType.STELLAR_COIN)

    def clone(self) -> Stellar:
        stellar = Stellar(self.position)
        stellar.pixmap_data = self.pixmap_data
        stellar.destruction_sound_info = self.destruction_sound_info
        stellar.object_types = set(self.object_types)
        return stellar


class StellarPool:
    """A first-in first-out pool of initialised stellar coins for reuse."""

    def __init__(self) -> None:
        self._pool: deque[Stellar] = deque()

    def __len__(self) -> int:
        return len(self._pool)

    def get_collectable(self, position: Position) -> Stellar:
        """Take a coin from the pool, or make a new one if it is empty."""
        if not self._pool:
            stellar = Stellar(position)
            stellar.initialize()
            return stellar
        stellar = self._pool.popleft()
        stellar.position = position.copy()
        return stellar

    def return_collectable(self, collectable: Stellar) -> None:
        self._pool.append(collectable)

    def initialize_pool(self, initial_size: int) -> None:
        for _ in range(initial_size):
            stellar = Stellar(Position(0, 0))
            stellar.initialize()
            self._pool.append(stellar)