"""Game objects pulled towards nearby magnetic objects."""

from __future__ import annotations

from .gameobject import GameObject, Magnetism, ObjectType, UpdateContext
from .position import Position, Vec2

MAGNETIC_ACCELERATION = 100.0


class AttractableGameObject(GameObject):
    """A game object drawn towards magnetic objects of its target types."""

    def __init__(self, position: Position) -> None:
        super().__init__(position)
        self.magnetic_targets: set[ObjectType] = set()
        self.has_initiated_movement = False
        self.stopped = False
        self.damping_factor = 0.9
        self.attraction_enabled = True
        self.magnetic_velocity = Vec2(0.0, 0.0)

    def update(self, context: UpdateContext) -> None:
        super().update(context)
        self.update_movement(context)

    def update_movement(self, context: UpdateContext) -> None:
        if not self.attraction_enabled:
            return
        total_force = Vec2(0.0, 0.0)
        in_range = False
        for target, magnetism in self._magnetic_object_data(context):
            direction = target - self.center_position()
            if direction.length() < magnetism.magnetic_radius:
                in_range = True
                total_force = total_force + direction.normalized() * magnetism.magnetic_strength
        if in_range:
            self.handle_magnetic_movement(total_force, context.delta_time)

    def apply_movement(self, delta_time: float, velocity: Vec2) -> None:
        self.position.x = self.position.x + velocity.x * delta_time
        self.position.y = self.position.y + velocity.y * delta_time

    def handle_magnetic_movement(self, total_force: Vec2, delta_time: float) -> None:
        self.magnetic_velocity = (
            self.magnetic_velocity + total_force.normalized() * MAGNETIC_ACCELERATION
        ) * self.damping_factor
        self.apply_movement(delta_time, self.magnetic_velocity)

    def _magnetic_object_data(
        self, context: UpdateContext
    ) -> list[tuple[Vec2, Magnetism]]:
        return [
            (obj.center_position(), obj.magnetism)
            for obj in context.magnetic_game_objects.values()
            if obj.magnetism.enabled and obj.object_types & self.magnetic_targets
        ]