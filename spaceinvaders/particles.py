"""Particle effects shown when objects are destroyed."""

from __future__ import annotations

import math
import random

from .mathutils import PI
from .position import Vec2

Color = tuple[int, int, int]

MAX_PARTICLE_SPEED = 5000.0


def random_velocity(max_speed: float, rng: random.Random | None = None) -> Vec2:
    """Velocity with a random direction and a speed in [0, max_speed)."""
    rng = rng or random.Random()
    angle = rng.random() * 2 * PI
    speed = rng.random() * max_speed
    return Vec2(math.cos(angle) * speed, math.sin(angle) * speed)


def random_color(rng: random.Random | None = None) -> Color:
    """A random opaque RGB colour."""
    rng = rng or random.Random()
    return (rng.randrange(256), rng.randrange(256), rng.randrange(256))


class Particle:
    """A point that drifts at a constant velocity and fades over its lifespan."""

    def __init__(
        self,
        position: Vec2,
        lifespan: float,
        color: Color,
        velocity: Vec2 | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.position = position
        self.lifespan = lifespan
        self.lifespan_left = lifespan
        self.color = color
        self.velocity = (
            velocity if velocity is not None else random_velocity(MAX_PARTICLE_SPEED, rng)
        )

    def move(self, delta_time: float) -> None:
        self.position = self.position + self.velocity * delta_time

    def is_dead(self) -> bool:
        return self.lifespan_left <= 0

    def alpha(self) -> float:
        """Opacity in [0, 1], proportional to the remaining lifespan."""
        if self.lifespan <= 0:
            return 0.0
        return self.lifespan_left / self.lifespan

    def update(self, delta_time: float) -> None:
        self.move(delta_time)
        self.lifespan_left = max(self.lifespan_left - delta_time, 0.0)


class ParticleSystem:
    """A burst of particles spawned at one position."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.position = Vec2(0.0, 0.0)
        self.particles: list[Particle] = []
        self._effect_finished = False
        self._rng = rng or random.Random()

    def __bool__(self) -> bool:
        return bool(self.particles)

    def update(self, delta_time: float) -> None:
        for particle in self.particles:
            particle.update(delta_time)
        self._effect_finished = all(p.is_dead() for p in self.particles)

    def spawn_particles(
        self, count: int, color: Color | None = None, lifespan: float = 1.0
    ) -> None:
        """Add ``count`` particles; without a colour each gets a random one."""
        for _ in range(count):
            particle_color = color if color is not None else random_color(self._rng)
            self.particles.append(
                Particle(self.position, lifespan, particle_color, rng=self._rng)
            )

    def effect_finished(self) -> bool:
        if not self.particles:
            return True
        return self._effect_finished

    def set_position(self, new_position: Vec2) -> None:
        """Move the system and every particle in it to ``new_position``."""
        for particle in self.particles:
            particle.position = new_position
        self.position = new_position