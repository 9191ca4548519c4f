import random

import pytest

from spaceinvaders.particles import (
    Particle,
    ParticleSystem,
    random_color,
    random_velocity,
)
from spaceinvaders.position import Vec2


def test_random_velocity_bounded_by_max_speed():
    rng = random.Random(1)
    for _ in range(100):
        assert random_velocity(50.0, rng).length() <= 50.0 + 1e-9


def test_random_velocity_reproducible_with_seed():
    first = random_velocity(10.0, random.Random(3))
    again = random_velocity(10.0, random.Random(3))
    assert first == again
    assert 0.0 < first.length() <= 10.0 + 1e-9


def test_random_color_channels_in_range():
    rng = random.Random(2)
    for _ in range(50):
        color = random_color(rng)
        assert len(color) == 3
        assert all(0 <= c <= 255 for c in color)


def test_particle_move_uses_velocity():
    p = Particle(Vec2(0, 0), 1.0, (1, 2, 3), velocity=Vec2(10, -4))
    p.move(0.5)
    assert p.position == Vec2(0, 0) + Vec2(10, -4) * 0.5


def test_particle_lifespan_clamps_and_dies():
    p = Particle(Vec2(0, 0), 1.0, (1, 2, 3), velocity=Vec2(0, 0))
    assert p.alpha() == 1.0
    assert not p.is_dead()
    p.update(0.4)
    assert 0.0 < p.alpha() < 1.0
    p.update(5.0)
    assert p.lifespan_left == 0.0
    assert p.is_dead()
    assert p.alpha() == 0.0


def test_empty_system_is_finished_and_falsy():
    system = ParticleSystem()
    assert system.effect_finished()
    assert not system


def test_spawn_count_and_color():
    system = ParticleSystem(random.Random(0))
    system.spawn_particles(5, color=(9, 8, 7))
    assert len(system.particles) == 5
    assert bool(system)
    assert all(p.color == (9, 8, 7) for p in system.particles)


def test_spawn_random_colors_in_range():
    system = ParticleSystem(random.Random(0))
    system.spawn_particles(10)
    assert all(all(0 <= c <= 255 for c in p.color) for p in system.particles)


def test_system_finishes_after_lifespan():
    system = ParticleSystem(random.Random(0))
    system.spawn_particles(3, lifespan=1.0)
    assert not system.effect_finished()
    system.update(0.5)
    assert not system.effect_finished()
    system.update(0.6)
    assert system.effect_finished()


def test_set_position_moves_all_particles():
    system = ParticleSystem(random.Random(0))
    system.spawn_particles(4)
    target = Vec2(30, 40)
    system.set_position(target)
    assert system.position == target
    assert all(p.position == target for p in system.particles)


def test_spawn_uses_current_position():
    system = ParticleSystem(random.Random(0))
    system.set_position(Vec2(5, 6))
    system.spawn_particles(2)
    assert all(p.position == Vec2(5, 6) for p in system.particles)


def test_particles_spread_on_update():
    system = ParticleSystem(random.Random(4))
    system.spawn_particles(2)
    system.update(0.01)
    positions = [p.position for p in system.particles]
    assert positions[0] != positions[1]
    assert system.particles[0].lifespan_left == pytest.approx(0.99)