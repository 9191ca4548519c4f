import pytest

from spaceinvaders.attractable import MAGNETIC_ACCELERATION, AttractableGameObject
from spaceinvaders.gameobject import GameObject, Magnetism, ObjectType, UpdateContext
from spaceinvaders.position import Position, Vec2


class Magnet(GameObject):
    def clone(self):
        return Magnet(self.position)

    def initialize_object_type(self):
        self.object_types.add(ObjectType.PLAYER_SHIP)

    def initialize_sounds(self):
        pass


class Coin(AttractableGameObject):
    def __init__(self, position):
        super().__init__(position)
        self.magnetic_targets = {ObjectType.PLAYER_SHIP}

    def clone(self):
        return Coin(self.position)

    def initialize_object_type(self):
        self.object_types.add(ObjectType.COLLECTABLE)

    def initialize_sounds(self):
        pass


def make_magnet(x=100, y=0, enabled=True, radius=200.0, strength=50.0):
    magnet = Magnet(Position(x, y))
    magnet.magnetism = Magnetism(True, enabled, radius, strength)
    magnet.initialize()
    return magnet


def make_coin(x=0, y=0):
    coin = Coin(Position(x, y))
    coin.initialize()
    return coin


def context(*objects, dt=0.1):
    return UpdateContext(delta_time=dt, magnetic_game_objects={o.id: o for o in objects})


def distance(a, b):
    return (a.center_position() - b.center_position()).length()


def test_pulled_towards_magnet_in_range():
    magnet, coin = make_magnet(), make_coin()
    coin.update(context(magnet))
    assert coin.magnetic_velocity.x == pytest.approx(MAGNETIC_ACCELERATION * 0.9)
    assert coin.magnetic_velocity.y == pytest.approx(0.0)
    assert coin.position.x > 0
    assert coin.position.y == pytest.approx(0.0)


def test_distance_shrinks_over_updates():
    magnet, coin = make_magnet(), make_coin()
    before = distance(magnet, coin)
    for _ in range(3):
        coin.update(context(magnet))
    coin.graphics_item.pos = coin.position.pos
    assert distance(magnet, coin) < before


def test_out_of_range_does_not_move():
    magnet, coin = make_magnet(radius=10.0), make_coin()
    coin.update(context(magnet))
    assert coin.position.pos == Vec2(0, 0)
    assert coin.magnetic_velocity == Vec2(0, 0)


def test_disabled_magnetism_ignored():
    magnet, coin = make_magnet(enabled=False), make_coin()
    coin.update(context(magnet))
    assert coin.position.pos == Vec2(0, 0)


def test_wrong_target_type_ignored():
    magnet, coin = make_magnet(), make_coin()
    coin.magnetic_targets = {ObjectType.PROJECTILE}
    coin.update(context(magnet))
    assert coin.position.pos == Vec2(0, 0)


def test_attraction_disabled():
    magnet, coin = make_magnet(), make_coin()
    coin.attraction_enabled = False
    coin.update(context(magnet))
    assert coin.position.pos == Vec2(0, 0)


def test_opposite_magnets_cancel_direction():
    left = make_magnet(x=-100)
    right = make_magnet(x=100)
    coin = make_coin()
    coin.update(context(left, right))
    assert coin.magnetic_velocity == Vec2(0, 0)
    assert coin.position.pos == Vec2(0, 0)


def test_apply_movement_scales_by_time():
    coin = make_coin(5, 5)
    velocity = Vec2(10, -20)
    coin.apply_movement(0.5, velocity)
    assert coin.position.pos == Vec2(5, 5) + velocity * 0.5


def test_handle_magnetic_movement_damps_velocity():
    coin = make_coin()
    coin.handle_magnetic_movement(Vec2(0, 7), 0.0)
    assert coin.magnetic_velocity.y == pytest.approx(MAGNETIC_ACCELERATION * coin.damping_factor)
    assert coin.position.pos == Vec2(0, 0)