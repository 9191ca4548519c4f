import math

import pytest

from spaceinvaders.position import Position, Rect, Vec2


def test_vec2_arithmetic_round_trip():
    a = Vec2(3, 4)
    b = Vec2(1, 2)
    assert (a + b) - b == a
    assert -(-a) == a
    assert a * 2 == 2 * a


def test_vec2_normalized_has_unit_length():
    v = Vec2(7, -3).normalized()
    assert v.length() == pytest.approx(1.0)


def test_vec2_normalized_zero_stays_zero():
    assert Vec2(0, 0).normalized() == Vec2(0, 0)


def test_vec2_length_is_hypot():
    v = Vec2(5, 12)
    assert v.length() == pytest.approx(math.hypot(5, 12))


def test_rect_edges_and_center():
    r = Rect(10, 20, 30, 40)
    assert r.left == 10
    assert r.top == 20
    assert r.right == 10 + 30
    assert r.bottom == 20 + 40
    c = r.center()
    assert c.x == pytest.approx((r.left + r.right) / 2)
    assert c.y == pytest.approx((r.top + r.bottom) / 2)


def test_rect_intersects_is_symmetric():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_rect_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_position_bounds_from_limits():
    p = Position(10, 20, 0, 100, 0, 50)
    assert p.bounds == Rect(0, 0, 100, 50)
    assert p.pos == Vec2(10, 20)
    assert p.anchor_pos == Vec2(10, 20)


def test_position_default_bounds():
    p = Position(5, 5)
    assert p.bounds == Rect(-1, -1, 0, 0)


def test_top_and_bottom_limits_with_offset():
    p = Position(50, -1, 0, 100, 0, 50)
    assert p.is_beyond_top()
    assert not p.is_beyond_top(2)
    p.y = 51
    assert p.is_beyond_bottom()
    assert not p.is_beyond_bottom(2)


def test_left_and_right_limits_with_offset():
    p = Position(-1, 10, 0, 100, 0, 50)
    assert p.is_beyond_left()
    assert not p.is_beyond_left(2)
    p.x = 101
    assert p.is_beyond_right()
    assert not p.is_beyond_right(2)


def test_is_beyond_any_and_limits():
    p = Position(50, 25, 0, 100, 0, 50)
    assert not p.is_beyond_any()
    p.x = 120
    assert p.is_beyond_any()
    assert p.is_beyond_limits(0, 0, 0, 0)
    assert not p.is_beyond_limits(0, 30, 0, 0)


def test_go_to_limits():
    p = Position(500, 500, 0, 100, 0, 50)
    p.go_to_right_limit()
    assert p.x == p.bounds.right
    p.go_to_bottom_limit()
    assert p.y == p.bounds.bottom
    p.go_to_left_limit()
    assert p.x == p.bounds.left
    p.go_to_top_limit()
    assert p.y == p.bounds.top


def test_copy_is_independent():
    p = Position(1, 2, 0, 10, 0, 10)
    q = p.copy()
    q.x = 9
    assert p.x == 1
    assert q.bounds == p.bounds
    assert q.anchor_pos == p.anchor_pos