import math

import pytest

from gridsearch.vector import (
    Vector2,
    are_equal,
    euclidean_distance,
    manhattan_distance,
    to_radians,
)


def test_manhattan_distance():
    assert manhattan_distance(Vector2(0, 0), Vector2(2, 3)) == 5
    assert manhattan_distance(Vector2(4, 1), Vector2(1, 5)) == 7


def test_euclidean_distance():
    assert math.isclose(euclidean_distance(Vector2(0, 0), Vector2(3, 4)), 5.0)


def test_equality_and_hashing():
    a = Vector2(1, 2)
    b = Vector2(1, 2)
    assert a == b and are_equal(a, b)
    assert a != Vector2(2, 1)
    assert len({a, b, Vector2(2, 1)}) == 2


def test_vector_is_immutable():
    v = Vector2(1, 2)
    with pytest.raises(AttributeError):
        v.x = 5


@pytest.mark.parametrize(
    "x,y",
    [(math.inf, 0), (0, -math.inf), (math.nan, 1), ("1", 2), (None, 0), (True, 0)],
)
def test_rejects_non_finite_or_non_numeric(x, y):
    with pytest.raises(ValueError):
        Vector2(x, y)


def test_of_accepts_pairs_and_vectors():
    v = Vector2(3, 4)
    assert Vector2.of(v) is v
    assert Vector2.of((3, 4)) == v
    assert Vector2.of([3, 4]) == v
    with pytest.raises(ValueError):
        Vector2.of((1, 2, 3))
    with pytest.raises(ValueError):
        Vector2.of(7)


def test_unpacking_and_tuple():
    x, y = Vector2(5, 6)
    assert (x, y) == (5, 6)
    assert Vector2(5, 6).as_tuple() == (5, 6)


def test_length_angle_and_scaling():
    v = Vector2(3, 4)
    assert math.isclose(v.length, 5.0)
    assert math.isclose(Vector2(0, 2).angle, math.pi / 2)
    assert v.scaled(2) == Vector2(6, 8)
    n = v.normalized()
    assert math.isclose(n.length, 1.0)
    assert math.isclose(n.x, 0.6) and math.isclose(n.y, 0.8)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        Vector2(0, 0).normalized()


def test_rotation_and_from_angle():
    r = Vector2(1, 0).rotated(math.pi / 2)
    assert math.isclose(r.x, 0.0, abs_tol=1e-9)
    assert math.isclose(r.y, 1.0)
    f = Vector2.from_angle(to_radians(180))
    assert math.isclose(f.x, -1.0)
    assert math.isclose(f.y, 0.0, abs_tol=1e-9)


def test_dot_product():
    assert Vector2.dot(Vector2(1, 2), Vector2(3, 4)) == 11
    assert Vector2.dot(Vector2(1, 0), Vector2(0, 1)) == 0
