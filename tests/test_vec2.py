import pytest
from hypothesis import given
from hypothesis import strategies as st

from bentods.fixed import Fixed
from bentods.vec2 import Vec2

small = st.integers(min_value=-300, max_value=300)
nonzero = small.filter(lambda n: n != 0)


def test_default_is_origin():
    assert Vec2() == Vec2(0, 0)
    assert Vec2().x == Fixed(0)


def test_coordinates_are_coerced_to_fixed():
    v = Vec2(1, 2.5)
    assert v.x == Fixed(1)
    assert v.y == Fixed(2.5)
    assert isinstance(v.y, Fixed)


def test_assignment_is_coerced():
    v = Vec2()
    v.x = 3
    assert isinstance(v.x, Fixed)
    assert v.x == Fixed(3)


@given(small, small, small)
def test_scalar_addition_and_subtraction(a, b, s):
    v = Vec2(a, b)
    assert v + s == Vec2(a + s, b + s)
    assert (v + s) - s == v


@given(small, small, small)
def test_scalar_multiplication(a, b, k):
    assert Vec2(a, b) * k == Vec2(a * k, b * k)


@given(small, small, nonzero)
def test_scalar_division_undoes_multiplication(a, b, k):
    assert Vec2(a * k, b * k) / k == Vec2(a, b)


def test_in_place_operations_mutate():
    v = Vec2(1, 1)
    alias = v
    v += 2
    assert alias is v
    assert alias == Vec2(1 + 2, 1 + 2)
    v *= 2
    assert alias == Vec2((1 + 2) * 2, (1 + 2) * 2)
    v -= 1
    v /= 5
    assert alias == Vec2(1, 1)


def test_equality():
    assert Vec2(1, 2) == Vec2(1.0, 2.0)
    assert Vec2(1, 2) != Vec2(1, 3)


def test_unsupported_operand_raises():
    with pytest.raises(TypeError):
        Vec2(1, 1) * "x"