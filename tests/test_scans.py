import math

from hypothesis import given
from hypothesis import strategies as st

from arraykit.scans import product_except_self, trap


def test_product_except_self_example():
    assert product_except_self([1, 2, 3, 4]) == [24, 12, 8, 6]


def test_product_except_self_with_zero():
    assert product_except_self([-1, 1, 0, -3, 3]) == [0, 0, 9, 0, 0]


def test_product_except_self_edges():
    assert product_except_self([]) == []
    assert product_except_self([7]) == [1]


@given(st.lists(st.integers(min_value=-20, max_value=20), min_size=1, max_size=15))
def test_product_except_self_times_element_is_total(nums):
    total = math.prod(nums)
    result = product_except_self(nums)
    assert len(result) == len(nums)
    assert all(r * x == total for r, x in zip(result, nums))


@given(st.lists(st.integers(min_value=-9, max_value=9), min_size=2, max_size=10))
def test_product_except_self_reverses_with_input(nums):
    assert product_except_self(nums[::-1]) == product_except_self(nums)[::-1]


def test_trap_examples():
    assert trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]) == 6
    assert trap([4, 2, 0, 3, 2, 5]) == 9


def test_trap_empty():
    assert trap([]) == 0


@given(st.integers(min_value=0, max_value=100))
def test_trap_single_valley(depth):
    assert trap([depth, 0, depth]) == depth


@given(st.lists(st.integers(min_value=0, max_value=50)))
def test_trap_monotone_holds_nothing(values):
    assert trap(sorted(values)) == 0
    assert trap(sorted(values, reverse=True)) == 0


@given(st.lists(st.integers(min_value=0, max_value=50)))
def test_trap_symmetric_and_bounded(height):
    water = trap(height)
    assert water == trap(height[::-1])
    assert 0 <= water <= len(height) * max(height, default=0)