import pytest
from hypothesis import given, strategies as st

from algokit.arithmetic import factorial, multiply_two_digits


def test_factorial_of_five():
    assert factorial(5) == 120


def test_factorial_of_one():
    assert factorial(1) == 1


@given(st.integers(min_value=1, max_value=60))
def test_factorial_recurrence(n):
    assert factorial(n + 1) == (n + 1) * factorial(n)


@pytest.mark.parametrize("n", [0, -1, -10])
def test_factorial_rejects_non_positive(n):
    with pytest.raises(ValueError):
        factorial(n)


@given(st.integers(min_value=0, max_value=99), st.integers(min_value=0, max_value=99))
def test_multiply_matches_product(a, b):
    assert multiply_two_digits(a, b) == a * b


@given(st.integers(min_value=0, max_value=99), st.integers(min_value=0, max_value=99))
def test_multiply_is_commutative(a, b):
    assert multiply_two_digits(a, b) == multiply_two_digits(b, a)


@pytest.mark.parametrize("a, b", [(100, 1), (1, 100), (-1, 5), (5, -1)])
def test_multiply_rejects_out_of_range(a, b):
    with pytest.raises(ValueError):
        multiply_two_digits(a, b)