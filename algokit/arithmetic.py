"""Small integer arithmetic routines."""

from math import prod

__all__ = ["factorial", "multiply_two_digits"]


def factorial(n: int) -> int:
    """Return ``n!`` for a positive integer ``n``."""
    if n < 1:
        raise ValueError(f"factorial is defined here for n >= 1, got {n}")
    return prod(range(1, n + 1))


def multiply_two_digits(a: int, b: int) -> int:
    """Multiply two numbers of at most two digits using the Karatsuba split.

    Each operand is split into its tens and units digit; three digit
    products are combined into the full result.
    """
    for name, value in (("a", a), ("b", b)):
        if not 0 <= value <= 99:
            raise ValueError(f"{name} must be between 0 and 99, got {value}")
    a_tens, a_units = divmod(a, 10)
    b_tens, b_units = divmod(b, 10)
    high = a_tens * b_tens
    low = a_units * b_units
    middle = (a_tens + a_units) * (b_tens + b_units) - high - low
    return 100 * high + 10 * middle + low