"""Integer addition with an explicit overflow policy.

``add`` follows Python's arbitrary-precision ``int``: it never overflows.
``wrapping_add`` reproduces fixed-width two's complement arithmetic for callers
that need the 32-bit behaviour of JVM ``int`` (or any other width).
"""

from __future__ import annotations

DEFAULT_BITS = 32


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def add(a: int, b: int) -> int:
    """Return the arithmetic sum of two integers.

    Examples
    --------
    >>> add(2, 3)
    5
    >>> add(-1, 1)
    0
    >>> add(2**64, 1)
    18446744073709551617
    """
    return _require_int("a", a) + _require_int("b", b)


def wrapping_add(a: int, b: int, *, bits: int = DEFAULT_BITS) -> int:
    """Return ``a + b`` wrapped into the signed range of ``bits`` bits.

    Raises
    ------
    ValueError
        If ``bits`` is not a positive integer.

    Examples
    --------
    >>> wrapping_add(2**31 - 1, 1)
    -2147483648
    >>> wrapping_add(127, 1, bits=8)
    -128
    >>> wrapping_add(2, 3)
    5
    """
    if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
        raise ValueError(f"bits must be a positive integer, got {bits!r}")
    modulus = 1 << bits
    half = modulus >> 1
    total = add(a, b) % modulus
    return total - modulus if total >= half else total


__all__ = ["DEFAULT_BITS", "add", "wrapping_add"]
