"""Fixed-width integer semantics for polynomial coefficients.

Coefficients behave like a signed 64-bit C ``long``: every runtime operation
wraps modulo 2^64 back into [LONG_MIN, LONG_MAX].  Overflow is only reported
as an error while parsing input (see calc.parser); arithmetic itself never
raises.

  wrap_long : reduce an arbitrary Python int into the signed 64-bit range
  fast_pow  : integer exponentiation with the same wrapping
"""

from __future__ import annotations

# Limits of the C types the calculator protocol is defined in terms of.
LONG_MIN: int = -(2 ** 63)
LONG_MAX: int = 2 ** 63 - 1
UINT_MAX: int = 2 ** 32 - 1
ULONG_MAX: int = 2 ** 64 - 1

_MODULUS = 2 ** 64


def wrap_long(value: int) -> int:
    """Wrap an integer into the signed 64-bit range (two's complement)."""
    if LONG_MIN <= value <= LONG_MAX:
        return value
    value %= _MODULUS
    if value > LONG_MAX:
        value -= _MODULUS
    return value


def fast_pow(value: int, exp: int) -> int:
    """Return value ** exp with signed 64-bit wrapping.

    Closed forms for 0, 1 and -1 bases; otherwise square-and-multiply, so
    very large exponents cost O(log exp) multiplications.  0 ** 0 == 1.
    """
    if exp < 0:
        raise ValueError(f"Negative exponent {exp}")
    if exp == 0:
        return 1
    if exp == 1:
        return wrap_long(value)
    if value == 0:
        return 0
    if value == 1:
        return 1
    if value == -1:
        return 1 if exp % 2 == 0 else -1
    result = 1
    base = wrap_long(value)
    while exp:
        if exp & 1:
            result = wrap_long(result * base)
        exp >>= 1
        if exp:
            base = wrap_long(base * base)
    return result
