"""Recursive-descent parser for polynomial literals.

Grammar (one literal, read from a CharSource):

  poly  ::= integer | "(" mono ")" ( "+" "(" mono ")" )*
  mono  ::= ( poly | integer ) "," exponent

A bare integer is the whole polynomial; "+" only joins parenthesized
monomials.  Every parsed monomial goes through insert_mono, so the result is
canonical.  Any violation raises CalcError(INVALID_POLY_INPUT) at the
offending character.
"""

from __future__ import annotations

from typing import Optional

from ..config import Config
from ..core.poly import Mono, Poly, insert_mono, make_const, make_mono, make_zero
from .errors import ErrorKind
from .source import CharSource


def parse_number(source: CharSource, error_kind: ErrorKind, minimum: int, maximum: int) -> int:
    """Parse an optionally negative decimal integer within [minimum, maximum].

    Digits are accumulated one at a time and the first digit that would take
    the value out of bounds is rejected.  An input with no digits is rejected
    as well.  Failures raise CalcError(error_kind); the caller decides which
    kind a malformed number is reported as.
    """
    negative = False
    if source.current == "-":
        source.next_char()
        negative = True
    if not source.is_digit():
        raise source.error(error_kind)
    value = 0
    while source.is_digit():
        delta = ord(source.current) - ord("0")
        value = value * 10 - delta if negative else value * 10 + delta
        if value < minimum or value > maximum:
            raise source.error(error_kind)
        source.next_char()
    return value


def _starts_number(source: CharSource) -> bool:
    return source.current == "-" or source.is_digit()


def parse_mono(source: CharSource, config: Config) -> Mono:
    """Parse `coeff,exp` (the inside of a parenthesized monomial)."""
    if _starts_number(source):
        value = parse_number(source, ErrorKind.INVALID_POLY_INPUT, config.coeff_min, config.coeff_max)
        coeff = make_const(value)
    elif source.current == "(":
        coeff = parse_poly(source, config)
    else:
        raise source.error(ErrorKind.INVALID_POLY_INPUT)
    if source.current != ",":
        raise source.error(ErrorKind.INVALID_POLY_INPUT)
    source.next_char()
    exp = parse_number(source, ErrorKind.INVALID_POLY_INPUT, config.exp_min, config.exp_max)
    return make_mono(coeff, exp)


def parse_poly(source: CharSource, config: Config) -> Poly:
    """Parse one polynomial starting at the buffered character.

    Stops at the first character that cannot continue the literal; checking
    what follows is up to the caller.
    """
    if _starts_number(source):
        value = parse_number(source, ErrorKind.INVALID_POLY_INPUT, config.coeff_min, config.coeff_max)
        return make_const(value)
    if source.current != "(":
        raise source.error(ErrorKind.INVALID_POLY_INPUT)
    p = make_zero()
    while True:
        source.next_char()  # "("
        mono = parse_mono(source, config)
        if source.current != ")":
            raise source.error(ErrorKind.INVALID_POLY_INPUT)
        source.next_char()
        insert_mono(p, mono)
        if source.current != "+":
            return p
        source.next_char()
        if source.current != "(":
            raise source.error(ErrorKind.INVALID_POLY_INPUT)


def parse_poly_string(text: str, config: Optional[Config] = None) -> Poly:
    """Parse a complete literal from a string, e.g. "(1,2)+((3,1),4)"."""
    source = CharSource(text)
    source.next_char()
    p = parse_poly(source, config or Config())
    if not source.at_line_end():
        raise source.error(ErrorKind.INVALID_POLY_INPUT)
    return p
