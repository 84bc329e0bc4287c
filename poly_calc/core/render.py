"""Text renderings of polynomials.

  to_cardinal: canonical "(coeff,exp)+(coeff,exp)" form used by PRINT and
               accepted back by the parser
  to_sympy   : SymPy expression with variables a, b, c, ... by nesting depth
  to_human   : readable infix string built from to_sympy, e.g. "a^2*b + 3"
  to_card    : structural debug form, e.g. "P(C(3), 0, C(1), 2)"
"""

from __future__ import annotations

from typing import List

import sympy

from .poly import Poly, is_coeff
from .numbers import wrap_long

# Variable names use 25 letters a..y as base-25 digits, least significant
# first: depth 0 → "a", 24 → "y", 25 → "ab".
_VAR_BASE = ord("z") - ord("a")


def var_name(depth: int) -> str:
    """Name of the variable at the given nesting depth."""
    chars = []
    while True:
        chars.append(chr(ord("a") + depth % _VAR_BASE))
        depth //= _VAR_BASE
        if depth == 0:
            break
    return "".join(chars)


def _cardinal(p: Poly, free: int) -> str:
    # `free` is a constant pushed down from the parent through an
    # exponent-0 monomial; it is printed as part of that coefficient.
    if is_coeff(p):
        return str(wrap_long(p.const + free))
    const = wrap_long(p.const + free)
    parts: List[str] = []
    for i, mono in enumerate(p.terms):
        if i == 0 and mono.exp == 0:
            parts.append(f"({_cardinal(mono.coeff, const)},0)")
            continue
        if i == 0 and const != 0:
            parts.append(f"({const},0)")
        parts.append(f"({_cardinal(mono.coeff, 0)},{mono.exp})")
    return "+".join(parts)


def to_cardinal(p: Poly) -> str:
    """Canonical text form of p (the PRINT output format)."""
    return _cardinal(p, 0)


def to_sympy(p: Poly, depth: int = 0) -> sympy.Expr:
    """Convert p to a SymPy expression; variable at depth i is named var_name(i)."""
    expr = sympy.Integer(p.const)
    if p.terms:
        x = sympy.Symbol(var_name(depth))
        for mono in p.terms:
            expr += to_sympy(mono.coeff, depth + 1) * x ** mono.exp
    return sympy.expand(expr)


def to_human(p: Poly) -> str:
    """Readable infix form of p, e.g. "a^2*b - 3*c + 1"."""
    expr = to_sympy(p)
    return sympy.sstr(expr, order="lex").replace("**", "^")


def to_card(p: Poly) -> str:
    """Structural debug form of p mirroring its monomial tree."""
    if is_coeff(p):
        return f"C({p.const})"
    parts: List[str] = []
    if p.const != 0:
        parts.append(f"C({p.const}), 0")
    for mono in p.terms:
        parts.append(f"{to_card(mono.coeff)}, {mono.exp}")
    return "P(" + ", ".join(parts) + ")"
