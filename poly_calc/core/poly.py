"""Exact sparse multivariate polynomials in recursive form.

A polynomial is a polynomial in one "main" variable whose coefficients are
themselves polynomials in the next variable.  Variable 0 is the main variable
of the value at hand, variable 1 is the main variable of its coefficients, and
so on with nesting depth.

  Poly  =  const + sum(mono.coeff * x^mono.exp for mono in terms)
  Mono  =  (coeff: Poly, exp: int)

Example (variables x0, x1):
  3 + x0^2 * (1 + 2*x1)  →  Poly(3, [Mono(Poly(1, [Mono(Poly(2), 1)]), 2)])

Canonical form, kept by every public function:
  1. exponents in `terms` are unique and strictly ascending;
  2. no term has a zero coefficient;
  3. the free term of the whole value lives in `const`: a term with exponent 0
     is kept only when its coefficient is not a constant, and that coefficient
     (recursively, along its own exponent-0 chain) has a zero `const`;
  4. a Poly with empty `terms` is a "coefficient", i.e. just the integer `const`.

Because of (1)-(4), structural equality coincides with polynomial equality.
Coefficients follow the signed 64-bit semantics of core.numbers.

Operations that return a Poly always build a fresh value and never alias the
internals of their inputs.  insert_mono, scale_const and extract_const_terms
mutate their first argument in place; they are the accumulator primitives used
by mul, at and compose.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .numbers import fast_pow, wrap_long


@dataclass(eq=False)
class Poly:
    """Polynomial: free term plus a sorted list of monomials of the main variable."""

    const: int = 0
    terms: List["Mono"] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int):
            return is_coeff(self) and self.const == other
        if not isinstance(other, Poly):
            return NotImplemented
        return equal(self, other)

    __hash__ = None  # mutable

    def __add__(self, other: Poly | int) -> Poly:
        return add(self, _as_poly(other))

    __radd__ = __add__

    def __sub__(self, other: Poly | int) -> Poly:
        return sub(self, _as_poly(other))

    def __rsub__(self, other: int) -> Poly:
        return sub(_as_poly(other), self)

    def __mul__(self, other: Poly | int) -> Poly:
        return mul(self, _as_poly(other))

    __rmul__ = __mul__

    def __neg__(self) -> Poly:
        return neg(self)

    def __pow__(self, exp: int) -> Poly:
        return pow_poly(self, exp)


@dataclass(eq=False)
class Mono:
    """Monomial coeff * x^exp, where coeff is a polynomial in the next variable."""

    coeff: Poly
    exp: int


def _as_poly(value: Poly | int) -> Poly:
    if isinstance(value, Poly):
        return value
    if isinstance(value, int):
        return make_const(value)
    raise TypeError(f"Cannot use {type(value).__name__} as a polynomial")


# ---------------------------------------------------------------------------
# Construction and queries
# ---------------------------------------------------------------------------

def make_zero() -> Poly:
    """Return the zero polynomial."""
    return Poly(0)


def make_const(c: int) -> Poly:
    """Return the constant polynomial c."""
    return Poly(wrap_long(c))


def make_mono(coeff: Poly, exp: int) -> Mono:
    """Return the monomial coeff * x^exp.  The monomial takes ownership of coeff."""
    if exp < 0:
        raise ValueError(f"Invalid exponent {exp}")
    return Mono(coeff, exp)


def make_var(idx: int) -> Poly:
    """Return the polynomial x_idx (variable at nesting depth idx)."""
    if idx < 0:
        raise ValueError(f"Invalid variable index {idx}")
    p = Poly(0, [Mono(make_const(1), 1)])
    for _ in range(idx):
        p = Poly(0, [Mono(p, 0)])
    return p


def is_coeff(p: Poly) -> bool:
    """True iff p is a constant (has no monomials)."""
    return not p.terms


def is_zero(p: Poly) -> bool:
    """True iff p is the constant 0."""
    return is_coeff(p) and p.const == 0


def get_const_term(p: Poly) -> int:
    return p.const


def clone(p: Poly) -> Poly:
    """Deep copy of p."""
    return Poly(p.const, [Mono(clone(m.coeff), m.exp) for m in p.terms])


# ---------------------------------------------------------------------------
# In-place normalization primitives
# ---------------------------------------------------------------------------

def extract_const_terms(p: Poly) -> int:
    """Remove and return every free term reachable through exponent-0 monomials.

    A coefficient of an exponent-0 monomial contributes its own free term to
    the free term of the parent, and so on down the chain of leading
    exponent-0 monomials.  All extracted constants are zeroed in p; a leading
    monomial whose coefficient becomes 0 is dropped.
    """
    result = p.const
    p.const = 0
    if p.terms and p.terms[0].exp == 0:
        first = p.terms[0]
        result += extract_const_terms(first.coeff)
        if is_zero(first.coeff):
            del p.terms[0]
    return wrap_long(result)


def insert_mono(p: Poly, mono: Mono) -> None:
    """Add the monomial into p in place, keeping p canonical.

    Takes ownership of mono: it is either linked into p, merged into an
    existing monomial of the same exponent, or discarded.
    """
    if mono.exp == 0:
        p.const = wrap_long(p.const + extract_const_terms(mono.coeff))
    if is_zero(mono.coeff):
        return
    terms = p.terms
    # Fast paths: append at the end, prepend at the start.
    if not terms or terms[-1].exp < mono.exp:
        terms.append(mono)
        return
    if terms[0].exp > mono.exp:
        terms.insert(0, mono)
        return
    for i, m in enumerate(terms):
        if m.exp == mono.exp:
            m.coeff = add(m.coeff, mono.coeff)
            if is_zero(m.coeff):
                del terms[i]
            return
        if m.exp > mono.exp:
            terms.insert(i, mono)
            return


def add_monos(monos: Iterable[Mono]) -> Poly:
    """Sum a sequence of monomials.  Takes ownership of every monomial."""
    p = make_zero()
    for mono in monos:
        insert_mono(p, mono)
    return p


def scale_const(p: Poly, c: int) -> Poly:
    """Multiply every coefficient of p by the integer c, in place.  Returns p."""
    if c == 1:
        return p
    c = wrap_long(c)
    p.const = wrap_long(p.const * c)
    kept = []
    for m in p.terms:
        scale_const(m.coeff, c)
        if not is_zero(m.coeff):
            kept.append(m)
    p.terms = kept
    return p


def _absorb(acc: Poly, part: Poly) -> None:
    """acc += part, consuming part."""
    acc.const = wrap_long(acc.const + part.const)
    for mono in part.terms:
        insert_mono(acc, mono)
    part.terms = []


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

def add_scaled(p: Poly, q: Poly, c: int) -> Poly:
    """Return p + c*q in a single ordered merge of both term lists."""
    c = wrap_long(c)
    if c == 0:
        return clone(p)
    result = Poly(wrap_long(p.const + c * q.const))
    p_terms, q_terms = p.terms, q.terms
    i = j = 0
    while i < len(p_terms) or j < len(q_terms):
        mp = p_terms[i] if i < len(p_terms) else None
        mq = q_terms[j] if j < len(q_terms) else None
        if mq is None or (mp is not None and mp.exp < mq.exp):
            result.terms.append(Mono(clone(mp.coeff), mp.exp))
            i += 1
        elif mp is None or mq.exp < mp.exp:
            coeff = scale_const(clone(mq.coeff), c)
            if not is_zero(coeff):
                result.terms.append(Mono(coeff, mq.exp))
            j += 1
        else:
            coeff = add_scaled(mp.coeff, mq.coeff, c)
            if not is_zero(coeff):
                result.terms.append(Mono(coeff, mp.exp))
            i += 1
            j += 1
    return result


def add(p: Poly, q: Poly) -> Poly:
    """Return the polynomial p + q."""
    return add_scaled(p, q, 1)


def sub(p: Poly, q: Poly) -> Poly:
    """Return the polynomial p - q."""
    return add_scaled(p, q, -1)


def neg(p: Poly) -> Poly:
    """Return the polynomial -p."""
    return scale_const(clone(p), -1)


def mul(p: Poly, q: Poly) -> Poly:
    """Return the polynomial p * q.

    Partial products are merged into the accumulator with insert_mono:
    terms of p times the free term of q, terms of q times the free term of p,
    every pair of terms, and finally the product of the free terms.
    """
    result = make_zero()
    if q.const != 0:
        for m in p.terms:
            insert_mono(result, Mono(scale_const(clone(m.coeff), q.const), m.exp))
    if p.const != 0:
        for m in q.terms:
            insert_mono(result, Mono(scale_const(clone(m.coeff), p.const), m.exp))
    for mp in p.terms:
        for mq in q.terms:
            insert_mono(result, Mono(mul(mp.coeff, mq.coeff), mp.exp + mq.exp))
    result.const = wrap_long(result.const + p.const * q.const)
    return result


def pow_poly(p: Poly, exp: int) -> Poly:
    """Return p^exp for a non-negative integer exponent (0^0 == 1)."""
    if exp < 0:
        raise ValueError(f"Negative exponent {exp}")
    if exp == 0:
        return make_const(1)
    if is_coeff(p):
        return make_const(fast_pow(p.const, exp))
    result = make_const(1)
    base = clone(p)
    while exp:
        if exp & 1:
            result = mul(result, base)
        exp >>= 1
        if exp:
            base = mul(base, base)
    return result


# ---------------------------------------------------------------------------
# Degrees and equality
# ---------------------------------------------------------------------------

def _degree_rec(p: Poly, depth: int, var_idx: int, sum_all: bool) -> int:
    ret = 0 if p.const != 0 else -1
    for m in p.terms:
        d = _degree_rec(m.coeff, depth + 1, var_idx, sum_all)
        if sum_all or depth == var_idx:
            d += m.exp
        ret = max(ret, d)
    return ret


def degree(p: Poly) -> int:
    """Total degree of p, all variables counted equally (-1 for zero)."""
    return _degree_rec(p, 0, 0, True)


def degree_by(p: Poly, var_idx: int) -> int:
    """Degree of p with respect to the variable at nesting depth var_idx.

    Returns -1 for the zero polynomial and 0 when the variable does not occur.
    """
    if var_idx < 0:
        raise ValueError(f"Invalid variable index {var_idx}")
    return _degree_rec(p, 0, var_idx, False)


def equal(p: Poly, q: Poly) -> bool:
    """Return True iff p and q represent the same polynomial."""
    if p is q:
        return True
    if p.const != q.const or len(p.terms) != len(q.terms):
        return False
    for mp, mq in zip(p.terms, q.terms):
        if mp.exp != mq.exp or not equal(mp.coeff, mq.coeff):
            return False
    return True


# ---------------------------------------------------------------------------
# Substitution
# ---------------------------------------------------------------------------

def at(p: Poly, x: int) -> Poly:
    """Substitute the main variable of p with the integer x.

    The coefficients of p become the result, so every remaining variable
    index shifts down by one: p(x0, x1, x2, ...) → p(x, x0, x1, ...).
    """
    result = make_const(p.const)
    for m in p.terms:
        part = scale_const(clone(m.coeff), fast_pow(x, m.exp))
        _absorb(result, part)
    return result


def _compose_rec(p: Poly, inputs: Sequence[Poly], depth: int) -> Poly:
    result = make_const(p.const)
    for m in p.terms:
        if depth >= len(inputs) and m.exp > 0:
            continue  # variable substituted by 0
        coeff = _compose_rec(m.coeff, inputs, depth + 1)
        if depth < len(inputs):
            coeff = mul(coeff, pow_poly(inputs[depth], m.exp))
        _absorb(result, coeff)
    return result


def compose(p: Poly, inputs: Sequence[Poly]) -> Poly:
    """Substitute the variable at depth i of p with inputs[i].

    Variables at depths >= len(inputs) are substituted with 0.  With no
    inputs at all, p is returned unchanged (as a copy).
    """
    if not inputs or is_coeff(p):
        return clone(p)
    return _compose_rec(p, inputs, 0)
