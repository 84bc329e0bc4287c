"""Randomized checks of the polynomial model against SymPy.

Random polynomials use small coefficients, exponents and nesting depth, so no
result leaves the signed 64-bit range and SymPy's exact integers are a valid
reference.
"""

import random

import pytest
import sympy

from poly_calc.calc.parser import parse_poly_string
from poly_calc.core.poly import (
    Mono, add, at, clone, compose, degree, degree_by, equal, insert_mono, is_coeff,
    is_zero, make_const, mul, neg, pow_poly, sub,
)
from poly_calc.core.render import to_cardinal, to_sympy

SEEDS = range(20)
A, B, C = sympy.symbols("a b c")


def random_poly(rng, depth=2):
    p = make_const(rng.randint(-5, 5))
    if depth == 0:
        return p
    for _ in range(rng.randint(0, 3)):
        insert_mono(p, Mono(random_poly(rng, depth - 1), rng.randint(0, 3)))
    return p


def check_canonical(p):
    exps = [m.exp for m in p.terms]
    assert exps == sorted(set(exps))
    for i, m in enumerate(p.terms):
        assert not is_zero(m.coeff)
        if m.exp == 0:
            assert i == 0
            assert not is_coeff(m.coeff)
            assert m.coeff.const == 0
        check_canonical(m.coeff)


def same(p, expr):
    check_canonical(p)
    return sympy.expand(to_sympy(p) - expr) == 0


@pytest.mark.parametrize("seed", SEEDS)
class TestAgainstSympy:
    def test_random_polys_are_canonical(self, seed):
        check_canonical(random_poly(random.Random(seed)))

    def test_add_sub_neg(self, seed):
        rng = random.Random(seed)
        p, q = random_poly(rng), random_poly(rng)
        ep, eq = to_sympy(p), to_sympy(q)
        assert same(add(p, q), ep + eq)
        assert same(sub(p, q), ep - eq)
        assert same(neg(p), -ep)
        assert is_zero(sub(p, clone(p)))

    def test_mul(self, seed):
        rng = random.Random(seed)
        p, q = random_poly(rng), random_poly(rng)
        assert same(mul(p, q), to_sympy(p) * to_sympy(q))

    def test_pow(self, seed):
        rng = random.Random(seed)
        p = random_poly(rng, depth=1)
        e = rng.randint(0, 4)
        assert same(pow_poly(p, e), to_sympy(p) ** e)

    def test_degrees(self, seed):
        p = random_poly(random.Random(seed))
        expr = to_sympy(p)
        if expr == 0:
            assert degree(p) == -1
            return
        assert degree(p) == sympy.Poly(expr, A, B, C).total_degree()
        for i, sym in enumerate((A, B, C)):
            assert degree_by(p, i) == sympy.degree(expr, sym)

    def test_at(self, seed):
        rng = random.Random(seed)
        p = random_poly(rng)
        x = rng.randint(-3, 3)
        expected = to_sympy(p).subs(A, x).subs({B: A, C: B}, simultaneous=True)
        assert same(at(p, x), expected)

    def test_compose(self, seed):
        rng = random.Random(seed)
        p = random_poly(rng)
        inputs = [random_poly(rng, depth=1) for _ in range(rng.randint(1, 3))]
        values = [to_sympy(q) for q in inputs] + [0, 0, 0]
        expected = to_sympy(p).subs(dict(zip((A, B, C), values)), simultaneous=True)
        assert same(compose(p, inputs), expected)

    def test_ring_laws(self, seed):
        rng = random.Random(seed)
        p, q, r = random_poly(rng), random_poly(rng), random_poly(rng)
        assert equal(add(p, make_const(0)), p)
        assert equal(add(p, q), add(q, p))
        assert equal(add(add(p, q), r), add(p, add(q, r)))
        assert equal(mul(p, q), mul(q, p))
        assert equal(mul(p, add(q, r)), add(mul(p, q), mul(p, r)))

    def test_power_laws(self, seed):
        rng = random.Random(seed)
        p = random_poly(rng, depth=1)
        a, b = rng.randint(0, 2), rng.randint(0, 2)
        assert equal(pow_poly(p, 1), clone(p))
        assert equal(pow_poly(p, a + b), mul(pow_poly(p, a), pow_poly(p, b)))

    def test_evaluation_is_linear(self, seed):
        rng = random.Random(seed)
        p, q = random_poly(rng), random_poly(rng)
        x = rng.randint(-4, 4)
        assert equal(at(add(p, q), x), add(at(p, x), at(q, x)))

    def test_cardinal_parses_back(self, seed):
        p = random_poly(random.Random(seed))
        assert equal(parse_poly_string(to_cardinal(p)), p)
