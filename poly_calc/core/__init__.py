from .numbers import LONG_MIN, LONG_MAX, UINT_MAX, ULONG_MAX, wrap_long, fast_pow
from .poly import (
    Poly, Mono, make_zero, make_const, make_mono, make_var, is_coeff, is_zero,
    get_const_term, clone, extract_const_terms, insert_mono, add_monos, scale_const,
    add, add_scaled, sub, neg, mul, pow_poly, degree, degree_by, equal, at, compose,
)
from .render import var_name, to_cardinal, to_sympy, to_human, to_card
