"""Interactive calculator for sparse multivariate polynomials.

Reads a line-oriented language of polynomial literals and stack commands:

    (1,1)+(2,0)      push x0 + 2
    POW 3            replace the top with its cube
    PRINT            print the top in canonical form

Usage: poly-calc [FILE]
"""

from .config import Config
from .core import Poly, Mono, to_cardinal, to_human
from .calc import CalcError, ErrorKind, Interpreter, parse_poly_string, run_calc

__version__ = "0.1.0"

__all__ = (
    'Config', 'Poly', 'Mono', 'to_cardinal', 'to_human',
    'CalcError', 'ErrorKind', 'Interpreter', 'parse_poly_string', 'run_calc',
)
