from .errors import ErrorKind, CalcError, format_error
from .source import CharSource, EOF, NEWLINE
from .parser import parse_number, parse_mono, parse_poly, parse_poly_string
from .stack import PolyStack
from .commands import Command, COMMANDS
from .interpreter import Interpreter, run_calc
