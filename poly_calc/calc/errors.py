"""Interpreter error kinds and their diagnostic lines.

Every failure while handling an input line is raised as a CalcError carrying
its kind and the input position it is attributed to.  The driver catches it,
prints format_error(err) to the error stream and either continues with the
next line or, for critical errors, stops.

Diagnostic formats:
  ERROR <row> STACK UNDERFLOW      (likewise WRONG COMMAND/VARIABLE/VALUE/COUNT)
  ERROR <row> <col>                malformed polynomial literal
  TERMINATED                       EXIT command
  UNKNOWN ERROR <row> <col>        anything else
Critical errors other than EXIT are prefixed with "CRITICAL ".
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    STACK_UNDERFLOW = "STACK UNDERFLOW"
    WRONG_COMMAND = "WRONG COMMAND"
    WRONG_VARIABLE = "WRONG VARIABLE"
    WRONG_VALUE = "WRONG VALUE"
    WRONG_COUNT = "WRONG COUNT"
    INVALID_POLY_INPUT = "INVALID POLY INPUT"
    PROCESS_FORCE_RETURN = "TERMINATED"  # raised by EXIT, not a real error
    UNKNOWN = "UNKNOWN"


# Kinds reported as "ERROR <row> <message>".
_ROW_MESSAGES = (
    ErrorKind.STACK_UNDERFLOW,
    ErrorKind.WRONG_COMMAND,
    ErrorKind.WRONG_VARIABLE,
    ErrorKind.WRONG_VALUE,
    ErrorKind.WRONG_COUNT,
)


class CalcError(Exception):
    """An error raised while interpreting one input line.

    Attributes:
        kind:     What went wrong.
        row, col: 1-based position of the input character the error is
                  attributed to.
        critical: Stop the read loop after reporting.
    """

    def __init__(self, kind: ErrorKind, row: int = 0, col: int = 0, critical: bool = False):
        super().__init__(f"{kind.name} at {row}:{col}")
        self.kind = kind
        self.row = row
        self.col = col
        self.critical = critical


def format_error(err: CalcError) -> str:
    """Return the diagnostic line for err (without trailing newline)."""
    if err.kind is ErrorKind.PROCESS_FORCE_RETURN:
        return "TERMINATED"
    prefix = "CRITICAL " if err.critical else ""
    if err.kind in _ROW_MESSAGES:
        return f"{prefix}ERROR {err.row} {err.kind.value}"
    if err.kind is ErrorKind.INVALID_POLY_INPUT:
        return f"{prefix}ERROR {err.row} {err.col}"
    return f"{prefix}UNKNOWN ERROR {err.row} {err.col}"
