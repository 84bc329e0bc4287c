"""Line-oriented calculator session.

Interpreter reads its input one line at a time.  A line starting with an
ASCII letter is a command (see calc.commands); any other non-empty line is a
polynomial literal that gets pushed onto the stack.  Results go to stdout,
diagnostics to stderr.

Usage:
    calc = Interpreter(stdin=sys.stdin)
    exit_code = calc.run()

    out, err, code = run_calc("(1,1)\\nPOW 3\\nPRINT\\n")   # out == "(1,3)\\n"
"""

from __future__ import annotations

import io
import sys
from typing import Optional, TextIO, Tuple

from ..config import Config
from .commands import COMMANDS
from .errors import CalcError, ErrorKind, format_error
from .parser import parse_number, parse_poly
from .source import CharSource, EOF, NEWLINE
from .stack import PolyStack


class Interpreter:
    """One calculator session: input cursor, polynomial stack and output streams."""

    def __init__(
        self,
        config: Optional[Config] = None,
        stdin: TextIO | str | None = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        """Initialize an empty session.

        Args:
            config: Protocol limits; defaults to Config().
            stdin:  Input stream or a string holding the whole input.
            stdout: Stream for command results (default sys.stdout).
            stderr: Stream for diagnostics (default sys.stderr).
        """
        self.config = config or Config()
        self.source = CharSource(sys.stdin if stdin is None else stdin)
        self.stack = PolyStack()
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    # --- helpers used by command actions ---

    def emit(self, value) -> None:
        print(value, file=self.stdout)

    def require(self, count: int) -> None:
        """Fail with STACK_UNDERFLOW unless at least `count` polynomials are stacked."""
        if len(self.stack) < count:
            raise self.source.error(ErrorKind.STACK_UNDERFLOW)

    def expect_line_end(self, kind: ErrorKind = ErrorKind.WRONG_COMMAND) -> None:
        if not self.source.at_line_end():
            raise self.source.error(kind)

    def parse_argument(self, kind: ErrorKind, minimum: int, maximum: int) -> int:
        """Parse the numeric argument of a command; it must end the line."""
        value = parse_number(self.source, kind, minimum, maximum)
        self.expect_line_end(kind)
        return value

    # --- line handling ---

    def parse_command(self) -> None:
        """Read a command token, check its arity and run it."""
        src = self.source
        token = []
        while src.current not in (" ", NEWLINE, EOF):
            if len(token) >= self.config.max_command_length:
                raise src.error(ErrorKind.WRONG_COMMAND)
            token.append(src.current)
            src.next_char()
        if src.current == " ":
            src.next_char()
        command = COMMANDS.get("".join(token))
        if command is None:
            raise src.error(ErrorKind.WRONG_COMMAND)
        self.require(command.required_params)
        command.action(self)

    def read_line(self) -> None:
        """Process one input line.  Raises CalcError on failure."""
        src = self.source
        src.next_char()
        if src.at_line_end():
            return
        try:
            if src.is_letter():
                self.parse_command()
                self.expect_line_end(ErrorKind.WRONG_COMMAND)
            else:
                p = parse_poly(src, self.config)
                self.expect_line_end(ErrorKind.INVALID_POLY_INPUT)
                self.stack.push(p)
        except RecursionError:
            raise src.error(ErrorKind.UNKNOWN, critical=True) from None

    def run(self) -> int:
        """Process the whole input.  Returns the process exit code."""
        while not self.source.at_eof():
            try:
                self.read_line()
            except CalcError as err:
                print(format_error(err), file=self.stderr)
                if err.critical:
                    return 1
                self.source.seek_line_end()
        return 0


def run_calc(text: str, config: Optional[Config] = None) -> Tuple[str, str, int]:
    """Run a whole session over `text`.  Returns (stdout, stderr, exit_code)."""
    out, err = io.StringIO(), io.StringIO()
    code = Interpreter(config, stdin=text, stdout=out, stderr=err).run()
    return out.getvalue(), err.getvalue(), code
