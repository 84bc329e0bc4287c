"""Character cursor over a text stream with row/column tracking."""

from __future__ import annotations

import io
from typing import TextIO

from .errors import CalcError, ErrorKind

EOF = ""
NEWLINE = "\n"


class CharSource:
    """Pull-based reader holding one buffered character.

    `current` is the buffered character (EOF once the stream is exhausted).
    `prev_row`/`prev_col` give the position of `current` itself, while
    `row`/`col` point at the next character to be read.  Errors are
    attributed to (prev_row, prev_col).
    """

    def __init__(self, stream: TextIO | str):
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        elif isinstance(stream, io.TextIOWrapper):
            # Undecodable bytes become single lone-surrogate characters, which
            # the parser rejects like any other unexpected character.
            stream.reconfigure(errors="surrogateescape")
        self.stream = stream
        self.current = "0"  # anything but EOF before the first read
        self.row = 1
        self.col = 1
        self.prev_row = 1
        self.prev_col = 1

    def next_char(self) -> str:
        """Read the next character into `current` and return it."""
        self.current = self.stream.read(1)
        self.prev_row = self.row
        self.prev_col = self.col
        if self.current == NEWLINE:
            self.row += 1
            self.col = 1
        else:
            self.col += 1
        return self.current

    def at_eof(self) -> bool:
        return self.current == EOF

    def at_line_end(self) -> bool:
        return self.current in (NEWLINE, EOF)

    def is_digit(self) -> bool:
        return "0" <= self.current <= "9"

    def is_letter(self) -> bool:
        c = self.current
        return "a" <= c <= "z" or "A" <= c <= "Z"

    def seek_line_end(self) -> None:
        """Skip input up to the end of the current line."""
        while not self.at_line_end():
            self.next_char()

    def error(self, kind: ErrorKind, critical: bool = False) -> CalcError:
        """Build an error attributed to the buffered character."""
        return CalcError(kind, self.prev_row, self.prev_col, critical)
