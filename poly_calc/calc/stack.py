"""LIFO stack of polynomials owned by an interpreter session."""

from __future__ import annotations

from typing import Iterator, List

from ..core.poly import Poly
from .errors import CalcError, ErrorKind


class PolyStack:
    """Plain stack: the last pushed polynomial is the top."""

    def __init__(self) -> None:
        self._items: List[Poly] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Poly]:
        """Iterate bottom to top."""
        return iter(self._items)

    def push(self, p: Poly) -> None:
        self._items.append(p)

    def pop(self) -> Poly:
        if not self._items:
            raise CalcError(ErrorKind.STACK_UNDERFLOW)
        return self._items.pop()

    def peek(self, depth: int = 0) -> Poly:
        """Return the polynomial `depth` places below the top without removing it."""
        if depth < 0 or depth >= len(self._items):
            raise CalcError(ErrorKind.STACK_UNDERFLOW)
        return self._items[-1 - depth]

    def clear(self) -> None:
        self._items.clear()
