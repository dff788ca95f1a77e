"""Intermediate code as a bounded list of quadruples."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, TextIO

__all__ = [
    "MAX_QUADS",
    "Quadruple",
    "QuadrupleOverflowError",
    "QuadrupleList",
]

MAX_QUADS = 1000
_OP_SIZE = 10
_ARG_SIZE = 50


@dataclass(frozen=True)
class Quadruple:
    """One instruction: operator, two arguments and a result."""

    op: str
    arg1: str = ""
    arg2: str = ""
    result: str = ""

    def format(self) -> str:
        """Return the instruction as (op, arg1, arg2, result), blanks as _."""
        fields = (self.arg1 or "_", self.arg2 or "_", self.result or "_")
        return f"({self.op}, {', '.join(fields)})"


class QuadrupleOverflowError(Exception):
    """Raised when a quadruple list is already full."""


class QuadrupleList:
    """An ordered, size-limited collection of quadruples."""

    def __init__(self, limit: int = MAX_QUADS) -> None:
        self.limit = limit
        self._quads: list[Quadruple] = []

    def add(self, op: str, arg1: str = "", arg2: str = "", result: str = "") -> Quadruple:
        """Append a quadruple, truncating fields to their fixed widths."""
        if len(self._quads) >= self.limit:
            raise QuadrupleOverflowError("Too many quadruples")
        quad = Quadruple(
            op[:_OP_SIZE],
            arg1[:_ARG_SIZE],
            arg2[:_ARG_SIZE],
            result[:_ARG_SIZE],
        )
        self._quads.append(quad)
        return quad

    def __len__(self) -> int:
        return len(self._quads)

    def __iter__(self) -> Iterator[Quadruple]:
        return iter(self._quads)

    def render(self) -> str:
        """Return the listing of all quadruples under a header."""
        lines = ["", "=== Generated Quadruples ==="]
        lines.extend(quad.format() for quad in self._quads)
        return "\n".join(lines) + "\n"

    def print(self, out: TextIO | None = None) -> None:
        """Write the listing to out, standard output by default."""
        (out or sys.stdout).write(self.render())