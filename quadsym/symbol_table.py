"""Scoped symbol tables with unused-symbol warnings."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, TextIO

from quadsym.values import Parameter, Value, format_value, format_value_for_file

__all__ = [
    "TABLE_SIZE",
    "SymbolType",
    "Symbol",
    "DuplicateSymbolError",
    "SymbolTable",
    "symbol_hash",
]

TABLE_SIZE = 101
_ULONG_MASK = 2**64 - 1


def symbol_hash(name: str) -> int:
    """Return the bucket index of a name (djb2, reduced modulo TABLE_SIZE)."""
    h = 5381
    for byte in name.encode():
        h = ((h << 5) + h + byte) & _ULONG_MASK
    return h % TABLE_SIZE


class SymbolType(Enum):
    """The kind of a symbol."""

    FUNCTION = auto()
    VARIABLE = auto()
    CONSTANT = auto()


@dataclass
class Symbol:
    """A named entry in a symbol table."""

    name: str
    value: Value
    sym_type: SymbolType
    param_count: int = 0
    params: tuple[Parameter, ...] = ()
    is_used: bool = False

    @property
    def type_name(self) -> str:
        return self.sym_type.name


class DuplicateSymbolError(Exception):
    """Raised when a name is declared twice in one scope."""


class SymbolTable:
    """One scope of symbols, linked to its enclosing scope."""

    def __init__(self, parent: SymbolTable | None = None) -> None:
        self.parent = parent
        self.scope_level = parent.scope_level + 1 if parent else 0
        self._buckets: list[list[Symbol]] = [[] for _ in range(TABLE_SIZE)]

    def insert(
        self,
        name: str,
        value: Value,
        sym_type: SymbolType = SymbolType.VARIABLE,
        params: Iterable[Parameter] | None = None,
    ) -> Symbol:
        """Declare a symbol in this scope; parameters count only for functions."""
        if name is None or value is None:
            raise ValueError("name and value are required")
        if self.is_in_current_scope(name):
            raise DuplicateSymbolError(f"'{name}' already declared in this scope")
        plist = tuple(params or ()) if sym_type is SymbolType.FUNCTION else ()
        symbol = Symbol(name, value, sym_type, len(plist), plist)
        self._buckets[symbol_hash(name)].insert(0, symbol)
        return symbol

    def lookup(self, name: str) -> Symbol | None:
        """Find a name here or in an enclosing scope and mark it used."""
        index = symbol_hash(name)
        scope: SymbolTable | None = self
        while scope is not None:
            for symbol in scope._buckets[index]:
                if symbol.name == name:
                    symbol.is_used = True
                    return symbol
            scope = scope.parent
        return None

    def is_in_current_scope(self, name: str) -> bool:
        """Return whether the name is declared in this scope itself."""
        return any(s.name == name for s in self._buckets[symbol_hash(name)])

    def symbols(self) -> Iterator[Symbol]:
        """Yield this scope's symbols in bucket order."""
        for bucket in self._buckets:
            yield from bucket

    def unused_warnings(self) -> list[str]:
        """Return warnings for variables and functions never looked up."""
        warnings = []
        for symbol in self.symbols():
            if symbol.is_used:
                continue
            if symbol.sym_type is SymbolType.VARIABLE:
                warnings.append(f"Warning: Variable '{symbol.name}' declared but not used.")
            elif symbol.sym_type is SymbolType.FUNCTION:
                warnings.append(f"Warning: Function '{symbol.name}' declared but not called.")
        return warnings

    def close(self, err: TextIO | None = None) -> None:
        """Report unused symbols to err (standard error by default) and empty the scope."""
        stream = err or sys.stderr
        for warning in self.unused_warnings():
            stream.write(warning + "\n")
        self._buckets = [[] for _ in range(TABLE_SIZE)]

    def render(self, for_file: bool = False) -> str:
        """Return a listing of this scope and every enclosing one."""
        fmt = format_value_for_file if for_file else format_value
        parts: list[str] = []
        scope: SymbolTable | None = self
        while scope is not None:
            parts.append(f"\n=== SYMBOL TABLE (Scope Level: {scope.scope_level}) ===\n")
            for symbol in scope.symbols():
                line = f"- {symbol.name} [{symbol.type_name}]"
                if symbol.sym_type is SymbolType.FUNCTION:
                    line += f", {symbol.param_count} params"
                parts.append(f"{line}  Value: {fmt(symbol.value)}\n")
            if scope.parent is not None:
                parts.append("--- Parent Scope ---\n")
            scope = scope.parent
        return "".join(parts)

    def print(self, out: TextIO | None = None, symtab_file: TextIO | None = None) -> None:
        """Write the listing to out and, if given, its file form to symtab_file."""
        (out or sys.stdout).write(self.render())
        if symtab_file is not None:
            symtab_file.write(self.render(for_file=True))