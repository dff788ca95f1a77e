"""Typed values, scoped symbol tables and quadruple intermediate code for small compilers."""

__version__ = "0.1.0"
__all__ = ["values", "quadruples", "symbol_table"]