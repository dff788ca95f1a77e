# quadsym

This package provides building blocks for the semantic-analysis and code-generation stages of a small compiler. It has three modules:

- `quadsym.values` defines typed values (`Value`, `ValueType`) and function parameters (`Parameter`). It also provides `format_value` and `format_value_for_file`, which give the text forms used in symbol-table listings.
- `quadsym.symbol_table` defines nested scopes (`SymbolTable`) that hold functions, variables and constants (`Symbol`, `SymbolType`). It also provides `DuplicateSymbolError` and the bucket hash `symbol_hash`.
- `quadsym.quadruples` defines a bounded list of `(op, arg1, arg2, result)` instructions (`Quadruple`, `QuadrupleList`, `QuadrupleOverflowError`).

The package uses only the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Values

`Value` is a dataclass with these fields:

- `type`, a `ValueType`: `INT`, `FLOAT`, `STRING`, `BOOL` or `VOID`.
- `data`, the value itself.
- `place`, `false_label` and `end_label`, optional attributes for code generation.
- `is_constant`.

`Parameter` holds a `name` and an optional `value`.

`format_value` renders a value for console output. `format_value_for_file` renders it for a listing file:

- Integers wrap to 32 bits.
- Floats are rounded to single precision and shown with six decimals, for example `2.500000`.
- Strings are quoted.
- Booleans appear as `true` or `false`.
- `VOID` appears as `unknown`.
- A missing value (`None`) shows as `NULL` from `format_value` and as `null` from `format_value_for_file`.

## Symbol tables

```python
from quadsym.symbol_table import SymbolTable, SymbolType, DuplicateSymbolError
from quadsym.values import Value, ValueType

globals_ = SymbolTable(None)            # scope level 0
globals_.insert("x", Value(ValueType.INT, 3), SymbolType.VARIABLE, None)

block = SymbolTable(globals_)           # scope level 1
symbol = block.lookup("x")              # found in the parent; marked as used

try:
    globals_.insert("x", Value(ValueType.INT, 4), SymbolType.VARIABLE, None)
except DuplicateSymbolError as exc:
    print(exc)                          # 'x' already declared in this scope

block.print(None, None)                 # listing of this scope and every enclosing one
for warning in globals_.unused_warnings():
    print(warning)
```

Inserting symbols:

- `insert(name, value, sym_type, params)` declares a symbol in the current scope and returns the new `Symbol`.
- Parameters are kept, and counted in `param_count`, only for `SymbolType.FUNCTION`.
- A missing name or value raises `ValueError`.

Finding symbols:

- `lookup(name)` searches this scope and then each enclosing scope. It marks the symbol it finds as used and returns `None` if no scope has the name.
- `is_in_current_scope(name)` checks this scope only and does not mark anything as used.
- `symbols()` yields the symbols of this scope in bucket order.

Reporting unused symbols:

- `unused_warnings()` returns a warning for every variable that was never used and every function that was never called.
- `close(err)` writes those warnings to `err` (standard error by default) and empties the scope.

Listings:

- `render(for_file)` returns a listing of this scope and every enclosing one.
- Each scope appears under a header `=== SYMBOL TABLE (Scope Level: N) ===`.
- Symbols are written as `- name [TYPE]  Value: ...`. Functions also show `, N params`.
- Scopes are separated by `--- Parent Scope ---`.
- `print(out, symtab_file)` writes the console form to `out` (standard output by default). If `symtab_file` is given, it also writes the file form there.

## Quadruples

```python
from quadsym.quadruples import QuadrupleList

code = QuadrupleList(1000)
code.add("+", "a", "b", "t1")
code.add("=", "t1", "", "c")
print(code.render())
```

Adding quadruples:

- `add` truncates the operator to 10 characters and each argument and the result to 50. It returns the frozen `Quadruple`.
- Adding past the limit raises `QuadrupleOverflowError`. The default limit is `MAX_QUADS`, which is 1000.

Reading the list:

- A `QuadrupleList` supports `len()` and iteration.
- `Quadruple.format()` gives `(op, arg1, arg2, result)` and uses `_` for any empty field.
- `render()` returns the listing under the header `=== Generated Quadruples ===`.
- `print(out)` writes the listing to `out`, which is standard output by default.

## What this package does not do

This is a library of data structures only. It has no lexer, parser or type checker, so nothing fills the tables or emits quadruples on its own. It also has no command-line program. Your own front end creates the scopes, inserts and looks up symbols, and adds quadruples.