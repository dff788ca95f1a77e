import io
from itertools import product
from string import ascii_lowercase

import pytest

from quadsym.symbol_table import (
    TABLE_SIZE,
    DuplicateSymbolError,
    SymbolTable,
    SymbolType,
    symbol_hash,
)
from quadsym.values import Parameter, Value, ValueType


def _int(n):
    return Value(ValueType.INT, n)


def _colliding_names():
    seen = {}
    for letters in product(ascii_lowercase, repeat=2):
        name = "".join(letters)
        index = symbol_hash(name)
        if index in seen:
            return seen[index], name
        seen[index] = name
    raise AssertionError("no collision found")


def test_hash_in_range_and_deterministic():
    for name in ["a", "x", "counter", "very_long_identifier_name" * 10]:
        index = symbol_hash(name)
        assert 0 <= index < TABLE_SIZE
        assert symbol_hash(name) == index


def test_scope_levels():
    root = SymbolTable()
    child = SymbolTable(root)
    grandchild = SymbolTable(child)
    assert (root.scope_level, child.scope_level, grandchild.scope_level) == (0, 1, 2)


def test_insert_and_lookup_marks_used():
    table = SymbolTable()
    symbol = table.insert("x", _int(5))
    assert symbol.is_used is False
    found = table.lookup("x")
    assert found is symbol
    assert found.is_used is True


def test_lookup_missing():
    assert SymbolTable().lookup("nope") is None


def test_duplicate_in_same_scope_raises():
    table = SymbolTable()
    table.insert("x", _int(1))
    with pytest.raises(DuplicateSymbolError):
        table.insert("x", _int(2))


def test_shadowing_in_child_scope():
    root = SymbolTable()
    outer = root.insert("x", _int(1))
    child = SymbolTable(root)
    inner = child.insert("x", _int(2))
    assert child.lookup("x") is inner
    assert root.lookup("x") is outer


def test_lookup_reaches_parent():
    root = SymbolTable()
    outer = root.insert("g", _int(1))
    child = SymbolTable(root)
    assert child.lookup("g") is outer
    assert not child.is_in_current_scope("g")
    assert root.is_in_current_scope("g")


def test_none_arguments_rejected():
    with pytest.raises(ValueError):
        SymbolTable().insert("x", None)


def test_function_params_counted():
    table = SymbolTable()
    params = [Parameter("a", _int(0)), Parameter("b", _int(0))]
    fn = table.insert("f", _int(0), SymbolType.FUNCTION, params)
    assert fn.param_count == 2
    assert [p.name for p in fn.params] == ["a", "b"]


def test_non_function_ignores_params():
    table = SymbolTable()
    var = table.insert("v", _int(0), SymbolType.VARIABLE, [Parameter("a")])
    assert var.param_count == 0
    assert var.params == ()


def test_colliding_names_both_stored():
    first, second = _colliding_names()
    table = SymbolTable()
    a = table.insert(first, _int(1))
    b = table.insert(second, _int(2))
    assert table.lookup(first) is a
    assert table.lookup(second) is b
    names = [s.name for s in table.symbols()]
    assert names.index(second) < names.index(first)


def test_unused_warnings():
    table = SymbolTable()
    table.insert("x", _int(1))
    table.insert("f", _int(0), SymbolType.FUNCTION, [])
    table.insert("k", _int(3), SymbolType.CONSTANT)
    table.insert("used", _int(4))
    table.lookup("used")
    assert sorted(table.unused_warnings()) == sorted(
        [
            "Warning: Variable 'x' declared but not used.",
            "Warning: Function 'f' declared but not called.",
        ]
    )


def test_close_reports_and_empties():
    table = SymbolTable()
    table.insert("x", _int(1))
    err = io.StringIO()
    table.close(err)
    assert err.getvalue() == "Warning: Variable 'x' declared but not used.\n"
    assert list(table.symbols()) == []


def test_render_single_scope():
    table = SymbolTable()
    table.insert("x", _int(5))
    assert table.render() == "\n=== SYMBOL TABLE (Scope Level: 0) ===\n- x [VARIABLE]  Value: 5\n"


def test_render_function_and_parent():
    root = SymbolTable()
    root.insert("f", _int(0), SymbolType.FUNCTION, [Parameter("a")])
    child = SymbolTable(root)
    text = child.render()
    assert text == (
        "\n=== SYMBOL TABLE (Scope Level: 1) ===\n"
        "--- Parent Scope ---\n"
        "\n=== SYMBOL TABLE (Scope Level: 0) ===\n"
        "- f [FUNCTION], 1 params  Value: 0\n"
    )


def test_print_to_console_and_file():
    table = SymbolTable()
    table.insert("s", Value(ValueType.STRING, "hi"), SymbolType.CONSTANT)
    out = io.StringIO()
    symtab = io.StringIO()
    table.print(out, symtab)
    assert out.getvalue() == table.render()
    assert symtab.getvalue() == table.render(for_file=True)
    assert '- s [CONSTANT]  Value: "hi"' in out.getvalue()