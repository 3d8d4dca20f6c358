import pytest

from explc.nodes import (
    DataType,
    SemanticError,
    make_array,
    make_connect,
    make_constant,
    make_decl,
    make_type,
    make_variable,
    make_variable_use,
)
from explc.symbols import STATIC_BASE, SymbolTable, dimensions


def test_install_binds_consecutive_addresses():
    table = SymbolTable()
    a = table.install("a", DataType.INT, 1)
    b = table.install("b", DataType.STR, 5)
    c = table.install("c", DataType.INT, 2)
    assert a.binding == 4096
    assert b.binding == a.binding + a.size
    assert c.binding == b.binding + b.size
    assert table.next_address == c.binding + c.size


def test_lookup_missing_returns_none():
    table = SymbolTable()
    table.install("x", DataType.INT, 1)
    assert table.lookup("y") is None
    assert table.lookup("x").name == "x"


def test_redeclaration_raises():
    table = SymbolTable()
    table.install("x", DataType.INT, 1)
    with pytest.raises(SemanticError, match="redeclared"):
        table.install("x", DataType.STR, 1)
    assert len(table) == 1


def test_custom_base():
    table = SymbolTable(base=100)
    assert table.install("p", DataType.INT, 1).binding == 100


def test_dimensions_in_order():
    size = make_connect(make_constant(3), make_constant(4))
    assert dimensions(size) == [3, 4]
    assert dimensions(None) == []


def test_declare_variables_and_array():
    table = SymbolTable()
    a = make_variable("a")
    array = make_array(a, make_variable("m"), make_connect(make_constant(3), make_constant(4)))
    decl = make_decl(make_type(DataType.INT), array)
    table.declare(decl)

    sym_a = table.lookup("a")
    sym_m = table.lookup("m")
    assert sym_a.data_type is DataType.INT
    assert sym_a.size == 1
    assert a.symbol is sym_a
    assert sym_m.dimensions == [3, 4]
    assert sym_m.num_dims == 2
    assert sym_m.size == 3 * 4
    assert sym_m.binding == sym_a.binding + 1
    assert [s.name for s in table] == ["a", "m"]


def test_declare_uses_latest_type():
    table = SymbolTable()
    first = make_decl(make_type(DataType.INT), make_variable("n"))
    second = make_decl(make_type(DataType.STR), make_variable("s"))
    table.declare(make_connect(first, second))
    assert table.lookup("n").data_type is DataType.INT
    assert table.lookup("s").data_type is DataType.STR


def test_declared_symbol_usable_by_variable_use():
    table = SymbolTable()
    table.declare(make_decl(make_type(DataType.STR), make_variable("s")))
    use = make_variable_use(table, "s")
    assert use.data_type is DataType.STR
    assert use.symbol is table.lookup("s")


def test_format_lists_symbols():
    table = SymbolTable()
    table.install("a", DataType.INT, 1)
    table.install("flag", DataType.BOOL, 1)
    table.install("odd", DataType.VOID, 2)
    lines = table.format().splitlines()
    assert lines[0].split() == ["Name", "Type", "Size", "Binding"]
    assert lines[1].split() == ["a", "INT", "1", str(STATIC_BASE)]
    assert lines[2].split()[1] == "BOOL"
    assert lines[3].split()[1] == "NULL"
    assert len(lines) == 4