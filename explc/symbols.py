"""Global symbol table: static storage bindings for declared variables and arrays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .nodes import DataType, Node, NodeType, SemanticError

STATIC_BASE = 4096

_TYPE_NAMES = {
    DataType.INT: "INT",
    DataType.BOOL: "BOOL",
    DataType.STR: "STR",
}


@dataclass
class Symbol:
    """A declared variable: its type, size in words and static address."""

    name: str
    data_type: DataType
    size: int
    binding: int
    is_pointer: bool = False
    dimensions: list[int] = field(default_factory=list)

    @property
    def num_dims(self) -> int:
        return len(self.dimensions)


def dimensions(root: Optional[Node]) -> list[int]:
    """Return the constant array dimensions found in a size tree, left to right."""
    if root is None:
        return []
    if root.node_type is NodeType.CONST:
        return [root.value]
    return dimensions(root.left) + dimensions(root.right)


class SymbolTable:
    """Declared names in declaration order, each bound to consecutive static storage."""

    def __init__(self, base: int = STATIC_BASE) -> None:
        self._symbols: dict[str, Symbol] = {}
        self._next_address = base
        self._current_type = DataType.VOID

    @property
    def next_address(self) -> int:
        """The first address not yet bound to a variable."""
        return self._next_address

    def lookup(self, name: str) -> Optional[Symbol]:
        """Return the entry for a name, or None if it is not declared."""
        return self._symbols.get(name)

    def install(
        self, name: str, data_type: DataType, size: int, is_pointer: bool = False
    ) -> Symbol:
        """Declare a name and bind it to the next free block of storage."""
        if name in self._symbols:
            raise SemanticError("Variable cannot be redeclared!")
        symbol = Symbol(
            name=name,
            data_type=DataType(data_type),
            size=size,
            binding=self._next_address,
            is_pointer=bool(is_pointer),
        )
        self._next_address += size
        self._symbols[name] = symbol
        return symbol

    def declare(self, root: Optional[Node]) -> None:
        """Install every variable and array named in a declaration tree."""
        if root is None:
            return
        kind = root.node_type
        if kind in (NodeType.CONNECT, NodeType.DECL):
            self.declare(root.left)
            self.declare(root.right)
        elif kind is NodeType.TYPE:
            self._current_type = root.data_type
        elif kind is NodeType.VAR:
            symbol = self.install(root.varname, self._current_type, 1, root.is_pointer)
            root.symbol = symbol
            root.data_type = self._current_type
        elif kind is NodeType.ARRAY:
            dims = dimensions(root.right)
            symbol = self.install(
                root.left.varname, self._current_type, math.prod(dims), root.is_pointer
            )
            symbol.dimensions = dims
            root.symbol = symbol
            root.data_type = self._current_type

    def format(self) -> str:
        """Return the table as aligned text, one header line and one line per symbol."""
        lines = [f"{'Name':<15} {'Type':<10} {'Size':<10} {'Binding':<10}"]
        for symbol in self._symbols.values():
            type_name = _TYPE_NAMES.get(symbol.data_type, "NULL")
            lines.append(
                f"{symbol.name:<15} {type_name:<10} {symbol.size:<15d} {symbol.binding:<10d}"
            )
        return "".join(f"{line}\n" for line in lines)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())