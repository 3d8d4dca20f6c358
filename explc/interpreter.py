"""Direct tree-walking interpreter for programs over the variables a to z."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from .nodes import Node, NodeType

VARIABLE_COUNT = 26


def variable_index(node: Node) -> int:
    """Return the storage slot of a variable: its first letter's offset from 'a'."""
    name = node.varname
    if not name or not ("a" <= name[0] <= "z"):
        raise ValueError(f"variable name {name!r} must start with a lowercase letter")
    return ord(name[0]) - ord("a")


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_ARITHMETIC = {
    NodeType.ADD: lambda a, b: a + b,
    NodeType.SUB: lambda a, b: a - b,
    NodeType.MUL: lambda a, b: a * b,
    NodeType.DIV: _truncating_div,
}

_COMPARISONS = {
    NodeType.LT: lambda a, b: a < b,
    NodeType.GT: lambda a, b: a > b,
    NodeType.LE: lambda a, b: a <= b,
    NodeType.GE: lambda a, b: a >= b,
    NodeType.NE: lambda a, b: a != b,
    NodeType.EQ: lambda a, b: a == b,
}


class Interpreter:
    """Evaluates syntax trees, reading integers from one stream and writing to another."""

    def __init__(self, input: Optional[TextIO] = None, output: Optional[TextIO] = None) -> None:
        self._input = input if input is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self._tokens: Iterator[str] = self._read_tokens()
        self.variables: list[int] = [0] * VARIABLE_COUNT

    def _read_tokens(self) -> Iterator[str]:
        for line in self._input:
            yield from line.split()

    def _read_int(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise EOFError("no more input to read") from None
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def value(self, name: str) -> int:
        """Return the current value of a variable by name."""
        return self.variables[variable_index(Node(NodeType.VAR, varname=name))]

    def run(self, root: Optional[Node]) -> None:
        """Clear all variables to zero, then execute the program."""
        self.variables = [0] * VARIABLE_COUNT
        self.evaluate(root)

    def evaluate(self, node: Optional[Node]) -> Optional[int]:
        """Evaluate an expression to an int, or execute a statement and return None."""
        if node is None:
            return None
        kind = node.node_type
        if kind in _ARITHMETIC:
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            return _ARITHMETIC[kind](left, right)
        if kind in _COMPARISONS:
            left = self.evaluate(node.left)
            right = self.evaluate(node.right)
            return int(_COMPARISONS[kind](left, right))
        if kind is NodeType.CONST:
            return node.value
        if kind is NodeType.VAR:
            return self.variables[variable_index(node)]
        if kind is NodeType.CONNECT:
            self.evaluate(node.left)
            self.evaluate(node.right)
            return None
        if kind is NodeType.ASSIGN:
            result = self.evaluate(node.right)
            self.variables[variable_index(node.left)] = result
            return None
        if kind is NodeType.READ:
            slot = variable_index(node.left)
            self._output.write("Read ")
            self.variables[slot] = self._read_int()
            return None
        if kind is NodeType.WRITE:
            result = self.evaluate(node.left)
            self._output.write(f"Write {result}\n")
            return None
        if kind is NodeType.IF:
            if self.evaluate(node.left):
                self.evaluate(node.right)
            return None
        if kind is NodeType.IF_ELSE:
            if self.evaluate(node.left):
                self.evaluate(node.right.left)
            else:
                self.evaluate(node.right.right)
            return None
        if kind is NodeType.WHILE:
            while self.evaluate(node.left):
                self.evaluate(node.right)
            return None
        raise ValueError(f"cannot evaluate node of type {kind.name}")