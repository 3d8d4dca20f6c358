"""Binary expression trees: evaluation, traversal and register code generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

REGISTER_COUNT = 20

_MNEMONICS = {"+": "ADD", "-": "SUB", "*": "MUL", "/": "DIV"}


class RegisterError(RuntimeError):
    """Raised when registers run out or are released too often."""


@dataclass
class ExprNode:
    """A node of an expression tree: a leaf with a value or an operator."""

    value: Union[int, str, None] = None
    op: Optional[str] = None
    left: Optional["ExprNode"] = None
    right: Optional["ExprNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def token(self) -> str:
        return self.op if self.op is not None else str(self.value)


class RegisterCounter:
    """Stack-like register allocator: registers are taken and freed in LIFO order."""

    def __init__(self, count: int = REGISTER_COUNT) -> None:
        self._limit = count - 1
        self._top = -1

    @property
    def in_use(self) -> int:
        return self._top + 1

    def acquire(self) -> int:
        """Take the next register and return its number."""
        if self._top == self._limit:
            raise RegisterError("Out of registers")
        self._top += 1
        return self._top

    def release(self) -> int:
        """Free the most recently taken register; return the new top index."""
        if self._top < 0:
            raise RegisterError("No register to free")
        self._top -= 1
        return self._top


def leaf(value: Union[int, str]) -> ExprNode:
    """Make a leaf node holding a number or a name."""
    return ExprNode(value=value)


def operator(op: str, left: ExprNode, right: ExprNode) -> ExprNode:
    """Make an operator node over two subtrees."""
    if op not in _MNEMONICS:
        raise ValueError(f"unknown operator {op!r}")
    return ExprNode(op=op, left=left, right=right)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_ARITHMETIC: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}


def evaluate(node: ExprNode) -> int:
    """Compute the integer value of the tree; division truncates toward zero."""
    if node.op is None:
        if not isinstance(node.value, int):
            raise TypeError(f"leaf {node.value!r} is not an integer")
        return node.value
    return _ARITHMETIC[node.op](evaluate(node.left), evaluate(node.right))


def _preorder(node: Optional[ExprNode]) -> Iterator[str]:
    if node is None:
        return
    yield node.token
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _postorder(node: Optional[ExprNode]) -> Iterator[str]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.token


def prefix(node: Optional[ExprNode]) -> str:
    """Return the tree in prefix notation, tokens separated by spaces."""
    return " ".join(_preorder(node))


def postfix(node: Optional[ExprNode]) -> str:
    """Return the tree in postfix notation, tokens separated by spaces."""
    return " ".join(_postorder(node))


def generate_code(node: ExprNode) -> str:
    """Return register-machine instructions computing the tree, one per line."""
    registers = RegisterCounter()
    lines: list[str] = []

    def emit(current: ExprNode) -> int:
        if current.is_leaf:
            reg = registers.acquire()
            lines.append(f"MOV R{reg}, {current.value}")
            return reg
        first = emit(current.left)
        second = emit(current.right)
        lines.append(f"{_MNEMONICS[current.op]} R{first}, R{second}")
        registers.release()
        return first

    emit(node)
    return "".join(f"{line}\n" for line in lines)