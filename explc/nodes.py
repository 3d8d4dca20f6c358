"""Abstract syntax tree nodes for the expression language, with type checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Any, Iterator, Optional


class SemanticError(Exception):
    """Raised when a tree would be ill-typed or refers to undeclared names."""


class NodeType(Enum):
    """The kinds of node a syntax tree is built from."""

    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    ASSIGN = auto()
    CONNECT = auto()
    VAR = auto()
    CONST = auto()
    READ = auto()
    WRITE = auto()
    IF = auto()
    IF_ELSE = auto()
    GT = auto()
    LT = auto()
    GE = auto()
    LE = auto()
    NE = auto()
    EQ = auto()
    WHILE = auto()
    BREAK = auto()
    CONTINUE = auto()
    REPEAT = auto()
    DO_WHILE = auto()
    DECL = auto()
    TYPE = auto()
    STR = auto()
    ARRAY = auto()
    ARRAY_ACCESS = auto()
    ADDR = auto()
    DEREF = auto()
    MOD = auto()


class DataType(IntEnum):
    """Value types; statements carry VOID."""

    VOID = -1
    INT = 0
    BOOL = 1
    STR = 2


_ARITHMETIC = {
    "+": NodeType.ADD,
    "-": NodeType.SUB,
    "*": NodeType.MUL,
    "/": NodeType.DIV,
    "%": NodeType.MOD,
}

_COMPARISONS = {
    "<": NodeType.LT,
    ">": NodeType.GT,
    "L": NodeType.LE,
    "<=": NodeType.LE,
    "G": NodeType.GE,
    ">=": NodeType.GE,
    "N": NodeType.NE,
    "!=": NodeType.NE,
    "E": NodeType.EQ,
    "==": NodeType.EQ,
}

_LABELS = {
    NodeType.ADD: "+",
    NodeType.SUB: "-",
    NodeType.MUL: "*",
    NodeType.DIV: "/",
    NodeType.ASSIGN: "Assign",
    NodeType.CONNECT: "Connect",
    NodeType.READ: "Read",
    NodeType.WRITE: "Write",
    NodeType.IF: "If",
    NodeType.IF_ELSE: "IfElse",
    NodeType.WHILE: "While",
    NodeType.LT: "LessThan",
    NodeType.GT: "GreaterThan",
    NodeType.LE: "LessThanOrEquals",
    NodeType.GE: "GreaterThanOrEquals",
    NodeType.NE: "NotEqual",
    NodeType.EQ: "Equals",
    NodeType.BREAK: "Break",
    NodeType.CONTINUE: "Continue",
    NodeType.REPEAT: "Repeat",
    NodeType.DO_WHILE: "DoWhile",
    NodeType.DECL: "Decl",
    NodeType.ARRAY: "ArrayDecl",
    NodeType.ARRAY_ACCESS: "ArrayAccess",
    NodeType.ADDR: "PtrAddr",
    NodeType.DEREF: "Deref",
}


@dataclass
class Node:
    """One node of a syntax tree."""

    node_type: NodeType
    data_type: DataType = DataType.VOID
    value: Optional[int] = None
    text: Optional[str] = None
    varname: Optional[str] = None
    symbol: Any = None
    is_pointer: bool = False
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def effective_type(self) -> DataType:
        """The type from the symbol table entry if bound, else the node's own."""
        if self.symbol is not None:
            return DataType(self.symbol.data_type)
        return self.data_type

    @property
    def label(self) -> Optional[str]:
        """The text shown for this node in a tree listing, if any."""
        if self.node_type is NodeType.VAR:
            return self.varname
        if self.node_type is NodeType.CONST:
            return str(self.value)
        if self.node_type is NodeType.STR:
            return self.text
        if self.node_type is NodeType.TYPE:
            return f"Type {int(self.data_type)}"
        return _LABELS.get(self.node_type)


def _require_condition(cond: Node, message: str) -> None:
    if cond.data_type is not DataType.BOOL:
        raise SemanticError(message)


def make_operator(op: str, left: Node, right: Node) -> Node:
    """Build an arithmetic node; both operands must be integers."""
    try:
        node_type = _ARITHMETIC[op]
    except KeyError:
        raise ValueError(f"unknown arithmetic operator {op!r}") from None
    left_type, right_type = left.effective_type, right.effective_type
    if left_type is not DataType.INT or right_type is not DataType.INT:
        raise SemanticError(
            f"Operator {op} requires INT operands. "
            f"Got Left:{int(left_type)}, Right:{int(right_type)}"
        )
    return Node(node_type, DataType.INT, left=left, right=right)


def make_comparison(op: str, left: Node, right: Node) -> Node:
    """Build a relational node over two integers; its type is BOOL."""
    try:
        node_type = _COMPARISONS[op]
    except KeyError:
        raise ValueError(f"unknown comparison operator {op!r}") from None
    if left.data_type is not DataType.INT or right.data_type is not DataType.INT:
        raise SemanticError("Operand type not INT")
    return Node(node_type, DataType.BOOL, left=left, right=right)


def make_connect(left: Optional[Node], right: Optional[Node]) -> Node:
    """Join two statements into a sequence."""
    return Node(NodeType.CONNECT, left=left, right=right)


def make_variable(name: str) -> Node:
    """Build an integer variable reference not yet bound to a symbol."""
    return Node(NodeType.VAR, DataType.INT, varname=name)


def make_constant(value: int) -> Node:
    """Build an integer constant."""
    return Node(NodeType.CONST, DataType.INT, value=value)


def make_string(text: str) -> Node:
    """Build a string literal."""
    return Node(NodeType.STR, DataType.STR, text=text)


def make_assign(target: Node, value: Node) -> Node:
    """Build an assignment; the value must be an integer or a string."""
    if value.data_type not in (DataType.INT, DataType.STR):
        raise SemanticError("Right side of assignment not INT/STR")
    return Node(NodeType.ASSIGN, left=target, right=value)


def make_read(target: Node) -> Node:
    """Build a read statement into a location."""
    return Node(NodeType.READ, left=target)


def make_write(expr: Node) -> Node:
    """Build a write statement for an expression."""
    return Node(NodeType.WRITE, left=expr)


def make_if(cond: Node, body: Optional[Node]) -> Node:
    """Build an if statement without else."""
    _require_condition(cond, "Condition not Boolean type")
    return Node(NodeType.IF, left=cond, right=body)


def make_if_else(cond: Node, then: Optional[Node], otherwise: Optional[Node]) -> Node:
    """Build an if-else; both branches hang under a connect node on the right."""
    _require_condition(cond, "Condition not Boolean type")
    return Node(NodeType.IF_ELSE, left=cond, right=make_connect(then, otherwise))


def make_while(cond: Node, body: Optional[Node]) -> Node:
    """Build a while loop."""
    _require_condition(cond, "Condition not Boolean type")
    return Node(NodeType.WHILE, left=cond, right=body)


def make_do_while(body: Optional[Node], cond: Node) -> Node:
    """Build a do-while loop: body on the left, condition on the right."""
    _require_condition(cond, "Condition not BOOL")
    return Node(NodeType.DO_WHILE, left=body, right=cond)


def make_repeat(body: Optional[Node], cond: Node) -> Node:
    """Build a repeat-until loop: body on the left, condition on the right."""
    _require_condition(cond, "Condition not BOOL")
    return Node(NodeType.REPEAT, left=body, right=cond)


def make_break() -> Node:
    """Build a break statement."""
    return Node(NodeType.BREAK)


def make_continue() -> Node:
    """Build a continue statement."""
    return Node(NodeType.CONTINUE)


def make_type(data_type: DataType) -> Node:
    """Build a type marker used in declarations."""
    return Node(NodeType.TYPE, DataType(data_type))


def make_decl(type_node: Node, variables: Optional[Node]) -> Node:
    """Build a declaration of the given variables with the given type."""
    return Node(NodeType.DECL, left=type_node, right=variables)


def make_variable_use(table: Any, name: str) -> Node:
    """Build a reference to a declared variable, bound to its symbol."""
    symbol = table.lookup(name)
    if symbol is None:
        raise SemanticError(f"variable {name} undeclared")
    return Node(
        NodeType.VAR,
        DataType(symbol.data_type),
        varname=name,
        symbol=symbol,
        is_pointer=bool(symbol.is_pointer),
    )


def make_array(variables: Optional[Node], ident: Node, size: Optional[Node]) -> Node:
    """Build an array declaration, appended to a variable list if one is given."""
    array = Node(NodeType.ARRAY, varname=ident.varname, left=ident, right=size)
    if variables is None:
        return array
    return make_connect(variables, array)


def make_array_access(table: Any, name: Node, index: Optional[Node]) -> Node:
    """Build an indexed access to a declared array."""
    symbol = table.lookup(name.varname)
    if symbol is None:
        raise SemanticError(f"Variable {name.varname} undeclared")
    return Node(
        NodeType.ARRAY_ACCESS,
        DataType(symbol.data_type),
        varname=name.varname,
        symbol=symbol,
        left=index,
    )


def make_addr(variable: Node) -> Node:
    """Build an address-of node; only variables may have their address taken."""
    if variable.node_type is not NodeType.VAR:
        raise SemanticError("& operator must be applied to a variable")
    return Node(NodeType.ADDR, variable.data_type, left=variable, is_pointer=True)


def make_deref(expr: Node) -> Node:
    """Build a dereference of a pointer expression."""
    if not expr.is_pointer:
        raise SemanticError("* operator applied to non-pointer")
    return Node(NodeType.DEREF, expr.data_type, left=expr)


def create_tree(
    value: Optional[int],
    data_type: DataType,
    varname: Optional[str],
    node_type: NodeType,
    left: Optional[Node],
    right: Optional[Node],
) -> Node:
    """Build a constant if a value is given, a variable if a name is, else a generic node."""
    if value is not None:
        return make_constant(value)
    if varname is not None:
        return make_variable(varname)
    return Node(node_type, DataType(data_type), left=left, right=right)


def walk(node: Optional[Node]) -> Iterator[Node]:
    """Yield the nodes of a tree in preorder."""
    if node is None:
        return
    yield node
    yield from walk(node.left)
    yield from walk(node.right)


def render(node: Optional[Node]) -> str:
    """Return the preorder listing of a tree, one node label per line."""
    return "".join(f"{n.label}\n" for n in walk(node) if n.label is not None)