# explc

`explc` is a small toolkit for the front half of a compiler for a teaching
language with integer arithmetic, comparisons, `read`/`write`, `if`/`else`,
`while`, `do`-`while`, `repeat`-`until`, `break`/`continue`, strings,
arrays and pointers. It builds abstract syntax trees and checks their types
as they are built, keeps a symbol table of global declarations, runs
programs directly with a tree-walking interpreter, and generates register
code for plain arithmetic expressions.

The package has no dependencies outside the standard library.

## What is inside

| Module | Purpose |
| --- | --- |
| `explc.exprtree` | Plain arithmetic expression trees: evaluate them, list them in prefix or postfix order, and generate register instructions for them. |
| `explc.nodes` | The syntax tree of the full language (`Node`, `NodeType`, `DataType`), the `make_*` constructors that type-check as they build, and `walk`/`render` for listing a tree. |
| `explc.symbols` | `SymbolTable` for global declarations: static addresses from 4096, sizes and array dimensions. |
| `explc.interpreter` | `Interpreter`, which runs a tree over the 26 variables `a`–`z`. |
| `explc.labels` | `LabelAllocator` for numbered labels, `LabelTable` for named labels and `LoopStack` for the labels of enclosing loops. |

Mistakes are reported by raising exceptions: `SemanticError` for type
errors and undeclared or redeclared names, `RegisterError` when the
expression code generator runs out of its 20 registers, and `LabelError`
for unknown or duplicate labels and for using an empty loop stack.

## Expression trees

```python
from explc.exprtree import leaf, operator, evaluate, prefix, postfix, generate_code

tree = operator("*", operator("+", leaf(2), leaf(3)), leaf(4))

evaluate(tree)       # 20 (division truncates toward zero)
prefix(tree)         # '* + 2 3 4'
postfix(tree)        # '2 3 + 4 *'
print(generate_code(tree))
# MOV R0, 2
# MOV R1, 3
# ADD R0, R1
# MOV R1, 4
# MUL R0, R1
```

Leaves may also hold names (`leaf("x")`); such trees can be listed with
`prefix` and `postfix` but not evaluated.

## Building and running a program

```python
from explc.nodes import (
    make_assign, make_comparison, make_connect, make_constant,
    make_operator, make_variable, make_while, make_write,
)
from explc.interpreter import Interpreter

# a = 0; while (a < 3) { write(a); a = a + 1; }
body = make_connect(
    make_write(make_variable("a")),
    make_assign(make_variable("a"),
                make_operator("+", make_variable("a"), make_constant(1))),
)
program = make_connect(
    make_assign(make_variable("a"), make_constant(0)),
    make_while(make_comparison("<", make_variable("a"), make_constant(3)), body),
)

Interpreter().run(program)
# Write 0
# Write 1
# Write 2
```

The constructors check types as the tree is built: arithmetic and
comparisons need integer operands, an assignment needs an integer or string
value, and the condition of `if`, `while`, `do`-`while` and `repeat` must be
a comparison.

`Interpreter(input, output)` takes text streams (standard input and output
by default). `run` clears every variable to zero and executes the tree; a
`read` writes `Read ` and takes the next integer from the input. Variables
are stored by the first letter of their name. The interpreter handles
arithmetic, comparisons, assignment, `read`, `write`, `if`, `if`-`else` and
`while`; for any other node it raises `ValueError`.

`render(tree)` returns the preorder listing of a tree, one node per line.

## Declarations

```python
from explc.nodes import (
    DataType, make_array, make_connect, make_constant, make_decl,
    make_type, make_variable,
)
from explc.symbols import SymbolTable

table = SymbolTable()
table.declare(make_decl(
    make_type(DataType.INT),
    make_connect(
        make_variable("a"),
        make_array(None, make_variable("grid"), make_connect(make_constant(2), make_constant(3))),
    ),
))

table.lookup("a").binding        # 4096
table.lookup("grid").binding     # 4097
table.lookup("grid").size        # 6
table.lookup("grid").dimensions  # [2, 3]
print(table.format())
```

`SymbolTable.install` adds a single entry directly; declaring a name twice
raises `SemanticError`. `make_variable_use` and `make_array_access` resolve
names against a table when they are used.

## Labels

`LabelAllocator.next()` hands out `0, 1, 2, …`. `LoopStack.push(cond, rest)`
records the labels of a loop being entered; `peek()` gives the innermost
one, which is where `continue` and `break` jump to.

## What it does not do

There is no parser and no command-line program: trees are built in Python
with the constructors. Apart from `generate_code` for plain arithmetic
expressions, the package does not translate programs into machine code and
writes no output files.