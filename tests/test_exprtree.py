import pytest

from explc.exprtree import (
    ExprNode,
    RegisterCounter,
    RegisterError,
    evaluate,
    generate_code,
    leaf,
    operator,
    postfix,
    prefix,
)


def test_leaf_evaluates_to_value():
    assert evaluate(leaf(42)) == 42


@pytest.mark.parametrize("a,b", [(3, 4), (10, -2), (0, 7)])
def test_addition_and_multiplication(a, b):
    assert evaluate(operator("+", leaf(a), leaf(b))) == a + b
    assert evaluate(operator("*", leaf(a), leaf(b))) == a * b
    assert evaluate(operator("-", leaf(a), leaf(b))) == a - b


def test_division_truncates_toward_zero():
    assert evaluate(operator("/", leaf(-7), leaf(2))) == -3


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate(operator("/", leaf(1), leaf(0)))


def test_unknown_operator_rejected():
    with pytest.raises(ValueError):
        operator("%", leaf(1), leaf(2))


def test_non_integer_leaf_cannot_be_evaluated():
    with pytest.raises(TypeError):
        evaluate(operator("+", leaf("a"), leaf(1)))


def test_prefix_and_postfix():
    tree = operator("*", operator("+", leaf("a"), leaf("b")), leaf("c"))
    assert prefix(tree) == "* + a b c"
    assert postfix(tree) == "a b + c *"


def test_traversals_hold_same_tokens():
    tree = operator("-", leaf(5), operator("/", leaf(6), leaf(2)))
    assert sorted(prefix(tree).split()) == sorted(postfix(tree).split())


def test_traversal_of_nothing_is_empty():
    assert prefix(None) == ""
    assert postfix(None) == ""


def test_generate_code_simple_sum():
    code = generate_code(operator("+", leaf(5), leaf(3)))
    assert code.splitlines() == ["MOV R0, 5", "MOV R1, 3", "ADD R0, R1"]


def test_generate_code_reuses_freed_registers():
    tree = operator("*", operator("-", leaf(1), leaf(2)), leaf(4))
    lines = generate_code(tree).splitlines()
    assert lines[-1] == "MUL R0, R1"
    assert all("R2" not in line for line in lines)


def _chain(count):
    node = leaf(count)
    for value in range(count - 1, 0, -1):
        node = operator("+", leaf(value), node)
    return node


def test_generate_code_out_of_registers():
    with pytest.raises(RegisterError):
        generate_code(_chain(21))


def test_generate_code_twenty_registers_suffice():
    lines = generate_code(_chain(20)).splitlines()
    assert "MOV R19, 20" in lines


def test_register_counter_limits():
    counter = RegisterCounter()
    assert [counter.acquire() for _ in range(20)] == list(range(20))
    with pytest.raises(RegisterError):
        counter.acquire()


def test_register_counter_release_on_empty():
    counter = RegisterCounter()
    with pytest.raises(RegisterError):
        counter.release()


def test_register_counter_release_returns_top():
    counter = RegisterCounter()
    counter.acquire()
    counter.acquire()
    assert counter.release() == 0
    assert counter.acquire() == 1


def test_node_is_leaf():
    assert ExprNode(value=1).is_leaf
    assert not operator("+", leaf(1), leaf(2)).is_leaf