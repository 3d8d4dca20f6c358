import pytest

from explc.labels import LabelAllocator, LabelError, LabelTable, LoopLabels, LoopStack


def test_allocator_starts_at_zero_and_counts_up():
    labels = LabelAllocator()
    assert [labels.next() for _ in range(5)] == list(range(5))
    assert labels.count == 5


def test_allocators_are_independent():
    first = LabelAllocator()
    second = LabelAllocator()
    first.next()
    first.next()
    assert second.next() == 0


def test_table_add_and_lookup():
    table = LabelTable()
    table.add("L0", 2056)
    table.add("L1", 2070)
    assert table.address("L0") == 2056
    assert table.address("L1") == 2070
    assert list(table) == ["L0", "L1"]


def test_table_duplicate_rejected():
    table = LabelTable()
    table.add("L0", 2056)
    with pytest.raises(LabelError):
        table.add("L0", 3000)
    assert table.address("L0") == 2056


def test_table_unknown_label():
    with pytest.raises(LabelError):
        LabelTable().address("MAIN")


def test_table_remove():
    table = LabelTable()
    table.add("L0", 1)
    table.add("L1", 2)
    table.remove("L0")
    assert "L0" not in table
    assert len(table) == 1
    with pytest.raises(LabelError):
        table.remove("L0")


def test_table_remove_then_add_again():
    table = LabelTable()
    table.add("L3", 10)
    table.remove("L3")
    table.add("L3", 20)
    assert table.address("L3") == 20


def test_table_name_too_long():
    with pytest.raises(LabelError):
        LabelTable().add("ABCDEFGHIJ", 1)


def test_loop_stack_order():
    stack = LoopStack()
    stack.push(0, 1)
    stack.push(2, 3)
    assert stack.peek() == LoopLabels(2, 3)
    assert stack.pop() == LoopLabels(2, 3)
    assert stack.peek() == LoopLabels(0, 1)
    assert len(stack) == 1


def test_loop_stack_empty_errors():
    stack = LoopStack()
    with pytest.raises(LabelError):
        stack.peek()
    with pytest.raises(LabelError):
        stack.pop()


def test_loop_labels_fields():
    frame = LoopStack().push(4, 5)
    assert (frame.cond_label, frame.rest_label) == (4, 5)