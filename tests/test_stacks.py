import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stacks import ArrayStack, LinkedStack, StackOverflowError, StackUnderflowError


@given(st.lists(st.integers(), max_size=10))
def test_array_stack_is_last_in_first_out(values):
    stack = ArrayStack()
    for value in values:
        stack.push(value)
    assert list(stack) == values
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.is_empty()


def test_default_capacity_is_ten():
    stack = ArrayStack()
    for value in range(10):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(10)
    assert len(stack) == 10


def test_custom_capacity_overflow():
    stack = ArrayStack(2)
    stack.push("a")
    assert not stack.is_full()
    stack.push("b")
    with pytest.raises(StackOverflowError):
        stack.push("c")
    assert stack.peek() == "b"


def test_array_stack_underflow():
    stack = ArrayStack()
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()
    with pytest.raises(IndexError):
        stack.pop()


def test_peek_leaves_item_in_place():
    stack = ArrayStack()
    stack.push(5)
    stack.push(7)
    assert stack.peek() == 7
    assert len(stack) == 2
    assert stack.pop() == 7


def test_clear_empties_and_rejects_empty_stack():
    stack = ArrayStack()
    stack.push(1)
    stack.push(2)
    stack.clear()
    assert stack.is_empty()
    assert list(stack) == []
    with pytest.raises(StackUnderflowError):
        stack.clear()


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        ArrayStack(-1)


@given(st.lists(st.integers()))
def test_linked_stack_is_last_in_first_out(values):
    stack = LinkedStack()
    for value in values:
        stack.push(value)
    assert list(stack) == values[::-1]
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0


def test_linked_stack_underflow():
    stack = LinkedStack()
    with pytest.raises(StackUnderflowError):
        stack.pop()
    stack.push("x")
    assert stack.pop() == "x"
    with pytest.raises(StackUnderflowError):
        stack.pop()