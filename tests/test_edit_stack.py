import pytest

from linedit.edit_stack import EditStack


@pytest.mark.parametrize(
    "entries, index, expected",
    [([1, 2, 3], 2, 2), ([1], 0, 1)],
)
def test_undo_works(entries, index, expected):
    stack = EditStack.from_entries(entries, index)
    assert stack.undo() == expected


@pytest.mark.parametrize(
    "entries, index, expected",
    [([1, 2, 3], 1, 3), ([1], 0, 1)],
)
def test_redo_works(entries, index, expected):
    stack = EditStack.from_entries(entries, index)
    assert stack.redo() == expected


@pytest.mark.parametrize(
    "entries, index, value, expected_entries, expected_index",
    [
        ([1, 2, 3], 1, 4, [1, 2, 4], 2),
        ([1, 2, 3], 2, 3, [1, 2, 3, 3], 3),
    ],
)
def test_insert_works(entries, index, value, expected_entries, expected_index):
    stack = EditStack.from_entries(entries, index)
    stack.insert(value)
    assert stack == EditStack.from_entries(expected_entries, expected_index)


def test_new_stack_holds_default():
    stack = EditStack(int)
    assert stack.current() == 0
    assert stack.undo() == 0
    assert stack.redo() == 0


def test_reset_returns_to_default():
    stack = EditStack(str)
    stack.insert("a")
    stack.insert("b")
    stack.reset()
    assert stack == EditStack.from_entries([""], 0)
    assert stack.current() == ""


def test_undo_then_redo_round_trip():
    stack = EditStack(int)
    stack.insert(5)
    stack.insert(6)
    assert stack.undo() == 5
    assert stack.undo() == 0
    assert stack.redo() == 5
    assert stack.redo() == 6
    assert stack.current() == 6


def test_from_entries_rejects_empty():
    with pytest.raises(ValueError):
        EditStack.from_entries([], 0)


def test_from_entries_rejects_bad_index():
    with pytest.raises(IndexError):
        EditStack.from_entries([1, 2], 2)