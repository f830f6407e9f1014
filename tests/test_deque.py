import pytest

from dslabs.deque import Deque, main


def test_push_right_then_pop_left_is_fifo():
    deque = Deque()
    for item in ("a", "b", "c"):
        deque.push_right(item)
    assert [deque.pop_left() for _ in range(3)] == ["a", "b", "c"]
    assert deque.is_empty()


def test_push_left_then_pop_left_is_lifo():
    deque = Deque()
    for item in ("a", "b", "c"):
        deque.push_left(item)
    assert [deque.pop_left() for _ in range(3)] == ["c", "b", "a"]


def test_mixed_ends():
    deque = Deque()
    deque.push_left("b")
    deque.push_right("c")
    deque.push_left("a")
    assert list(deque) == ["a", "b", "c"]
    assert deque.pop_right() == "c"
    assert deque.pop_left() == "a"
    assert deque.pop_right() == "b"
    assert deque.is_empty()


def test_len_tracks_pushes_and_pops():
    deque = Deque(["x", "y"])
    deque.push_left("w")
    assert len(deque) == 3
    deque.pop_right()
    assert len(deque) == 2


@pytest.mark.parametrize("pop", ["pop_left", "pop_right"])
def test_pop_empty_raises(pop):
    with pytest.raises(IndexError):
        getattr(Deque(), pop)()


def test_reusable_after_emptying():
    deque = Deque(["a"])
    deque.pop_left()
    deque.push_right("b")
    deque.push_left("a")
    assert list(deque) == ["a", "b"]


def test_remove_duplicates_example():
    deque = Deque(["ab", "ba", "cd", "cd", "cd", "ba", "ba", "ab"])
    deque.remove_duplicates()
    assert list(deque) == ["ab", "ba", "cd", "ba", "ab"]
    assert len(deque) == 5


def test_remove_duplicates_at_right_end_keeps_right_pointer():
    deque = Deque(["a", "b", "b", "b"])
    deque.remove_duplicates()
    deque.push_right("c")
    assert list(deque) == ["a", "b", "c"]
    assert deque.pop_right() == "c"
    assert deque.pop_right() == "b"


def test_remove_duplicates_keeps_back_links():
    deque = Deque(["a", "a", "b", "c", "c"])
    deque.remove_duplicates()
    popped = []
    while not deque.is_empty():
        popped.append(deque.pop_right())
    assert popped == ["c", "b", "a"]


def test_remove_duplicates_without_runs_is_unchanged():
    items = ["a", "b", "a", "b"]
    deque = Deque(items)
    deque.remove_duplicates()
    assert list(deque) == items


def test_remove_duplicates_on_empty():
    deque = Deque()
    deque.remove_duplicates()
    assert deque.is_empty()
    assert len(deque) == 0


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "ba\nab\nba\n"