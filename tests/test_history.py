import pytest

from minishell.history import HISTORY_LENGTH, History


def test_add_and_get_in_order():
    history = History()
    history.add("ls -l")
    history.add("pwd")
    assert history.get(1) == "ls -l"
    assert history.get(2) == "pwd"
    assert len(history) == 2


def test_last_returns_newest():
    history = History()
    for command in ["a", "b", "c"]:
        history.add(command)
    assert history.last() == "c"


def test_oldest_dropped_when_full():
    history = History()
    commands = [f"cmd {n}" for n in range(HISTORY_LENGTH + 2)]
    for command in commands:
        history.add(command)
    assert len(history) == HISTORY_LENGTH
    assert list(history) == commands[2:]
    assert history.get(1) == commands[2]
    assert history.last() == commands[-1]


@pytest.mark.parametrize("number", [0, -1, 3])
def test_get_out_of_range(number):
    history = History()
    history.add("a")
    history.add("b")
    with pytest.raises(IndexError):
        history.get(number)


def test_last_on_empty_history():
    with pytest.raises(IndexError):
        History().last()


def test_format_numbers_entries():
    history = History()
    history.add("echo hi")
    history.add("ls")
    assert history.format() == "1 echo hi\n2 ls\n"


def test_format_empty():
    assert History().format() == ""


def test_invalid_capacity():
    with pytest.raises(ValueError):
        History(0)