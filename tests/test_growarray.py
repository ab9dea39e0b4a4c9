import io

import pytest

from coursekit.growarray import GrowArray, main


def test_initial_contents_are_indices():
    array = GrowArray(5)
    assert len(array) == 5
    assert all(value == index for index, value in enumerate(array))


def test_push_appends_at_end():
    array = GrowArray(2)
    array.push(99)
    array.push(7)
    items = list(array)
    assert len(array) == 4
    assert items[-2:] == [99, 7]


def test_capacity_never_below_length():
    array = GrowArray(1)
    for value in range(20):
        array.push(value)
        assert array.capacity >= len(array)


def test_render():
    array = GrowArray(2)
    array.push(99)
    assert array.render() == "0 1 99 "


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        GrowArray(-1)


def test_main_prints_array(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "What is the size of an array I should create?" in out
    assert "0 1 2 99 " in out


@pytest.mark.parametrize("text", ["0\n", "-4\n", "abc\n", ""])
def test_main_invalid_input(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 1
    assert "Invalid input" in capsys.readouterr().out