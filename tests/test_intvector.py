import pytest

from coursekit.intvector import IntVector, main


def make(values):
    vector = IntVector()
    for value in values:
        vector.push_back(value)
    return vector


def test_push_pop_back():
    vector = make([1, 2, 3])
    assert len(vector) == 3
    assert vector.back() == 3
    assert vector.pop_back() == 3
    assert list(vector) == [1, 2]


def test_empty_errors():
    vector = IntVector()
    with pytest.raises(IndexError):
        vector.pop_back()
    with pytest.raises(IndexError):
        vector.back()


def test_at():
    vector = make([5, 6, 7])
    assert [vector.at(i) for i in range(3)] == list(vector)
    with pytest.raises(IndexError):
        vector.at(3)


def test_insert_places_element_at_index():
    original = [1, 2, 3]
    vector = make(original)
    vector.insert(1, 99)
    items = list(vector)
    assert vector.at(1) == 99
    assert items[:1] + items[2:] == original


def test_insert_at_end_and_out_of_range():
    vector = make([1])
    vector.insert(1, 4)
    assert vector.back() == 4
    with pytest.raises(IndexError):
        vector.insert(5, 0)


def test_erase_returns_removed():
    vector = make([10, 20, 30])
    assert vector.erase(1) == 20
    assert list(vector) == [10, 30]
    with pytest.raises(IndexError):
        vector.erase(2)


def test_insert_erase_round_trip():
    vector = make([4, 5, 6])
    vector.insert(2, 42)
    assert vector.erase(2) == 42
    assert list(vector) == [4, 5, 6]


@pytest.mark.parametrize("probe", [0, 1, 2, 3, 8, 9, 10])
def test_lower_bound_invariant(probe):
    vector = make([1, 2, 8, 9])
    index = vector.lower_bound(probe)
    items = list(vector)
    assert all(item < probe for item in items[:index])
    assert all(item >= probe for item in items[index:])


def test_render_and_capacity_growth():
    vector = make([1, 2, 3])
    assert vector.render() == "1 2 3      (3 4)"
    assert vector.capacity >= len(vector)


def test_clear_keeps_capacity():
    vector = make([1, 2, 3])
    capacity = vector.capacity
    vector.clear()
    assert len(vector) == 0
    assert vector.capacity == capacity
    assert vector.render().endswith(f"(0 {capacity})")


def test_main(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-3:] == ["0", "1", "2"]