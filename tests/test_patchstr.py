import pytest

from coursekit.patchstr import PatchStr


def test_zero_length_removals_keep_text():
    g = PatchStr("aaaa")
    g = PatchStr("aaaa")
    g.remove(0, 0)
    g.remove(4, 0)
    assert str(g) == "aaaa"
    g.insert(4, "bbb")
    assert str(g) == "aaaabbb"


def test_source_scenario():
    a = PatchStr("test")
    assert str(a) == "test"
    a.append(" da")
    assert str(a) == "test da"
    a.append("ta")
    assert str(a) == "test data"
    b = PatchStr("foo text")
    assert str(b) == "foo text"
    c = PatchStr(a)
    assert str(c) == "test data"
    assert str(a) == "test data"

    d = PatchStr(a.sub_str(3, 5))
    assert str(d) == "t dat"
    d.append(b)
    assert str(d) == "t datfoo text"
    d.append(b.sub_str(3, 4))
    assert str(d) == "t datfoo text tex"
    c.append(d)
    assert str(c) == "test datat datfoo text tex"
    c.append(c)
    assert str(c) == "test datat datfoo text textest datat datfoo text tex"
    assert str(c.sub_str(6, 9)) == "atat datf"
    d.insert(2, c.sub_str(6, 9))
    assert str(d) == "t atat datfdatfoo text tex"
    b = PatchStr("abcdefgh")
    assert str(b) == "abcdefgh"
    assert str(d) == "t atat datfdatfoo text tex"
    assert str(d.sub_str(4, 8)) == "at datfd"
    assert str(b.sub_str(2, 6)) == "cdefgh"
    with pytest.raises(IndexError):
        b.sub_str(2, 7)
    a.remove(3, 5)
    assert str(a) == "tesa"


def test_copy_is_independent():
    a = PatchStr("test")
    c = PatchStr(a)
    a.append(" more")
    assert str(c) == "test"
    assert str(a) == "test more"


def test_len_and_equality():
    a = PatchStr("ab").append("cde")
    assert len(a) == 5
    assert a == "abcde"
    assert a == PatchStr("abcde")
    assert not (a == "abcd")


def test_empty_string_operations():
    e = PatchStr()
    assert len(e) == 0
    assert str(e) == ""
    e.insert(0, "xy")
    assert str(e) == "xy"
    assert str(PatchStr("abc").sub_str(1, 0)) == ""


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        PatchStr("abc").insert(4, "x")


def test_remove_out_of_range():
    with pytest.raises(IndexError):
        PatchStr("abc").remove(2, 2)


def test_remove_everything():
    s = PatchStr("abc").append("def")
    s.remove(0, 6)
    assert str(s) == ""
    assert len(s) == 0


def test_sub_str_matches_slicing():
    s = PatchStr("hello").append(" ").append("world").insert(5, ",")
    text = str(s)
    for start in range(len(text) + 1):
        for length in range(len(text) - start + 1):
            assert str(s.sub_str(start, length)) == text[start : start + length]


def test_debug_outline():
    assert PatchStr("ab").debug() == "'ab'\n"
    assert PatchStr("ab").append("cd").debug() == "left:\n  'ab'\nright:\n  'cd'\n"
    assert PatchStr().debug() == "null\n"