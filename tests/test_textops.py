import pytest

from solong.textops import (
    apply_indexed,
    compare_bytes,
    compare_n,
    find_byte,
    find_char,
    find_substring,
    lcat,
    lcopy,
    map_chars,
    rfind_char,
    split,
    substring,
    trim,
)


# split

def test_split_drops_empty_pieces():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,,", ",") == []


def test_split_without_separator_returns_whole():
    assert split("abc", "x") == ["abc"]


def test_split_pieces_never_contain_separator():
    pieces = split("a1b11c111d", "1")
    assert "".join(pieces) == "abcd"
    assert all("1" not in p and p for p in pieces)


def test_split_accepts_int_separator():
    assert split("a b", ord(" ")) == ["a", "b"]


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


# find_char / rfind_char

def test_find_char_first_occurrence():
    s = "banana"
    pos = find_char(s, "a")
    assert s[pos] == "a"
    assert "a" not in s[:pos]


def test_find_char_missing_and_nul():
    assert find_char("banana", "z") is None
    assert find_char("banana", "\0") == len("banana")
    assert find_char("banana", 0) == len("banana")


def test_rfind_char_last_occurrence():
    s = "banana"
    pos = rfind_char(s, "n")
    assert s[pos] == "n"
    assert "n" not in s[pos + 1:]


def test_rfind_char_missing_and_nul():
    assert rfind_char("banana", "q") is None
    assert rfind_char("banana", "\0") == len("banana")


def test_find_char_int_wraps_to_byte():
    assert find_char("xAy", ord("A") + 256) == find_char("xAy", "A")


# find_substring

def test_find_substring_empty_needle():
    assert find_substring("anything", "", 0) == 0


def test_find_substring_within_bound():
    hay = "Foo Bar Baz"
    pos = find_substring(hay, "Bar", len(hay))
    assert hay[pos:pos + 3] == "Bar"


def test_find_substring_must_fit_in_length():
    hay = "Foo Bar Baz"
    idx = hay.index("Bar")
    assert find_substring(hay, "Bar", idx + 2) is None
    assert find_substring(hay, "Bar", idx + 3) == idx


def test_find_substring_missing():
    assert find_substring("abc", "zz", 3) is None


# compare_n

def test_compare_n_equal_and_zero_length():
    assert compare_n("abc", "abc", 3) == 0
    assert compare_n("abc", "xyz", 0) == 0


def test_compare_n_limited_prefix():
    assert compare_n("abcX", "abcY", 3) == 0
    assert compare_n("abcX", "abcY", 4) == ord("X") - ord("Y")


def test_compare_n_shorter_string():
    assert compare_n("ab", "abc", 5) == -ord("c")
    assert compare_n("abc", "ab", 5) == ord("c")


def test_compare_n_antisymmetric():
    assert compare_n("apple", "apply", 5) == -compare_n("apply", "apple", 5)


# compare_bytes

def test_compare_bytes_difference():
    assert compare_bytes(b"\x00\xff", b"\x00\x01", 2) == 0xFF - 0x01
    assert compare_bytes(b"abc", b"abd", 2) == 0


def test_compare_bytes_too_short():
    with pytest.raises(ValueError):
        compare_bytes(b"ab", b"abc", 3)


# find_byte

def test_find_byte_found_and_bounded():
    data = b"hello"
    assert find_byte(data, ord("l"), 5) == data.index(b"l")
    assert find_byte(data, ord("o"), 4) is None


def test_find_byte_wraps_value():
    assert find_byte(b"\x01\x02", 0x102, 2) == 1


def test_find_byte_rejects_overlong_count():
    with pytest.raises(ValueError):
        find_byte(b"ab", 0, 3)


# trim

def test_trim_both_ends():
    assert trim("xxhixyx", "xy") == "hi"


def test_trim_all_removed():
    assert trim("aaaa", "a") == ""


def test_trim_empty_set_keeps_string():
    assert trim("  a  ", "") == "  a  "


def test_trim_keeps_inner_characters():
    assert trim("--a-b--", "-") == "a-b"


# substring

def test_substring_basic_and_clamped():
    s = "hello world"
    assert substring(s, 6, 5) == "world"
    assert substring(s, 6, 100) == "world"


def test_substring_past_end():
    assert substring("abc", 10, 2) == ""
    assert substring("abc", 3, 2) == ""


def test_substring_negative_start():
    with pytest.raises(ValueError):
        substring("abc", -1, 2)


# map_chars / apply_indexed

def test_map_chars_uses_index():
    result = map_chars("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"
    assert len(result) == len("abcd")


def test_apply_indexed_in_place():
    buf = list("abc")
    apply_indexed(buf, lambda i, c: c.upper() if i == 1 else None)
    assert buf == ["a", "B", "c"]


def test_apply_indexed_sees_indices_in_order():
    seen = []
    buf = list("xyz")
    apply_indexed(buf, lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]
    assert buf == ["x", "y", "z"]


# lcopy / lcat

def test_lcopy_fits():
    result = lcopy("old", "hello", 10)
    assert result.text == "hello"
    assert result.wanted == len("hello")


def test_lcopy_truncates():
    result = lcopy("", "hello", 3)
    assert result.text == "he"
    assert result.wanted >= 3


def test_lcopy_size_zero_leaves_destination():
    result = lcopy("keep", "hello", 0)
    assert result == ("keep", len("hello"))


def test_lcat_fits():
    result = lcat("foo", "bar", 10)
    assert result.text == "foobar"
    assert result.wanted == len("foobar")


def test_lcat_truncates():
    result = lcat("foo", "bar", 5)
    assert result.text == "foob"
    assert len(result.text) == 5 - 1
    assert result.wanted == len("foo") + len("bar")


def test_lcat_no_room():
    result = lcat("foobar", "baz", 4)
    assert result.text == "foobar"
    assert result.wanted == 4 + len("baz")


def test_lcat_size_zero():
    result = lcat("ab", "cd", 0)
    assert result.text == "ab"
    assert result.wanted == len("cd")


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        lcopy("", "a", -1)
    with pytest.raises(ValueError):
        lcat("", "a", -1)