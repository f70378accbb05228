"""String and byte searching, comparison, slicing and bounded copying."""

from __future__ import annotations

from typing import Callable, List, NamedTuple, Optional, Union

CharLike = Union[str, int]


class BoundedResult(NamedTuple):
    """Outcome of a size-bounded copy or append.

    ``text`` is what the destination holds afterwards. ``wanted`` is the
    length the full result would have had with unlimited room, so truncation
    happened exactly when ``wanted >= size``.
    """

    text: str
    wanted: int


def _as_char(c: CharLike) -> str:
    """Normalise a one-character string or an int to a single character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the separator character, dropping empty pieces."""
    separator = _as_char(sep)
    return [piece for piece in s.split(separator) if piece]


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    The NUL character matches the end of the string.
    """
    target = _as_char(c)
    if target == "\0":
        pos = s.find(target)
        return len(s) if pos < 0 else pos
    pos = s.find(target)
    return None if pos < 0 else pos


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    The NUL character matches the end of the string.
    """
    target = _as_char(c)
    if target == "\0":
        return len(s)
    pos = s.rfind(target)
    return None if pos < 0 else pos


def find_substring(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly in the first ``length`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _check_count("length", length)
    if not needle:
        return 0
    pos = haystack[:length].find(needle)
    return None if pos < 0 else pos


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign gives the ordering.

    The result is the code difference of the first differing characters,
    with the end of a string (or a NUL) counting as code 0.
    """
    _check_count("n", n)
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def compare_bytes(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; the sign gives the ordering."""
    _check_count("n", n)
    if n > len(b1) or n > len(b2):
        raise ValueError(f"cannot compare {n} bytes of shorter data")
    for a, b in zip(b1[:n], b2[:n]):
        if a != b:
            return a - b
    return 0


def find_byte(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_count("n", n)
    if n > len(data):
        raise ValueError(f"cannot search {n} bytes of {len(data)}-byte data")
    pos = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if pos < 0 else pos


def trim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substring(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_count("start", start)
    _check_count("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def map_chars(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def apply_indexed(buffer: List[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each element of ``buffer`` in place.

    A returned string replaces the element; None leaves it unchanged.
    """
    for index, ch in enumerate(buffer):
        replacement = func(index, ch)
        if replacement is not None:
            buffer[index] = replacement


def lcopy(dst: str, src: str, size: int) -> BoundedResult:
    """Copy ``src`` into a destination with room for ``size`` slots.

    One slot is reserved for the terminator, so at most ``size - 1``
    characters are kept. With ``size`` zero the destination is untouched.
    """
    _check_count("size", size)
    text = dst if size == 0 else src[:size - 1]
    return BoundedResult(text, len(src))


def lcat(dst: str, src: str, size: int) -> BoundedResult:
    """Append ``src`` to ``dst`` within a total room of ``size`` slots.

    The reported length is ``min(len(dst), size) + len(src)``.
    """
    _check_count("size", size)
    dst_len = len(dst)
    text = dst
    if size > 0 and dst_len < size - 1:
        text = dst + src[:size - 1 - dst_len]
    return BoundedResult(text, min(dst_len, size) + len(src))