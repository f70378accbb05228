"""A small printf: %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator

_INT_BITS = 32
_POINTER_BITS = 64


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _conv_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _conv_int(value: Any) -> str:
    return str(_wrap_signed(_require_int(value, "d"), _INT_BITS))


def _conv_unsigned(value: Any) -> str:
    return str(_wrap_unsigned(_require_int(value, "u"), _INT_BITS))


def _conv_hex(value: Any) -> str:
    return format(_wrap_unsigned(_require_int(value, "x"), _INT_BITS), "x")


def _conv_big_hex(value: Any) -> str:
    return format(_wrap_unsigned(_require_int(value, "X"), _INT_BITS), "X")


def _conv_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _wrap_unsigned(_require_int(value, "p"), _POINTER_BITS)
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_str,
    "d": _conv_int,
    "i": _conv_int,
    "u": _conv_unsigned,
    "x": _conv_hex,
    "X": _conv_big_hex,
    "p": _conv_pointer,
}


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    A conversion letter that is not recognised is dropped together with its
    '%' and consumes no argument; a lone '%' at the end is dropped too.
    Extra arguments are ignored.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            pieces.append(convert(_next_arg(values, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)