"""A small printf-style formatter with a fixed set of conversion flags.

Supported flags: ``c s d i u x X o p f e %``.  An unknown flag after ``%``
produces no output and consumes no argument.  ``%X`` renders lowercase
digits like ``%x``.  ``%f`` and ``%e`` print the fractional part as a plain
integer of millionths, without zero padding.
"""

from __future__ import annotations

import struct
import sys
from typing import Any, Callable, Iterator

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_float32(value: float) -> float:
    """Round a double to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _millionths(number: float, whole: int) -> int:
    fraction = _to_float32((number - whole) * 1000000)
    return int(fraction + 0.5)


def _render_char(value: Any) -> str:
    if isinstance(value, str):
        return value[:1]
    return chr(int(value) & 0xFF)


def _render_str(value: Any) -> str:
    return "" if value is None else str(value)


def _render_int(value: Any) -> str:
    return str(int(value))


def _render_unsigned(value: Any) -> str:
    return str(int(value) & _UINT_MASK)


def _render_hex(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "x")


def _render_octal(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "o")


def _render_pointer(value: Any) -> str:
    address = value if isinstance(value, int) else id(value)
    return "0x" + format(address & _POINTER_MASK, "x")


def _render_fixed(value: Any) -> str:
    number = float(value)
    whole = int(number)
    return f"{whole}.{_millionths(number, whole)}"


def _render_exponent(value: Any) -> str:
    number = float(value)
    exponent = 0
    while int(number) > 9:
        number /= 10
        exponent += 1
    whole = int(number)
    return f"{whole}.{_millionths(number, whole)}e+0{exponent}"


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _render_char,
    "s": _render_str,
    "d": _render_int,
    "i": _render_int,
    "x": _render_hex,
    "X": _render_hex,
    "o": _render_octal,
    "p": _render_pointer,
    "f": _render_fixed,
    "e": _render_exponent,
    "u": _render_unsigned,
}


def _next_argument(arguments: Iterator[Any]) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_message(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    pieces: list[str] = []
    arguments = iter(args)
    characters = iter(fmt)
    for char in characters:
        if char != "%":
            pieces.append(char)
            continue
        flag = next(characters, "")
        if flag == "%":
            pieces.append("%")
            continue
        handler = _HANDLERS.get(flag)
        if handler is None:
            continue
        pieces.append(handler(_next_argument(arguments)))
    return "".join(pieces)


def print_message(fmt: str, *args: Any) -> int:
    """Write the rendered text to standard output; return its length."""
    text = format_message(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)