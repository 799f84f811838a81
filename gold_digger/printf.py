"""A small printf with the conversions %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def to_base(number: int, digits: str) -> str:
    """Render a non-negative integer using *digits* as the digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    if number < 0:
        raise ValueError("number must not be negative")
    out = []
    while True:
        number, rest = divmod(number, base)
        out.append(digits[rest])
        if number == 0:
            break
    return "".join(reversed(out))


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _convert(spec: str, args: Iterator[Any]) -> str:
    def next_arg() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    if spec == "c":
        value = next_arg()
        if isinstance(value, str):
            return value[:1]
        return chr(int(value) & 0xFF)
    if spec == "s":
        value = next_arg()
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return str(_as_int32(int(next_arg())))
    if spec == "p":
        return "0x" + to_base(int(next_arg()) & _POINTER_MASK, HEX_LOWER)
    if spec == "u":
        return to_base(int(next_arg()) & _UINT_MASK, DECIMAL)
    if spec == "x":
        return to_base(int(next_arg()) & _UINT_MASK, HEX_LOWER)
    if spec == "X":
        return to_base(int(next_arg()) & _UINT_MASK, HEX_UPPER)
    if spec == "%":
        return "%"
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Expand *fmt* with *args*.

    Spaces between ``%`` and the conversion letter are skipped, an unknown
    conversion letter produces nothing, and a ``%`` at the end of the format
    ends the output.
    """
    arg_iter = iter(args)
    out = []
    pos = 0
    length = len(fmt)
    while pos < length:
        char = fmt[pos]
        if char != "%":
            out.append(char)
            pos += 1
            continue
        pos += 1
        while pos < length and fmt[pos] == " ":
            pos += 1
        if pos >= length:
            break
        out.append(_convert(fmt[pos], arg_iter))
        pos += 1
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output; return the byte count."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text.encode("utf-8"))