"""A small printf supporting the c, s, d, i, u, x, X and p conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"


def _check_base(digits: str) -> None:
    if len(digits) <= 1:
        raise ValueError("a base needs at least two digits")
    if len(set(digits)) != len(digits):
        raise ValueError("base digits must be distinct")
    for ch in digits:
        if ch in "+-" or not (33 <= ord(ch) <= 126):
            raise ValueError(f"invalid base digit {ch!r}")


def number_in_base(number: int, digits: str) -> str:
    """Render a non-negative integer using ``digits`` as the base."""
    _check_base(digits)
    if number < 0:
        raise ValueError("number must not be negative")
    base = len(digits)
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if not number:
            break
    return "".join(reversed(out))


def _as_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError("%c needs a single character")
        return arg
    return chr(int(arg) & 0xFF)


def _as_str(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


def _as_signed(arg: Any) -> str:
    value = int(arg) & 0xFFFFFFFF
    if value >= 2**31:
        return "-" + number_in_base(2**32 - value, DECIMAL)
    return number_in_base(value, DECIMAL)


def _unsigned(digits: str) -> Callable[[Any], str]:
    def convert(arg: Any) -> str:
        return number_in_base(int(arg) & 0xFFFFFFFF, digits)

    return convert


def _as_pointer(arg: Any) -> str:
    if arg is None or arg == 0:
        return "(nil)"
    address = arg if isinstance(arg, int) else id(arg)
    return "0x" + number_in_base(address & 0xFFFFFFFFFFFFFFFF, HEX_LOWER)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _as_char,
    "s": _as_str,
    "d": _as_signed,
    "i": _as_signed,
    "x": _unsigned(HEX_LOWER),
    "X": _unsigned(HEX_UPPER),
    "u": _unsigned(DECIMAL),
    "p": _as_pointer,
}


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    An unknown conversion, including ``%%``, produces a single ``%`` and
    consumes the character after it.
    """
    pending = iter(args)
    chars = iter(fmt)
    out = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        convert = _CONVERSIONS.get(spec) if spec is not None else None
        if convert is None:
            out.append("%")
            continue
        try:
            arg = next(pending)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        out.append(convert(arg))
    return "".join(out)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expanded format to ``stream`` and return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)