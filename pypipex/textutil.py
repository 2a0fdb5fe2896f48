"""Small string helpers used when parsing commands and the environment."""

from __future__ import annotations

INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\r\n\v\f"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit. A negative value below the
    32-bit range saturates at INT_MIN; a positive overflow wraps.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]

    result = 0
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        digit = ord(ch) - ord("0")
        if negative and (
            result > _INT_MAX // 10
            or (result == _INT_MAX // 10 and digit > 7)
        ):
            return INT_MIN
        result = result * 10 + digit
    return _wrap_int32(-result if negative else result)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Return where ``needle`` starts in the first ``limit`` characters.

    An empty needle is found at 0. ``None`` means no match lies wholly
    inside the limit.
    """
    if not needle:
        return 0
    if limit < 0:
        raise ValueError("limit must not be negative")
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]