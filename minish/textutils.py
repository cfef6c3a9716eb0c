"""String helpers and a small printf-style formatter used by the shell."""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator

_WHITESPACE = " \t\n\v\f\r"
_LEADING_DIGITS = re.compile(r"[0-9]*")
_UINT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    """Wrap an integer to the range of a signed 32-bit value."""
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    Trailing garbage is ignored and a string with no digits yields 0.
    The result wraps like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _LEADING_DIGITS.match(rest).group()
    value = int(digits) if digits else 0
    return _to_int32(value * sign)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    if text is None or chars is None:
        raise TypeError("strtrim requires two strings")
    return text.strip(chars)


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the rest of ``haystack`` from the match, or None. An empty
    needle matches at the start.
    """
    if needle == "":
        return haystack
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else haystack[index:]


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    arg = _next_arg(values, spec)
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise ValueError("%c needs a single character")
            return arg
        return chr(int(arg) & 0xFF)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        # The address is rendered through the 32-bit hex path.
        return "0x" + format(int(arg or 0) & _UINT32_MASK, "x")
    if spec in "di":
        return str(_to_int32(int(arg)))
    if spec == "u":
        # Unsigned values are emitted as one character offset from '0'.
        return chr((int(arg) + ord("0")) & 0xFF)
    return format(int(arg) & _UINT32_MASK, spec)


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with the %c %s %p %d %i %u %x %X %% conversions.

    Unknown conversions produce nothing; a lone trailing '%' is kept.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)