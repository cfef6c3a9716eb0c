"""The ``exit`` builtin: argument checks and exit-status computation."""

from __future__ import annotations

import string
import sys
from typing import Sequence, TextIO

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset(string.digits)
_KEY_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_QUOTES = ("'", '"')
_INT64_MASK = (1 << 64) - 1


def _to_int64(value: int) -> int:
    """Wrap an integer to the range of a signed 64-bit value."""
    value &= _INT64_MASK
    return value - (1 << 64) if value & (1 << 63) else value


def strip_matching_quotes(text: str) -> str | None:
    """Return ``text`` without its surrounding quotes, or None if it is not quoted.

    The text counts as quoted when it starts with ``'`` or ``"`` and ends
    with the same character.
    """
    if not text or text[0] not in _QUOTES or text[-1] != text[0]:
        return None
    return text[1:-1]


def has_numeric_chars(text: str) -> bool:
    """Tell whether ``text`` is an optional sign followed by one or more digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(ch in _DIGITS for ch in body)


def is_numeric_argument(text: str | None) -> bool:
    """Tell whether ``text``, once any matching quotes are removed, is numeric."""
    if not text:
        return False
    unquoted = strip_matching_quotes(text)
    return has_numeric_chars(text if unquoted is None else unquoted)


def atol(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and sign.

    Trailing characters are ignored, no digits yields 0, and the result
    wraps like a signed 64-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    end = 0
    while end < len(rest) and rest[end] in _DIGITS:
        end += 1
    value = int(rest[:end]) if end else 0
    return _to_int64(value * sign)


def key_prefix(text: str) -> str:
    """Return the leading run of letters, digits and underscores in ``text``."""
    end = 0
    while end < len(text) and text[end] in _KEY_CHARS:
        end += 1
    return text[:end]


def validate_exit_args(args: Sequence[str], err: TextIO | None = None) -> int:
    """Check the arguments of ``exit``.

    Returns 0 when they are usable, 255 when the first one is not numeric
    and 1 when there are too many; problems are reported on ``err``.
    """
    err = sys.stderr if err is None else err
    if len(args) < 2:
        return 0
    first = args[1]
    if not is_numeric_argument(first):
        err.write(f"minishell: exit: {first}: numeric argument required\n")
        return 255
    if len(args) > 2:
        err.write("minishell: exit: too many arguments\n")
        return 1
    return 0


def exit_status(args: Sequence[str], err: TextIO | None = None) -> int:
    """Compute the status ``exit`` ends with, reduced to the range 0-255."""
    problem = validate_exit_args(args, err)
    if problem:
        return problem
    if len(args) < 2:
        return 0
    unquoted = strip_matching_quotes(args[1])
    code = atol(args[1] if unquoted is None else unquoted)
    return code % 256


def exit_builtin(
    args: Sequence[str],
    announce: bool = True,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Run ``exit``: optionally print ``exit`` and return the status to leave with."""
    out = sys.stdout if out is None else out
    if announce:
        out.write("exit\n")
    return exit_status(args, err)