"""Token cursor over a single command line.

A cursor holds one line of text, a scan index into it, and the set of
characters treated as separators. Tokens are maximal runs of non-separator
characters, so runs of separators collapse and an empty token is never
produced. The typed accessors consume one token each and convert it.

Absent and malformed values are reported differently: an exhausted line
returns ``(zero, False)``, while a token that is present but not a valid
literal is consumed and raises ``ArgumentError``.
"""

from __future__ import annotations

import re

from cmdtable.errors import ArgumentError

DEFAULT_SEPARATORS = " \t\r\n"

_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
# sign, then hex (0x...), octal (leading 0) or decimal digits
_INT_RE = re.compile(r"([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))")


def parse_float(token: str) -> float:
    """Convert a decimal/exponent float literal, raising ArgumentError otherwise."""
    if _FLOAT_RE.fullmatch(token) is None:
        raise ArgumentError(token, "float")
    return float(token)


def parse_int(token: str, *, signed: bool = True) -> int:
    """Convert an integer literal with prefix-based base detection.

    ``0x1F`` is hex, ``017`` is octal, anything else is decimal. Unsigned
    parsing rejects a leading minus sign.
    """
    kind = "integer" if signed else "unsigned integer"
    match = _INT_RE.fullmatch(token)
    if match is None:
        raise ArgumentError(token, kind)
    sign, hex_digits, octal_digits, decimal_digits = match.groups()
    if sign == "-" and not signed:
        raise ArgumentError(token, kind)
    if hex_digits is not None:
        value = int(hex_digits, 16)
    elif octal_digits is not None:
        value = int(octal_digits, 8)
    else:
        value = int(decimal_digits)
    return -value if sign == "-" else value


class Cursor:
    """Scan position over one line of text."""

    __slots__ = ("line", "index", "_separators")

    def __init__(self, line: str = "", separators: str = DEFAULT_SEPARATORS) -> None:
        self.line = line
        self.index = 0
        self._separators: frozenset[str] = frozenset()
        self.set_separators(separators)

    def __repr__(self) -> str:
        return f"Cursor(line={self.line!r}, index={self.index})"

    @property
    def separators(self) -> frozenset[str]:
        return self._separators

    def set_separators(self, chars: str) -> None:
        """Replace the separator set. Applies to the next token, even mid-line."""
        separators = frozenset(chars)
        if not separators:
            raise ValueError("separator set must contain at least one character")
        self._separators = separators

    def reset(self, line: str) -> None:
        self.line = line
        self.index = 0

    def token(self) -> tuple[str, bool]:
        """Return the next token and whether one was found.

        Leading separators are skipped. When only separators (or nothing)
        remain, returns ``("", False)`` and leaves the index alone.
        """
        line = self.line
        separators = self._separators
        end = len(line)
        start = self.index
        while start < end and line[start] in separators:
            start += 1
        if start >= end:
            return "", False
        stop = start
        while stop < end and line[stop] not in separators:
            stop += 1
        self.index = stop
        return line[start:stop], True

    def float_value(self) -> tuple[float, bool]:
        token, found = self.token()
        if not found:
            return 0.0, False
        return parse_float(token), True

    def int_value(self) -> tuple[int, bool]:
        token, found = self.token()
        if not found:
            return 0, False
        return parse_int(token), True

    def uint_value(self) -> tuple[int, bool]:
        token, found = self.token()
        if not found:
            return 0, False
        return parse_int(token, signed=False), True

    def remainder(self) -> str:
        """Everything from the scan index onward, not yet tokenized."""
        return self.line[self.index :]

    def skip_separators(self) -> None:
        """Advance the index past any separators at the current position."""
        line = self.line
        while self.index < len(line) and line[self.index] in self._separators:
            self.index += 1
