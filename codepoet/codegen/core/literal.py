"""
Literal formatting: turns atomic values into source text.

Strings pass through unchanged (identifiers and pre-rendered fragments),
booleans and numbers use the target language spelling, and any object with a
``literal_value()`` method renders itself.
"""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


class UnsupportedLiteralError(Exception):
    """Raised when a value has no literal representation."""

    pass


@runtime_checkable
class LiteralConvertible(Protocol):
    """Anything that can render itself as a single literal token."""

    def literal_value(self) -> str: ...


_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


@dataclass(frozen=True)
class StringLiteral:
    """A string constant, rendered quoted and escaped."""

    text: str

    def literal_value(self) -> str:
        escaped = "".join(_STRING_ESCAPES.get(ch, ch) for ch in self.text)
        return f'"{escaped}"'


def is_literal(value: Any) -> bool:
    """Return True if ``value`` can be rendered by :func:`literal_value`."""
    return isinstance(value, (str, bool, int, float, LiteralConvertible))


def literal_value(value: Any) -> str:
    """
    Render ``value`` as source text.

    Args:
        value: str, bool, int, float or a LiteralConvertible

    Returns:
        The textual representation

    Raises:
        UnsupportedLiteralError: If the value has no literal form
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, LiteralConvertible):
        return value.literal_value()
    raise UnsupportedLiteralError(
        f"Cannot render {type(value).__name__} as a literal: {value!r}"
    )
