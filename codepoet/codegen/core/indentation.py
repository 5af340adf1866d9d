"""
Indentation tracking for emitted source.

The level is a non-negative counter. Unindenting past zero clamps to zero
instead of failing, so malformed nesting degrades to flush-left output.
"""

DEFAULT_INDENT_UNIT = "    "


class Indentation:
    """Current nesting depth plus the spacer used to render one level."""

    def __init__(self, level: int = 0, unit: str = DEFAULT_INDENT_UNIT):
        self._level = max(level, 0)
        self.unit = unit

    @property
    def level(self) -> int:
        return self._level

    def indent(self, levels: int = 1) -> int:
        """Shift the level by ``levels`` (may be negative) and return it."""
        self._level = max(self._level + levels, 0)
        return self._level

    def unindent(self, levels: int = 1) -> int:
        return self.indent(-levels)

    def spacer(self, level: int | None = None) -> str:
        """Return the whitespace for ``level`` (current level by default)."""
        if level is None:
            level = self._level
        return self.unit * max(level, 0)

    def render(self, text: str, extra: int = 0) -> str:
        """Prefix ``text`` with the spacer for the current level plus ``extra``."""
        return self.spacer(self._level + extra) + text

    def __repr__(self) -> str:
        return f"Indentation(level={self._level}, unit={self.unit!r})"


def indent_unit(indent_size: int = 4, use_tabs: bool = False) -> str:
    """Build the per-level spacer from style settings."""
    if use_tabs:
        return "\t"
    return " " * max(indent_size, 0)
