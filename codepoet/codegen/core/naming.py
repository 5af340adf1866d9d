"""
Naming utilities for safe code generation.

Handles identifier cleanup, case conversion and reserved-word escaping for
the names that specs are built with.
"""

import re
from enum import Enum
from typing import Dict, Set


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Words that must be escaped when used as identifiers
        """
        self.reserved_words = reserved_words or set()
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(
        self, name: str, target_case: NamingCase = NamingCase.CAMEL_CASE
    ) -> str:
        """
        Sanitize a name for use as an identifier.

        Args:
            name: Original name to sanitize
            target_case: Desired case style

        Returns:
            Cleaned, re-cased name; reserved words come back in backticks
        """
        cache_key = f"{name}_{target_case.value}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        converted = self._convert_case(cleaned, target_case)
        final_name = self._escape_reserved(converted)

        self._name_cache[cache_key] = final_name
        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        # Non-alphanumeric chars become word breaks
        cleaned = re.sub(r"[^a-zA-Z0-9_]", "_", name)
        cleaned = cleaned.strip("_")

        # Ensure doesn't start with number
        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        if not cleaned:
            cleaned = "value"

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self._to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return self._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        else:
            return name

    def _to_snake_case(self, name: str) -> str:
        """Convert to snake_case."""
        # Split acronyms from the following word, then before uppercase letters
        name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
        name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)

        name = name.lower()
        name = re.sub(r"_+", "_", name)

        return name.strip("_")

    def _to_camel_case(self, name: str) -> str:
        """Convert to camelCase."""
        leading = "_" if name.startswith("_") else ""
        parts = [p for p in self._to_snake_case(name).split("_") if p]

        if not parts:
            return name

        return leading + parts[0] + "".join(part.capitalize() for part in parts[1:])

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase."""
        leading = "_" if name.startswith("_") else ""
        parts = self._to_snake_case(name).split("_")
        return leading + "".join(part.capitalize() for part in parts if part)

    def _escape_reserved(self, name: str) -> str:
        """Wrap reserved words in backticks."""
        if name in self.reserved_words:
            return f"`{name}`"
        return name


SWIFT_RESERVED_WORDS = {
    "associatedtype", "class", "deinit", "enum", "extension", "fileprivate",
    "func", "import", "init", "inout", "internal", "let", "open", "operator",
    "private", "protocol", "public", "rethrows", "static", "struct",
    "subscript", "typealias", "var", "break", "case", "continue", "default",
    "defer", "do", "else", "fallthrough", "for", "guard", "if", "in",
    "repeat", "return", "switch", "where", "while", "as", "catch",
    "false", "is", "nil", "super", "self", "throw", "throws", "true",
    "try",
}


def create_swift_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Swift."""
    return NameSanitizer(SWIFT_RESERVED_WORDS)


_default_sanitizer = None


def _sanitizer() -> NameSanitizer:
    global _default_sanitizer
    if _default_sanitizer is None:
        _default_sanitizer = create_swift_sanitizer()
    return _default_sanitizer


_CAMEL_IDENTIFIER = re.compile(r"[a-z][A-Za-z0-9]*")
_TYPE_IDENTIFIER = re.compile(r"[A-Z][A-Za-z0-9_]*")


def clean_camel_case(name: str) -> str:
    """Member names: ``hash_value`` -> ``hashValue``; ``urlSession`` is kept."""
    if _CAMEL_IDENTIFIER.fullmatch(name) and name not in SWIFT_RESERVED_WORDS:
        return name
    return _sanitizer().sanitize_name(name, NamingCase.CAMEL_CASE)


def clean_type_name(name: str) -> str:
    """Type names: ``user profile`` -> ``UserProfile``; ``URLSession`` is kept."""
    if _TYPE_IDENTIFIER.fullmatch(name):
        return name
    return _sanitizer().sanitize_name(name, NamingCase.PASCAL_CASE)
