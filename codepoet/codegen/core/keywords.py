"""
Language keywords used by specs: constructs and declaration modifiers.

Both enums render themselves as literals, so they can be placed directly in a
CodeBlock.
"""

from enum import Enum
from typing import Iterable, List


class Construct(Enum):
    """Kinds of program constructs a spec can describe."""

    PARAM = "param"
    MUTABLE_PARAM = "mutable_param"
    FIELD = "field"
    METHOD = "method"
    ENUM = "enum"
    STRUCT = "struct"
    CLASS = "class"
    PROTOCOL = "protocol"
    TYPEALIAS = "typealias"
    EXTENSION = "extension"

    @property
    def keyword(self) -> str:
        return _CONSTRUCT_KEYWORDS[self]

    def literal_value(self) -> str:
        return self.keyword

    @property
    def is_type(self) -> bool:
        return self in TYPE_CONSTRUCTS

    @classmethod
    def parse(cls, value: "str | Construct") -> "Construct":
        """Accept an enum member, its value, or its keyword (``let``, ``func``)."""
        if isinstance(value, Construct):
            return value
        key = str(value).strip().lower()
        for construct in cls:
            if key == construct.value or (key and key == construct.keyword):
                return construct
        raise ValueError(f"Unknown construct: {value!r}")


_CONSTRUCT_KEYWORDS = {
    Construct.PARAM: "",
    Construct.MUTABLE_PARAM: "var",
    Construct.FIELD: "let",
    Construct.METHOD: "func",
    Construct.ENUM: "enum",
    Construct.STRUCT: "struct",
    Construct.CLASS: "class",
    Construct.PROTOCOL: "protocol",
    Construct.TYPEALIAS: "typealias",
    Construct.EXTENSION: "extension",
}

TYPE_CONSTRUCTS = frozenset(
    {
        Construct.ENUM,
        Construct.STRUCT,
        Construct.CLASS,
        Construct.PROTOCOL,
        Construct.EXTENSION,
    }
)


class Modifier(Enum):
    """Declaration modifiers.

    Declaration order is the canonical emission order: access control first,
    then inheritance, storage and the rest.
    """

    OPEN = "open"
    PUBLIC = "public"
    INTERNAL = "internal"
    FILEPRIVATE = "fileprivate"
    PRIVATE = "private"
    FINAL = "final"
    REQUIRED = "required"
    CONVENIENCE = "convenience"
    OVERRIDE = "override"
    STATIC = "static"
    CLASS = "class"
    MUTATING = "mutating"
    LAZY = "lazy"
    WEAK = "weak"
    UNOWNED = "unowned"
    DYNAMIC = "dynamic"
    OPTIONAL = "optional"

    def literal_value(self) -> str:
        return self.value

    @property
    def order(self) -> int:
        return _MODIFIER_ORDER[self]

    @classmethod
    def canonical(cls, modifiers: Iterable["Modifier"]) -> List["Modifier"]:
        """Return ``modifiers`` deduplicated and sorted in canonical order."""
        return sorted(set(modifiers), key=lambda m: m.order)

    @classmethod
    def parse(cls, value: "str | Modifier") -> "Modifier":
        if isinstance(value, Modifier):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown modifier: {value!r}") from None


_MODIFIER_ORDER = {modifier: index for index, modifier in enumerate(Modifier)}
