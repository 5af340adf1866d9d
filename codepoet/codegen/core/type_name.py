"""
Type references used by specs.

A TypeName is a literal: it renders as its keyword, with a trailing ``?``
when optional. Types that live in a framework carry the import they need.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional


@dataclass(frozen=True)
class TypeName:
    """Immutable reference to a type by keyword."""

    keyword: str
    optional: bool = False
    imports: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.keyword:
            raise ValueError("TypeName keyword cannot be empty")
        # Normalise iterables handed in by callers
        object.__setattr__(self, "imports", frozenset(self.imports))

    def literal_value(self) -> str:
        return f"{self.keyword}?" if self.optional else self.keyword

    def as_optional(self) -> "TypeName":
        return self if self.optional else replace(self, optional=True)

    def as_required(self) -> "TypeName":
        return replace(self, optional=False) if self.optional else self

    def collect_imports(self) -> set:
        return set(self.imports)

    @classmethod
    def parse(cls, value: "str | TypeName") -> "TypeName":
        """
        Build a TypeName from a keyword such as ``"Int"`` or ``"Date?"``.

        Predefined keywords resolve to the shared instances so that their
        imports are kept. Aliases such as ``"Integer"`` resolve to the Swift
        keyword.
        """
        if isinstance(value, TypeName):
            return value

        text = str(value).strip()
        optional = text.endswith("?")
        keyword = text.rstrip("?")

        known: Optional[TypeName] = PREDEFINED_TYPES.get(keyword) or TYPE_ALIASES.get(keyword)
        base = known if known is not None else cls(keyword)
        return base.as_optional() if optional else base

    def __str__(self) -> str:
        return self.literal_value()


INTEGER = TypeName("Int")
LONG = TypeName("Int64")
DOUBLE = TypeName("Double")
FLOAT = TypeName("Float")
BOOLEAN = TypeName("Bool")
STRING = TypeName("String")
VOID = TypeName("Void")
ANY = TypeName("Any")
DATE = TypeName("Date", imports=frozenset({"Foundation"}))
DATA = TypeName("Data", imports=frozenset({"Foundation"}))

PREDEFINED_TYPES = {
    t.keyword: t
    for t in (INTEGER, LONG, DOUBLE, FLOAT, BOOLEAN, STRING, VOID, ANY, DATE, DATA)
}

# Spelled-out names accepted for the Swift keywords
TYPE_ALIASES = {"Integer": INTEGER, "Long": LONG, "Boolean": BOOLEAN}
