"""
Field specs: stored and computed properties, enum cases and protocol
property requirements.

How a field renders depends on the type it was added to:

    let value: Int = 0                  # stored, in a struct or class
    var hashValue: Int {                # computed, in an enum or extension
        return x.hashValue
    }
    case north = "N"                    # enum case
    var name: String { get }            # protocol requirement
"""

from dataclasses import dataclass, replace
from typing import Any, Optional, Set

from ..core.code_block import CodeBlock, CodeBlockBuilder, optional_block
from ..core.keywords import Construct
from ..core.naming import clean_camel_case
from ..core.type_name import TypeName
from .base import PoetSpec, SpecBuilder, SpecError

# Types that cannot hold stored properties; a ``var`` with a body is computed there
COMPUTED_PARENTS = frozenset({Construct.ENUM, Construct.EXTENSION})

FIELD_CONSTRUCTS = frozenset({Construct.FIELD, Construct.MUTABLE_PARAM})


@dataclass(frozen=True)
class FieldSpec(PoetSpec):
    type: Optional[TypeName] = None
    initializer: Optional[CodeBlock] = None
    parent_type: Optional[Construct] = None

    @staticmethod
    def builder(
        name: str, type: "TypeName | str | None" = None, construct: Construct = Construct.FIELD
    ) -> "FieldSpecBuilder":
        return FieldSpecBuilder(name, type, construct)

    @property
    def is_mutable(self) -> bool:
        return self.construct is Construct.MUTABLE_PARAM

    @property
    def is_enum_case(self) -> bool:
        return self.parent_type is Construct.ENUM and not self.is_mutable

    @property
    def is_computed(self) -> bool:
        return (
            self.is_mutable
            and self.initializer is not None
            and self.parent_type in COMPUTED_PARENTS
        )

    def with_parent(self, parent_type: Optional[Construct]) -> "FieldSpec":
        """Copy of this field placed inside a type of kind ``parent_type``."""
        return replace(self, parent_type=parent_type)

    def emit(self, writer):
        if self.parent_type is Construct.PROTOCOL:
            self._emit_requirement(writer)
        elif self.is_enum_case:
            self._emit_enum_case(writer)
        elif self.is_computed:
            self._emit_computed(writer)
        else:
            self._emit_stored(writer)
        return writer

    def _declaration(self, keyword: Any) -> CodeBlockBuilder:
        declaration = CodeBlock.builder().add_literal(keyword).add_literal(self.name)
        if self.type is not None:
            declaration.add_literal(":", trim=True).add_literal(self.type)
        return declaration

    def _emit_heading(self, writer) -> None:
        writer.emit_field_documentation(self.description)
        writer.emit_modifiers(self.modifiers)

    def _emit_initializer(self, writer) -> None:
        if self.initializer is not None:
            writer.emit(CodeBlock.builder().add_literal("=").build(), first=False)
            writer.emit(self.initializer, first=False)

    def _emit_stored(self, writer) -> None:
        self._emit_heading(writer)
        writer.emit(self._declaration(self.construct).build())
        self._emit_initializer(writer)

    def _emit_computed(self, writer) -> None:
        self._emit_heading(writer)
        body = (
            self._declaration(Construct.MUTABLE_PARAM)
            .add_begin_block()
            .add_embedded_block(self.initializer)
            .add_end_block()
        )
        writer.emit(body.build())

    def _emit_enum_case(self, writer) -> None:
        self._emit_heading(writer)
        writer.emit(CodeBlock.builder().add_literal("case").add_literal(self.name).build())
        self._emit_initializer(writer)

    def _emit_requirement(self, writer) -> None:
        self._emit_heading(writer)
        accessors = "{ get set }" if self.is_mutable else "{ get }"
        declaration = self._declaration(Construct.MUTABLE_PARAM).add_literal(accessors)
        writer.emit(declaration.build())

    def collect_imports(self) -> Set[str]:
        imports = super().collect_imports()
        if self.type is not None:
            imports |= self.type.collect_imports()
        return imports


class FieldSpecBuilder(SpecBuilder):
    def __init__(
        self, name: str, type: "TypeName | str | None", construct: Construct = Construct.FIELD
    ):
        try:
            construct = Construct.parse(construct)
        except ValueError as e:
            raise SpecError(str(e)) from e
        if construct not in FIELD_CONSTRUCTS:
            raise SpecError(f"Field {name} must be 'let' or 'var', not {construct.keyword!r}")
        super().__init__(clean_camel_case(name), construct)
        self.type = TypeName.parse(type) if type is not None else None
        self.initializer: Optional[CodeBlock] = None
        self.parent_type: Optional[Construct] = None

    def add_initializer(self, initializer: Any) -> "FieldSpecBuilder":
        """Accepts a CodeBlock or a single literal."""
        self.initializer = optional_block(initializer)
        return self

    def add_parent_type(self, parent_type: Construct) -> "FieldSpecBuilder":
        self.parent_type = Construct.parse(parent_type)
        return self

    def build(self) -> FieldSpec:
        return FieldSpec(
            type=self.type,
            initializer=self.initializer,
            parent_type=self.parent_type,
            **self._common(),
        )
