"""
Token stream model for the writer.

A CodeBlock is an immutable, ordered sequence of instructions. Each
instruction kind is its own frozen dataclass carrying exactly the payload it
needs, tagged with an :class:`EmitType` that the writer dispatches on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterator, List, Optional, Tuple, Union

from .emitter import Emitter
from .literal import UnsupportedLiteralError, is_literal


class CodeBlockError(Exception):
    """Raised for misuse of a CodeBlock builder."""

    pass


class EmitType(Enum):
    """Instruction tags."""

    LITERAL = "literal"
    BEGIN_BLOCK = "begin_block"
    END_BLOCK = "end_block"
    NEW_LINE = "new_line"
    INCREASE_INDENT = "increase_indent"
    DECREASE_INDENT = "decrease_indent"
    INDENTED_LINE = "indented_line"
    EMBEDDED_BLOCK = "embedded_block"
    EMBEDDED_EMITTER = "embedded_emitter"


@dataclass(frozen=True)
class Literal:
    """An atomic or pre-rendered fragment.

    ``trim`` suppresses the joining space the writer would otherwise put in
    front of a non-first token.
    """

    value: Any
    trim: bool = False
    kind: ClassVar[EmitType] = EmitType.LITERAL


@dataclass(frozen=True)
class BeginBlock:
    kind: ClassVar[EmitType] = EmitType.BEGIN_BLOCK


@dataclass(frozen=True)
class EndBlock:
    kind: ClassVar[EmitType] = EmitType.END_BLOCK


@dataclass(frozen=True)
class NewLine:
    kind: ClassVar[EmitType] = EmitType.NEW_LINE


@dataclass(frozen=True)
class IncreaseIndent:
    levels: int = 1
    kind: ClassVar[EmitType] = EmitType.INCREASE_INDENT


@dataclass(frozen=True)
class DecreaseIndent:
    levels: int = 1
    kind: ClassVar[EmitType] = EmitType.DECREASE_INDENT


@dataclass(frozen=True)
class IndentedLine:
    """A line break followed by a literal at the current indentation."""

    value: Any
    kind: ClassVar[EmitType] = EmitType.INDENTED_LINE


@dataclass(frozen=True)
class EmbeddedBlock:
    """A nested stream, emitted on a new line at the current indentation."""

    block: "CodeBlock"
    kind: ClassVar[EmitType] = EmitType.EMBEDDED_BLOCK


@dataclass(frozen=True)
class EmbeddedEmitter:
    """A spec rendered through its own ``emit``."""

    emitter: Emitter
    kind: ClassVar[EmitType] = EmitType.EMBEDDED_EMITTER


Instruction = Union[
    Literal,
    BeginBlock,
    EndBlock,
    NewLine,
    IncreaseIndent,
    DecreaseIndent,
    IndentedLine,
    EmbeddedBlock,
    EmbeddedEmitter,
]


@dataclass(frozen=True)
class CodeBlock:
    """Immutable instruction sequence, built once and emitted any number of times."""

    instructions: Tuple[Instruction, ...] = ()

    @staticmethod
    def builder() -> "CodeBlockBuilder":
        return CodeBlockBuilder()

    @classmethod
    def of(cls, *lines: Any) -> "CodeBlock":
        """Block whose first line is a literal and every further line an IndentedLine."""
        builder = cls.builder()
        for index, line in enumerate(lines):
            if index == 0:
                builder.add_literal(line)
            else:
                builder.add_indented_line(line)
        return builder.build()

    @property
    def is_empty(self) -> bool:
        return not self.instructions

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def to_string(self, config=None) -> str:
        """Render against a fresh writer and return the text."""
        from .writer import CodeWriter

        return CodeWriter(config).emit(self).out


class CodeBlockBuilder:
    """Append-only builder for a CodeBlock.

    Once :meth:`build` has been called the builder is spent: any further call
    raises CodeBlockError.
    """

    def __init__(self):
        self._instructions: List[Instruction] = []
        self._built = False

    def _append(self, instruction: Instruction) -> "CodeBlockBuilder":
        if self._built:
            raise CodeBlockError("CodeBlock builder cannot be modified after build()")
        self._instructions.append(instruction)
        return self

    @staticmethod
    def _check_literal(value: Any) -> None:
        if isinstance(value, Emitter):
            raise UnsupportedLiteralError(
                f"{type(value).__name__} is an Emitter; use add_embedded_emitter()"
            )
        if not is_literal(value):
            raise UnsupportedLiteralError(
                f"Cannot add {type(value).__name__} as a literal: {value!r}"
            )

    def add_literal(self, value: Any, trim: bool = False) -> "CodeBlockBuilder":
        self._check_literal(value)
        return self._append(Literal(value, trim))

    def add_begin_block(self) -> "CodeBlockBuilder":
        return self._append(BeginBlock())

    def add_end_block(self) -> "CodeBlockBuilder":
        return self._append(EndBlock())

    def add_new_line(self) -> "CodeBlockBuilder":
        return self._append(NewLine())

    def add_indent(self, levels: int = 1) -> "CodeBlockBuilder":
        return self._append(IncreaseIndent(levels))

    def add_unindent(self, levels: int = 1) -> "CodeBlockBuilder":
        return self._append(DecreaseIndent(levels))

    def add_indented_line(self, value: Any) -> "CodeBlockBuilder":
        self._check_literal(value)
        return self._append(IndentedLine(value))

    def add_embedded_block(self, block: CodeBlock) -> "CodeBlockBuilder":
        if not isinstance(block, CodeBlock):
            raise CodeBlockError(f"Expected a CodeBlock, got {type(block).__name__}")
        return self._append(EmbeddedBlock(block))

    def add_embedded_emitter(self, emitter: Emitter) -> "CodeBlockBuilder":
        if not isinstance(emitter, Emitter):
            raise CodeBlockError(f"Expected an Emitter, got {type(emitter).__name__}")
        return self._append(EmbeddedEmitter(emitter))

    def add_code_block(self, block: CodeBlock) -> "CodeBlockBuilder":
        """Append another block's instructions inline."""
        for instruction in block:
            self._append(instruction)
        return self

    def add(self, instruction: Instruction) -> "CodeBlockBuilder":
        """Append a ready-made instruction."""
        if isinstance(instruction, (Literal, IndentedLine)):
            self._check_literal(instruction.value)
        return self._append(instruction)

    def build(self) -> CodeBlock:
        if self._built:
            raise CodeBlockError("CodeBlock builder has already been built")
        self._built = True
        return CodeBlock(tuple(self._instructions))


def optional_block(value: Optional[Any]) -> Optional[CodeBlock]:
    """Wrap a literal in a single-literal block; pass CodeBlocks and None through."""
    if value is None or isinstance(value, CodeBlock):
        return value
    return CodeBlock.builder().add_literal(value).build()
