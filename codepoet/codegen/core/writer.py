"""
CodeWriter: interprets CodeBlocks into indented source text.

The writer owns two pieces of mutable state, the output buffer and the
indentation level. Specs render themselves by calling back into the writer,
so nested constructs pick up the right indentation without knowing where
they are embedded. One writer serves one emission pass and is not safe to
share between threads.
"""

from datetime import date
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from ...logging_config import get_logger
from .code_block import CodeBlock, CodeBlockError, EmitType, Instruction
from .config import GeneratorConfig
from .emitter import Emitter
from .indentation import Indentation
from .keywords import Modifier
from .literal import literal_value
from .templates import render_file_header

logger = get_logger(__name__)

BLOCK_OPEN = " {"
BLOCK_CLOSE = "}"
DOC_OPEN = "/**"
DOC_CLOSE = "*/"
LINE_COMMENT = "// "
PARAM_LABEL = ":param:    "


def format_short_date(value: date) -> str:
    """Short US date, e.g. ``1/31/24``."""
    return f"{value.month}/{value.day}/{value:%y}"


class CodeWriter:
    """Stateful interpreter for the instruction stream."""

    def __init__(self, config: Optional[GeneratorConfig] = None, indent_level: int = 0):
        self.config = config or GeneratorConfig()
        self._out: List[str] = []
        self._indentation = Indentation(indent_level, self.config.indent_unit)

        # Handlers take the instruction and the join flag, and return the new flag
        self._handlers: Dict[EmitType, Callable[[Any, bool], bool]] = {
            EmitType.LITERAL: self._handle_literal,
            EmitType.BEGIN_BLOCK: self._handle_begin_block,
            EmitType.END_BLOCK: self._handle_end_block,
            EmitType.NEW_LINE: self._handle_new_line,
            EmitType.INCREASE_INDENT: self._handle_increase_indent,
            EmitType.DECREASE_INDENT: self._handle_decrease_indent,
            EmitType.INDENTED_LINE: self._handle_indented_line,
            EmitType.EMBEDDED_BLOCK: self._handle_embedded_block,
            EmitType.EMBEDDED_EMITTER: self._handle_embedded_emitter,
        }

    @property
    def out(self) -> str:
        return "".join(self._out)

    @property
    def indent_level(self) -> int:
        return self._indentation.level

    def __str__(self) -> str:
        return self.out

    # Indentation

    def indent(self, levels: int = 1) -> "CodeWriter":
        self._indentation.indent(levels)
        return self

    def unindent(self, levels: int = 1) -> "CodeWriter":
        self._indentation.unindent(levels)
        return self

    def _append(self, text: str) -> None:
        self._out.append(text)

    def _emit_indentation(self) -> None:
        self._append(self._indentation.spacer())

    # Token stream

    def emit(
        self, block: CodeBlock, with_indentation: bool = False, first: bool = True
    ) -> "CodeWriter":
        """
        Interpret ``block`` in order.

        Args:
            block: Instructions to emit
            with_indentation: Write the indentation spacer before the first token
            first: False continues the current line, so the block's first
                token is space-joined to what precedes it

        Returns:
            This writer
        """
        if with_indentation:
            self._emit_indentation()

        for instruction in block:
            first = self._dispatch(instruction, first)
        return self

    def emit_instruction(self, instruction: Instruction) -> "CodeWriter":
        """Emit a single instruction as a one-element block."""
        return self.emit(CodeBlock.builder().add(instruction).build())

    def _dispatch(self, instruction: Instruction, first: bool) -> bool:
        handler = self._handlers.get(getattr(instruction, "kind", None))
        if handler is None:
            raise CodeBlockError(f"Unknown instruction: {instruction!r}")
        return handler(instruction, first)

    def _handle_literal(self, instruction, first: bool) -> bool:
        text = literal_value(instruction.value)
        if not first and not instruction.trim:
            text = " " + text
        self._append(text)
        return False

    def _handle_begin_block(self, instruction, first: bool) -> bool:
        self._append(BLOCK_OPEN)
        self.indent()
        return first

    def _handle_end_block(self, instruction, first: bool) -> bool:
        self.unindent()
        self._append("\n" + self._indentation.render(BLOCK_CLOSE))
        return first

    def _handle_new_line(self, instruction, first: bool) -> bool:
        self.emit_new_line()
        return first

    def _handle_increase_indent(self, instruction, first: bool) -> bool:
        self.indent(instruction.levels)
        return first

    def _handle_decrease_indent(self, instruction, first: bool) -> bool:
        self.unindent(instruction.levels)
        return first

    def _handle_indented_line(self, instruction, first: bool) -> bool:
        self.emit_new_line()
        self.emit_literal(instruction.value, with_indentation=True)
        return False

    def _handle_embedded_block(self, instruction, first: bool) -> bool:
        self.emit_new_line()
        self.emit(instruction.block, with_indentation=True)
        return False

    def _handle_embedded_emitter(self, instruction, first: bool) -> bool:
        if not first:
            self._append(" ")
        instruction.emitter.emit(self)
        return False

    def emit_literal(self, value: Any, with_indentation: bool = False) -> "CodeWriter":
        """Write one literal with no joining space."""
        if with_indentation:
            self._emit_indentation()
        self._append(literal_value(value))
        return self

    def emit_new_line(self) -> "CodeWriter":
        self._append("\n")
        return self

    # Documentation

    def _emit_lines(self, lines: Iterable[str], extra: int = 0) -> None:
        for line in lines:
            if line:
                self._append(self._indentation.render(line, extra) + "\n")
            else:
                self._append("\n")

    def emit_type_documentation(self, description: Optional[str]) -> "CodeWriter":
        """Block comment with the description one level deeper."""
        if description:
            self._emit_lines([DOC_OPEN])
            self._emit_lines(description.split("\n"), extra=1)
            self._emit_lines([DOC_CLOSE])
        return self

    def emit_field_documentation(self, description: Optional[str]) -> "CodeWriter":
        """One ``//`` comment line per description line."""
        if description:
            self._emit_lines(LINE_COMMENT + line for line in description.split("\n"))
        return self

    def emit_method_documentation(
        self, description: Optional[str], parameters: Sequence[Any] = ()
    ) -> "CodeWriter":
        """
        Block comment with the description and one ``:param:`` line per parameter.

        Written whenever there is a description or at least one parameter.
        Blank lines separate the description from the parameters and each
        parameter from the next. Parameters need ``name`` and ``description``.
        """
        if not description and not parameters:
            return self

        body: List[str] = []
        if description:
            body.extend(description.split("\n"))
        for index, parameter in enumerate(parameters):
            if index or description:
                body.append("")
            line = f"{PARAM_LABEL}{parameter.name}"
            if parameter.description:
                line += f" {parameter.description}"
            body.append(line)

        self._emit_lines([DOC_OPEN])
        self._emit_lines(body, extra=1)
        self._emit_lines([DOC_CLOSE])
        return self

    # Declarations

    def emit_modifiers(self, modifiers: Iterable[Modifier]) -> "CodeWriter":
        """
        Write the indentation spacer followed by the modifiers in canonical order.

        With no modifiers only the spacer is written, so the next token still
        lands at the right column.
        """
        ordered = Modifier.canonical(modifiers)
        if not ordered:
            self._emit_indentation()
            return self

        text = " ".join(m.literal_value() for m in ordered) + " "
        self._append(self._indentation.render(text))
        return self

    def emit_inheritance(
        self, super_type: Optional[Any], protocols: Optional[Iterable[Any]] = None
    ) -> "CodeWriter":
        """Write ``: Super, Proto1, Proto2``; nothing when the list is empty."""
        values = []
        if super_type is not None:
            values.append(literal_value(super_type))
        if protocols:
            values.extend(literal_value(p) for p in protocols)

        if values:
            self._append(": " + ", ".join(values))
        return self

    # File level

    def emit_file_header(
        self, file_name: Optional[str], framework: Optional[str], specs: Sequence[Any]
    ) -> "CodeWriter":
        """
        Write the generated-file comment block followed by a blank line.

        Specs need ``construct`` and ``name``.
        """
        contains = [f"{spec.construct.keyword} {spec.name}" for spec in specs]
        header = render_file_header(
            file_name=f"{file_name}{self.config.file_extension}" if file_name else None,
            framework=framework,
            contains=contains,
            generator=self.config.generator_name,
            created_at=format_short_date(self.config.generation_date()),
            template_dir=self.config.template_dir,
        )
        self._append(header)
        self.emit_new_line()
        self.emit_new_line()
        return self

    def emit_imports(self, imports: Iterable[str]) -> "CodeWriter":
        """Write sorted ``import`` lines followed by a blank line."""
        names = sorted(set(imports))
        if names:
            self._append("import " + "\nimport ".join(names))
            self._append("\n\n")
        return self

    def emit_specs(self, specs: Sequence[Emitter]) -> "CodeWriter":
        """Render each spec into this writer, separated by blank lines."""
        for index, spec in enumerate(specs):
            if index:
                self._append("\n\n")

            level = self.indent_level
            spec.emit(self)
            if self.indent_level != level:
                logger.warning(
                    "Unbalanced indentation after %s: level %d, expected %d",
                    getattr(spec, "name", type(spec).__name__),
                    self.indent_level,
                    level,
                )

        self.emit_new_line()
        return self
