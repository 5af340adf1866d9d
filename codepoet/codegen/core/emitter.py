"""
The render-yourself capability shared by every spec.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .config import GeneratorConfig
    from .writer import CodeWriter


class Emitter(ABC):
    """Something that can write itself into a CodeWriter."""

    @abstractmethod
    def emit(self, writer: "CodeWriter") -> "CodeWriter":
        """
        Render into ``writer`` and return it.

        Implementations may open and close blocks, but must leave the
        writer's indentation level where they found it.
        """
        pass

    def to_string(self, config: Optional["GeneratorConfig"] = None) -> str:
        """Render against a fresh writer and return the text."""
        from .writer import CodeWriter

        writer = CodeWriter(config)
        self.emit(writer)
        return writer.out
