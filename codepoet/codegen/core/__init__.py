"""
Core code generation components.

The instruction model, the writer that interprets it, and the supporting
configuration, naming and template utilities.
"""

from .code_block import CodeBlock, CodeBlockBuilder, CodeBlockError, EmitType
from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .emitter import Emitter
from .generator import GenerationResult, GeneratorError, SourceGenerator, generate_code
from .keywords import Construct, Modifier
from .literal import StringLiteral, UnsupportedLiteralError, literal_value
from .naming import NameSanitizer, NamingCase
from .templates import TemplateEngine, TemplateError
from .type_name import TypeName
from .writer import CodeWriter

__all__ = [
    # Instruction model
    "CodeBlock",
    "CodeBlockBuilder",
    "CodeBlockError",
    "EmitType",
    "Emitter",
    "CodeWriter",
    # Literals and keywords
    "Construct",
    "Modifier",
    "StringLiteral",
    "TypeName",
    "UnsupportedLiteralError",
    "literal_value",
    # Generation pipeline
    "SourceGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
]
