"""
Generation pipeline: validate specs, render files, tidy the output.

``generate_code`` wraps a generator so callers get a result object instead
of an exception.
"""

from typing import Any, Dict, List, Optional, Sequence

from ...logging_config import get_logger
from .config import GeneratorConfig
from .keywords import Construct

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SourceGenerator:
    """Renders PoetFiles into source text with the configured style."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

    @property
    def language_name(self) -> str:
        return "swift"

    @property
    def file_extension(self) -> str:
        return self.config.file_extension

    def file_name_for(self, poet_file) -> str:
        return f"{poet_file.file_name}{self.file_extension}"

    def generate(self, files: Sequence[Any]) -> Dict[str, str]:
        """
        Render every file.

        Args:
            files: PoetFiles to render

        Returns:
            Mapping of output file name to source text

        Raises:
            GeneratorError: If two files would share a name, or a file has none
        """
        rendered: Dict[str, str] = {}

        for poet_file in files:
            if not poet_file.file_name:
                raise GeneratorError("Cannot generate a file without a name or specs")

            name = self.file_name_for(poet_file)
            if name in rendered:
                raise GeneratorError(f"Duplicate output file: {name}")

            code = poet_file.render(self.config)
            if self.config.format_output:
                code = self.format_code(code)
            rendered[name] = code
            logger.debug("Generated %s", name)

        return rendered

    def validate_specs(self, files: Sequence[Any]) -> List[str]:
        """
        Check specs for problems that still render but are probably mistakes.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for poet_file in files:
            for spec in poet_file.spec_list:
                fields = getattr(spec, "fields", ())
                methods = getattr(spec, "methods", ())

                # Empty types
                if not fields and not methods and spec.construct is not Construct.EXTENSION:
                    warnings.append(f"Type '{spec.name}' has no members")

                # Protocol requirements never render a body
                if spec.construct is Construct.PROTOCOL:
                    for method in methods:
                        if method.code is not None and not method.code.is_empty:
                            warnings.append(
                                f"Body of protocol method {spec.name}.{method.name} is dropped"
                            )

                seen = set()
                for member in list(fields) + list(methods):
                    if member.name in seen:
                        warnings.append(f"Duplicate member name {spec.name}.{member.name}")
                    seen.add(member.name)

        return warnings

    def format_code(self, code: str) -> str:
        """
        Strip trailing whitespace and collapse long runs of blank lines.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Optional[Dict[str, str]] = None,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Generated sources keyed by file name
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files or {}
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @property
    def code(self) -> str:
        """All generated sources joined in generation order."""
        return "\n".join(self.files.values())

    @classmethod
    def error(cls, message: str, exception: Optional[Exception] = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: SourceGenerator, files: Sequence[Any]) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Source generator instance
        files: PoetFiles to render

    Returns:
        GenerationResult with files, warnings, and metadata
    """
    try:
        warnings = generator.validate_specs(files)
        for warning in warnings:
            logger.warning(warning)

        rendered = generator.generate(files)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "file_count": len(rendered),
            "spec_count": sum(len(f.spec_list) for f in files),
            "imports": sorted(set().union(*(f.collect_imports() for f in files))),
        }

        return GenerationResult(rendered, warnings, metadata)

    except Exception as e:
        logger.debug("Generation failed", exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
