"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import dateparser

from ...logging_config import get_logger
from .indentation import indent_unit

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by the writer, the file aggregator and the CLI."""

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = False

    # File settings
    framework: Optional[str] = None
    file_extension: str = ".swift"

    # Header settings
    emit_header: bool = True
    generator_name: str = "CodePoet"
    header_date: Optional[str] = None  # free-form, parsed with dateparser
    template_dir: Optional[str] = None  # overrides for the built-in templates

    # Post-processing
    format_output: bool = True

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent_unit(self) -> str:
        return indent_unit(self.indent_size, self.use_tabs)

    def generation_date(self) -> date:
        """
        Resolve the date stamped into file headers.

        Returns today when no ``header_date`` is configured.

        Raises:
            ConfigError: If ``header_date`` cannot be parsed
        """
        if not self.header_date:
            return date.today()

        parsed: Optional[datetime] = dateparser.parse(self.header_date)
        if parsed is None:
            raise ConfigError(f"Cannot parse header_date: {self.header_date!r}")
        return parsed.date()

    def to_dict(self) -> Dict[str, Any]:
        config_dict = asdict(self)
        custom = config_dict.pop("custom")
        config_dict.update(custom)
        return config_dict


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        self._defaults: Dict[str, Any] = {
            "indent_size": 4,
            "use_tabs": False,
            "file_extension": ".swift",
            "emit_header": True,
            "generator_name": "CodePoet",
            "format_output": True,
        }

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Defaults, overlaid with the file, overlaid with the overrides
        """
        base_config = self._defaults.copy()

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)
            logger.debug("Loaded configuration file %s", config_file)

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys land in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not isinstance(config.indent_size, int) or config.indent_size < 0:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.use_tabs and config.indent_size != 4:
            warnings.append("indent_size is ignored when use_tabs is set")

        if not config.file_extension.startswith("."):
            warnings.append(f"file_extension should start with '.': {config.file_extension}")

        if config.framework is not None and not config.framework.strip():
            warnings.append("framework is set but empty")

        if config.header_date:
            try:
                config.generation_date()
            except ConfigError as e:
                warnings.append(str(e))

        if config.template_dir and not Path(config.template_dir).is_dir():
            warnings.append(f"template_dir is not a directory: {config.template_dir}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)

