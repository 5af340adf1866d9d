"""
CodePoet Code Generation Module

Builds Swift source files from specs or from a JSON model description.
"""

from .core.config import ConfigManager, GeneratorConfig, load_config
from .core.generator import GenerationResult, SourceGenerator, generate_code
from .specs import ModelError, PoetFile, load_model


# Convenience functions
def generate_from_model(model, config=None):
    """
    Generate sources from a parsed JSON model.

    Args:
        model: Model description (dict)
        config: GeneratorConfig, or a dict of configuration overrides

    Returns:
        GenerationResult with generated files
    """
    if not isinstance(config, GeneratorConfig):
        config = load_config(config)

    try:
        files = load_model(model, framework=config.framework)
    except ModelError as e:
        return GenerationResult.error(f"Invalid model: {e}", exception=e)

    return generate_code(SourceGenerator(config), files)


def quick_generate(model, **options):
    """
    Quick code generation from a model.

    Args:
        model: Model description (dict or JSON string)
        **options: Configuration overrides

    Returns:
        Generated code string
    """
    if isinstance(model, str):
        import json

        model = json.loads(model)

    result = generate_from_model(model, options)

    if result.success:
        return result.code
    else:
        raise RuntimeError(f"Code generation failed: {result.error_message}")


__all__ = [
    "GeneratorConfig",
    "ConfigManager",
    "GenerationResult",
    "PoetFile",
    "SourceGenerator",
    "generate_code",
    "generate_from_model",
    "load_config",
    "load_model",
    "quick_generate",
]
