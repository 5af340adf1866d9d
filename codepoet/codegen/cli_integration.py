"""
CLI integration for code generation functionality.

Provides the ``render`` and ``info`` subcommands.
"""

import argparse
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ..utils import JSONLoaderError, load_json
from . import GeneratorConfig, SourceGenerator, generate_code, load_config
from .core.config import ConfigError, get_config_manager
from .core.keywords import Construct, Modifier
from .core.type_name import PREDEFINED_TYPES
from .specs import ModelError, load_model


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_render_subparser(subparsers) -> argparse.ArgumentParser:
    """
    Create the ``render`` subcommand parser.

    For use with: codepoet render [options] MODEL.json

    Args:
        subparsers: Subparser group from main parser

    Returns:
        Configured subparser for the render command
    """
    parser = subparsers.add_parser(
        "render",
        help="Generate Swift sources from a JSON model",
        description="Generate Swift source files from a JSON model description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  codepoet render model.json
  codepoet render model.json -o Sources/Models --framework Models
  codepoet render --url https://example.com/model.json --indent 2
  codepoet render model.json --date 2024-01-31 --no-header
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="JSON model file")
    input_group.add_argument("--url", help="URL to fetch the JSON model from")

    parser.add_argument(
        "--output",
        "-o",
        metavar="DIR",
        help="Directory to write generated files to (default: stdout)",
    )
    parser.add_argument("--config", metavar="FILE", help="Configuration file path (JSON)")

    # Style options
    style_group = parser.add_argument_group("style options")
    style_group.add_argument("--framework", metavar="NAME", help="Framework named in file headers")
    style_group.add_argument(
        "--indent", type=int, metavar="N", help="Spaces per indentation level"
    )
    style_group.add_argument(
        "--tabs", action="store_true", help="Indent with tabs instead of spaces"
    )
    style_group.add_argument(
        "--date", metavar="DATE", help="Date stamped into file headers (default: today)"
    )
    style_group.add_argument(
        "--no-header", action="store_true", help="Don't emit the file header comment"
    )
    style_group.add_argument(
        "--templates", metavar="DIR", help="Directory of templates overriding the built-ins"
    )
    style_group.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )

    parser.set_defaults(func=handle_render_command)
    return parser


def create_info_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the ``info`` subcommand parser."""
    parser = subparsers.add_parser(
        "info",
        help="Show supported constructs, modifiers and defaults",
        description="Show what the model format accepts and the default configuration",
    )
    parser.add_argument(
        "--save-config",
        metavar="FILE",
        help="Write the default configuration to FILE as a starting point for --config",
    )
    parser.set_defaults(func=handle_info_command)
    return parser


def handle_render_command(args: argparse.Namespace) -> int:
    """
    Handle the render subcommand.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if not (getattr(args, "file", None) or getattr(args, "url", None)):
            raise CLIError("Input source required (file or --url)")

        model = _get_input_data(args)
        config = _build_config(args)

        for warning in get_config_manager().validate_config(config):
            console.print(f"[yellow]⚠️  {warning}[/yellow]")

        return _generate_and_output(model, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def handle_info_command(args: argparse.Namespace) -> int:
    """Show constructs, modifiers, predefined types and default settings."""
    save_path = getattr(args, "save_config", None)
    if save_path:
        try:
            get_config_manager().save_config(GeneratorConfig(), save_path)
        except ConfigError as e:
            console.print(f"[red]✗ Error:[/red] {e}")
            return 1
        console.print(f"[green]✓[/green] Saved default configuration to [cyan]{save_path}[/cyan]")
        return 0

    table = Table(title="📋 Model Vocabulary", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Kind", style="bold green", no_wrap=True)
    table.add_column("Accepted values", style="cyan")

    type_kinds = [c.value for c in Construct if c.is_type]
    table.add_row("Type kinds", ", ".join(type_kinds))
    table.add_row("Field kinds", "let, var")
    table.add_row("Modifiers", ", ".join(m.value for m in Modifier))
    table.add_row("Predefined types", ", ".join(sorted(PREDEFINED_TYPES)))

    console.print()
    console.print(table)

    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    for key, value in GeneratorConfig().to_dict().items():
        config_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(config_table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] codepoet render [dim]model.json[/dim] -o [cyan]DIR[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _get_input_data(args: argparse.Namespace):
    """Load the JSON model from a file or URL."""
    try:
        if getattr(args, "file", None):
            return load_json(file_path=args.file)[1]
        return load_json(url=args.url)[1]
    except FileNotFoundError as e:
        raise CLIError(str(e)) from e
    except JSONLoaderError as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from CLI arguments over an optional config file."""
    config_dict = {}

    if getattr(args, "framework", None):
        config_dict["framework"] = args.framework

    if getattr(args, "indent", None) is not None:
        config_dict["indent_size"] = args.indent

    if getattr(args, "tabs", False):
        config_dict["use_tabs"] = True

    if getattr(args, "date", None):
        config_dict["header_date"] = args.date

    if getattr(args, "no_header", False):
        config_dict["emit_header"] = False

    if getattr(args, "templates", None):
        config_dict["template_dir"] = args.templates

    try:
        return load_config(custom_config=config_dict, config_file=getattr(args, "config", None))
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(model, config: GeneratorConfig, args: argparse.Namespace) -> int:
    """Generate code and handle output with rich formatting."""
    try:
        files = load_model(model, framework=config.framework)
    except ModelError as e:
        raise CLIError(f"Invalid model: {e}") from e

    result = generate_code(SourceGenerator(config), files)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            console.print(f"[dim]Details: {result.exception!r}[/dim]")
        return 1

    output_dir = getattr(args, "output", None)
    if output_dir:
        output_path = Path(output_dir)
        try:
            output_path.mkdir(parents=True, exist_ok=True)
            for name, code in result.files.items():
                (output_path / name).write_text(code, encoding="utf-8")
                console.print(f"[green]✓[/green] Wrote [cyan]{output_path / name}[/cyan]")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
    else:
        for name, code in result.files.items():
            console.print(f"[green]📄 {name}[/green]\n")
            console.print(Syntax(code, "swift", theme="monokai"))
            console.print()

    # Show metadata if verbose
    if getattr(args, "verbose", False) and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0
