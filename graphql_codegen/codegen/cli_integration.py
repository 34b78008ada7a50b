"""
CLI integration for code generation functionality.

Provides the command-line interface for the codegen module.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich import box

from . import (
    generate_code,
    get_generator,
    get_language_info,
    list_supported_languages,
    GeneratorConfig,
    GeneratorError,
    ConfigError,
    load_config,
)
from .core.config import FORMATTERS
from .registry import RegistryError, get_registry, is_language_supported
from ..utils import SchemaLoaderError, load_schema, write_artifacts
from ..logging_config import get_logger

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def add_codegen_args(parser: argparse.ArgumentParser):
    """Add code generation arguments to a parser."""

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("schema", nargs="?", help="GraphQL schema file (SDL)")
    input_group.add_argument("--url", help="URL to fetch the schema from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the schema from standard input"
    )

    codegen_group = parser.add_argument_group("code generation")
    codegen_group.add_argument(
        "--language",
        "-l",
        default="go",
        help="Target language (default: go)",
    )
    codegen_group.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        help="Directory to write generated files to (default: print to stdout)",
    )
    codegen_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )
    codegen_group.add_argument(
        "--package-name",
        "--package",
        metavar="NAME",
        help="Package name for generated code",
    )
    codegen_group.add_argument(
        "--template-dir",
        metavar="DIR",
        help="Directory with template overrides (type/ and field/ subdirectories)",
    )
    codegen_group.add_argument(
        "--formatter",
        choices=sorted(FORMATTERS),
        help="Formatter applied to generated code",
    )
    codegen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't copy schema descriptions into generated code",
    )
    codegen_group.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    info_group.add_argument(
        "--list-templates",
        action="store_true",
        help="List available template variants for the language and exit",
    )


def handle_codegen_command(args: argparse.Namespace) -> int:
    """
    Handle code generation command from CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if args.list_languages:
            return _list_languages()

        if not _validate_language(args.language):
            return 1

        config = _build_config(args)

        if args.list_templates:
            return _list_templates(args.language, config)

        schema_text = _get_input_schema(args)
        return _generate_and_output(schema_text, args.language, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("CLI error", exc_info=True)
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for language in list_supported_languages():
        info = get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {language}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    return 0


def _list_templates(language: str, config: GeneratorConfig) -> int:
    """List template variants available to the configured generator."""
    try:
        generator = get_generator(language, config)
    except (GeneratorError, RegistryError) as e:
        raise CLIError(str(e)) from e

    templates = generator.template_store.list_templates()

    table = Table(title=f"🧩 {language} templates", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Scope", style="bold")
    table.add_column("Variants", style="green")
    for scope, variants in templates.items():
        table.add_row(scope, ", ".join(variants) or "[dim]none[/dim]")

    console.print(table)
    return 0


def _validate_language(language: str) -> bool:
    """Validate that a language is supported."""
    if not is_language_supported(language):
        supported = list_supported_languages()
        console.print(f"[red]✗ Unsupported language '{language}'[/red]")
        console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _get_input_schema(args: argparse.Namespace) -> str:
    """Read the schema document from the selected source."""
    try:
        if args.schema:
            return load_schema(file_path=args.schema)[1]
        if args.url:
            return load_schema(url=args.url)[1]
        if args.stdin:
            return sys.stdin.read()
    except (SchemaLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load schema: {e}") from e

    raise CLIError("Input source required (schema file, --url, or --stdin)")


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI overrides."""
    overrides: Dict[str, Any] = {}

    if args.package_name:
        overrides["package_name"] = args.package_name

    if args.template_dir:
        overrides["template_dir"] = args.template_dir

    if args.formatter:
        overrides["formatter"] = args.formatter

    if args.no_comments:
        overrides["add_comments"] = False

    try:
        return load_config(
            language=get_registry().resolve_language(args.language),
            custom_config=overrides,
            config_file=args.config,
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(
    schema_text: str, language: str, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    try:
        generator = get_generator(language, config)
    except (GeneratorError, RegistryError) as e:
        raise CLIError(str(e)) from e

    with console.status(f"[green]Generating {language} code..."):
        result = generate_code(generator, schema_text)

    if not result.success:
        console.print(f"[red]✗ {result.error_message}[/red]")
        return 1

    output_dir: Optional[str] = args.output_dir
    if output_dir:
        try:
            written = write_artifacts(result.files, output_dir)
        except OSError as e:
            raise CLIError(f"Failed to write to {output_dir}: {e}") from e
        console.print(
            f"[green]✓[/green] Wrote {len(written)} file(s) to [cyan]{Path(output_dir)}[/cyan]"
        )
    else:
        for file_name, code in result.files.items():
            console.print(
                Panel(
                    Syntax(code, generator.language_name, theme="monokai"),
                    title=f"📄 {file_name}",
                    border_style="green",
                )
            )

    if args.verbose and result.metadata:
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

    return 0
