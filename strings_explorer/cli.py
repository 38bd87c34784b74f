"""
Command line interface for strings_explorer.

Generates typed accessors from localization tables and lists the available
target languages.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    GenerationResult,
    GeneratorConfig,
    RegistryError,
    generate_from_tables,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)
from .codegen.core.config import ConfigError, get_config_manager, load_config
from .codegen.languages.swift.config import SWIFT_ACCESS_LEVELS
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Generated code goes to stdout, status and diagnostics to stderr
console = Console()
err_console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``strings-explorer`` command."""
    parser = argparse.ArgumentParser(
        prog="strings-explorer",
        description="Generate typed localization accessors from string tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  strings-explorer en.lproj/Localizable.strings
  strings-explorer Localizable.strings Errors.strings --name L10n -o L10n.swift
  strings-explorer https://example.com/strings.json --access-level internal
  strings-explorer --list-languages
        """.strip(),
    )

    parser.add_argument(
        "tables",
        nargs="*",
        metavar="TABLE",
        help="Localization tables (.strings, .plist, .json files or http(s) URLs)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Core generation options
    gen_group = parser.add_argument_group("code generation")
    gen_group.add_argument(
        "--name",
        "-n",
        metavar="NAME",
        help="Name of the top-level namespace (default: Localizations)",
    )
    gen_group.add_argument(
        "--language",
        "-l",
        default="swift",
        help="Target language for code generation (default: swift)",
    )
    gen_group.add_argument(
        "--output", "-o", metavar="FILE", help="Output file (default: stdout)"
    )
    gen_group.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )
    gen_group.add_argument(
        "--save-config",
        metavar="FILE",
        help="Write the effective configuration to a JSON file",
    )
    gen_group.add_argument(
        "--no-header",
        action="store_true",
        help="Don't write the 'generated' header comment",
    )
    gen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't document accessors with their text",
    )
    gen_group.add_argument(
        "--indent-size", type=int, metavar="N", help="Spaces per indentation level"
    )
    gen_group.add_argument(
        "--use-tabs", action="store_true", help="Indent with tabs instead of spaces"
    )
    gen_group.add_argument(
        "--jobs",
        "-j",
        type=int,
        metavar="N",
        help="Number of threads used to load tables",
    )

    # Swift-specific options
    swift_group = parser.add_argument_group("Swift-specific options")
    swift_group.add_argument(
        "--access-level",
        choices=[level for level in SWIFT_ACCESS_LEVELS if level],
        help="Access modifier of generated declarations (default: public)",
    )
    swift_group.add_argument(
        "--table-name",
        metavar="NAME",
        help="Strings table passed to NSLocalizedString (tableName:)",
    )
    swift_group.add_argument(
        "--bundle",
        metavar="EXPR",
        help="Swift expression passed to NSLocalizedString (bundle:), e.g. .module",
    )

    # Diagnostics
    diag_group = parser.add_argument_group("diagnostics")
    diag_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: $STRINGS_EXPLORER_LOG_LEVEL or WARNING)",
    )
    diag_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation result metadata",
    )
    diag_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Args:
        argv: Arguments without the program name, ``sys.argv[1:]`` by default

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger.debug("Parsed arguments: %s", args)

    try:
        if args.list_languages:
            return _list_languages()

        if not _validate_language(args.language):
            return 1

        config = _build_config(args)
        return _generate_and_output(args.tables, args.language, config, args)

    except CLIError as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except RegistryError as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except Exception as e:
        logger.error("Unexpected error: %s", e, exc_info=True)
        err_console.print(f"[red]✗ Unexpected error:[/red] {e}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] strings-explorer [dim]Localizable.strings[/dim] "
            "--language [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _validate_language(language: str) -> bool:
    """Validate that a language is supported."""
    supported = list_supported_languages()
    if not is_language_supported(language):
        err_console.print(f"[red]✗ Unsupported language '{language}'[/red]")
        err_console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect configuration overrides given on the command line."""
    overrides: Dict[str, Any] = {}

    if args.name:
        overrides["top_level_name"] = args.name
    if args.no_header:
        overrides["add_header"] = False
    if args.no_comments:
        overrides["add_comments"] = False
    if args.indent_size is not None:
        overrides["indent_size"] = args.indent_size
    if args.use_tabs:
        overrides["use_tabs"] = True
    if args.jobs is not None:
        overrides["max_workers"] = args.jobs
    if args.output:
        overrides["output_file"] = args.output

    language_config = {}
    if args.access_level:
        language_config["access_level"] = args.access_level
    if args.table_name:
        language_config["table_name"] = args.table_name
    if args.bundle:
        language_config["bundle"] = args.bundle
    if language_config:
        overrides["language_config"] = language_config

    return overrides


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    language = get_registry().resolve(args.language)
    try:
        config = load_config(
            language, custom_config=_build_overrides(args), config_file=args.config
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    for warning in get_config_manager().validate_config(config, language):
        err_console.print(f"[yellow]⚠️  {warning}[/yellow]")

    if args.save_config:
        try:
            get_config_manager().save_config(config, args.save_config)
        except ConfigError as e:
            raise CLIError(f"Configuration error: {e}") from e
        err_console.print(
            f"[green]✓[/green] Configuration saved to [cyan]{args.save_config}[/cyan]"
        )

    return config


def _generate_and_output(
    tables: List[str], language: str, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    ) as progress:
        gen_task = progress.add_task(
            f"[green]Generating {language} accessors from {len(tables)} table(s)...",
            total=None,
        )
        result = generate_from_tables(tables, language, config)
        progress.remove_task(gen_task)

    if not result.success:
        err_console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception and str(result.exception) != result.error_message:
            err_console.print(f"[dim]Details: {result.exception}[/dim]")
        cause = getattr(result.exception, "reason", None)
        if cause:
            err_console.print(f"[dim]Reason: {cause}[/dim]")
        return 1

    if result.is_empty:
        err_console.print(
            "[yellow]ℹ️  No localization tables given, nothing to generate[/yellow]"
        )
        return 0

    output_file = config.output_file
    if output_file:
        output_path = Path(output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            err_console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        err_console.print(
            f"[green]✓[/green] Generated {language} code saved to [cyan]{output_path}[/cyan]"
        )
    else:
        _print_code(result, language)

    if args.verbose and result.metadata:
        _print_metadata(result)

    if result.warnings:
        err_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {warning}")
        err_console.print()

    return 0


def _print_code(result: GenerationResult, language: str):
    """Print generated code with syntax highlighting."""
    if not console.is_terminal:
        console.out(result.code, highlight=False)
        return

    top_border = "═" * 20
    console.print(
        f"[green]{top_border} 📄 Generated {language.title()} Code {top_border}[/green]\n"
    )
    console.print(Syntax(result.code, language, theme="monokai"))
    console.print(f"\n[green]{top_border * 3}[/green]")


def _print_metadata(result: GenerationResult):
    """Print generation metadata as a table."""
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

    err_console.print()
    err_console.print(metadata_table)


if __name__ == "__main__":
    sys.exit(main())
