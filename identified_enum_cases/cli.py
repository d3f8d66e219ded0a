"""
Command-line interface for macro expansion.

Reads a serialized declaration, expands the attached macro and prints the
generated members or the diagnostics.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    DEFAULT_MACRO,
    ExpansionResult,
    RegistryError,
    expand_request,
    get_macro_info,
    list_supported_macros,
    load_config,
)
from .codegen.core.config import ConfigError, get_config_manager
from .codegen.core.syntax import ExpansionRequest, string_literal_tokens
from .logging_config import get_logger, setup_logging
from .utils import JSONLoaderError, load_expansion_request

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


console = Console()
err_console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="identified-enum-cases",
        description="Expand @IdentifiedEnumCasesMacro on serialized Swift declarations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  identified-enum-cases expand color.json
  identified-enum-cases expand --visibility public color.json
  identified-enum-cases expand --stdin --format json < color.json
  identified-enum-cases list
        """.strip(),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")

    expand_parser = subparsers.add_parser(
        "expand", help="Expand the macro attached to a declaration"
    )
    input_group = expand_parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="JSON file with the declaration")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the declaration from standard input"
    )
    expand_parser.add_argument(
        "--visibility",
        metavar="LEVEL",
        help="Argument passed to the attribute (public, private, internal)",
    )
    expand_parser.add_argument("--config", help="Configuration file path (JSON)")
    expand_parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    expand_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    expand_parser.add_argument(
        "--verbose", action="store_true", help="Show expansion metadata"
    )
    expand_parser.set_defaults(func=_handle_expand)

    list_parser = subparsers.add_parser("list", help="List registered macros")
    list_parser.set_defaults(func=_handle_list)

    info_parser = subparsers.add_parser("info", help="Show details about a macro")
    info_parser.add_argument("name", nargs="?", default=DEFAULT_MACRO)
    info_parser.set_defaults(func=_handle_info)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the command line.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (CLIError, ConfigError, JSONLoaderError, RegistryError, FileNotFoundError) as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}", soft_wrap=True)
        logger.error("Command %s failed: %s", args.command, e)
        return 1


def _handle_expand(args: argparse.Namespace) -> int:
    """Handle the expand subcommand."""
    if not (args.file or args.stdin):
        raise CLIError("Input source required (file or --stdin)")

    request = load_expansion_request(
        None if args.stdin else args.file, default_attribute=DEFAULT_MACRO
    )

    if args.visibility is not None:
        request = _with_visibility(request, args.visibility)

    config = load_config(config_file=args.config) if args.config else None
    if config is not None:
        for warning in get_config_manager().validate_config(config):
            err_console.print(f"[yellow]⚠ {warning}[/yellow]")

    result = expand_request(request, config)

    if args.format == "json":
        _output(json.dumps(result.to_dict(), indent=2), args.output)
    elif result.declarations:
        _output(result.code + "\n", args.output)

    _report(result, verbose=args.verbose)
    return 0 if result.success else 1


def _with_visibility(request: ExpansionRequest, visibility: str) -> ExpansionRequest:
    """Return the request with the attribute argument replaced."""
    attribute = replace(request.attribute, argument=string_literal_tokens(visibility))
    return replace(request, attribute=attribute)


def _output(text: str, output_file: str | None) -> None:
    """Write generated text to a file or stdout."""
    if not output_file:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return

    path = Path(output_file)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise CLIError(f"Failed to write output to {path}: {e}") from e
    err_console.print(f"[green]✓[/green] Wrote {path}")


def _report(result: ExpansionResult, verbose: bool = False) -> None:
    """Print diagnostics, errors and optional metadata to stderr."""
    for diagnostic in result.diagnostics:
        err_console.print(
            f"[red]{diagnostic.severity.value}[/red] "
            f"[dim]{diagnostic.diagnostic_id}[/dim] "
            f"{escape(str(diagnostic.node))}: {escape(diagnostic.message)}",
            highlight=False,
            soft_wrap=True,
        )

    if result.error_message:
        err_console.print(f"[red]✗ {escape(result.error_message)}[/red]", soft_wrap=True)

    if not verbose:
        return

    table = Table(title="Expansion", box=box.SIMPLE)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in result.metadata.items():
        table.add_row(key, str(value))
    err_console.print(table)

    for declaration in result.declarations:
        err_console.print(
            Panel(
                Syntax(declaration.text, "swift", theme="ansi_dark"),
                title=f"{declaration.kind.value}: {declaration.name}",
                expand=False,
            )
        )

    if result.declarations:
        cases = Table(title="Identifiers", box=box.SIMPLE)
        cases.add_column("Case", style="cyan")
        cases.add_column("Raw value")
        identifier_type = result.declarations[0]
        for case, raw_value in zip(identifier_type.cases, identifier_type.raw_values):
            cases.add_row(case, json.dumps(raw_value))
        err_console.print(cases)


def _handle_list(args: argparse.Namespace) -> int:
    """Handle the list subcommand."""
    table = Table(title="Registered macros", box=box.ROUNDED)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Aliases")
    table.add_column("Description")

    for name in list_supported_macros():
        info = get_macro_info(name)
        table.add_row(info["name"], ", ".join(info["aliases"]), info["description"])

    console.print(table)
    return 0


def _handle_info(args: argparse.Namespace) -> int:
    """Handle the info subcommand."""
    info = get_macro_info(args.name)

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key in ("name", "class", "module", "description"):
        table.add_row(key, str(info[key]))
    table.add_row("aliases", ", ".join(info["aliases"]) or "-")

    console.print(Panel(table, title=f"@{info['name']}", expand=False))
    return 0
