"""
iocheck CLI.

Commands:
- check:  check one or more source files and report traces and diagnostics
- tokens: show the token list of a source file
"""

from __future__ import annotations

import logging
import platform
import sys
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from iocheck._version import __version__
from iocheck.core.checker import check_text, decode_source
from iocheck.core.config import CheckerConfig, load_config
from iocheck.core.errors import ConfigError, LexicalError, SourceError
from iocheck.core.lexer import TokenKind, tokenize
from iocheck.core.report import CheckResult

STDIN_NAME = "-"

console = Console()


class OutputFormat(StrEnum):
    """Diagnostic output formats."""

    HUMAN = "human"
    VSCODE = "vscode"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"iocheck version {__version__}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


app = typer.Typer(
    help="iocheck - syntax checker for Java-style console I/O statements",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """iocheck CLI main callback for global options."""
    pass


def _read_source(path: str) -> tuple[str, Path | None]:
    if path == STDIN_NAME:
        return sys.stdin.read(), None
    source = Path(path)
    if not source.is_file():
        typer.echo(f"Error: file not found: {path}", err=True)
        raise typer.Exit(code=2)
    try:
        return decode_source(source.read_bytes(), source), source
    except SourceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)


def _load_config(config_path: Path | None) -> CheckerConfig:
    try:
        return load_config(config_path)
    except ConfigError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=2)


def _configure_logging(config: CheckerConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_human_diagnostics(result: CheckResult) -> None:
    """Print diagnostics in human-readable format."""
    for diagnostic in result.diagnostics:
        typer.echo(diagnostic.message, err=True)


def _print_vscode_diagnostics(result: CheckResult) -> None:
    """
    Print diagnostics in VS Code format: file:line:col: severity: message
    """
    for diagnostic in result.diagnostics:
        line = diagnostic.line or 1
        col = diagnostic.column or 1
        first_line = diagnostic.message.splitlines()[0]
        typer.echo(f"{result.source_name}:{line}:{col}: {diagnostic.severity}: {first_line}", err=True)


@app.command(name="check")
def check_command(
    files: list[str] = typer.Argument(..., help="Source files to check ('-' reads stdin)"),
    config_path: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="Configuration file (default: nearest iocheck.toml or pyproject.toml)",
    ),
    traces: bool | None = typer.Option(
        None,
        "--traces/--no-traces",
        help="Print a trace for every parsed statement (default from config)",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.HUMAN,
        "--format",
        "-f",
        help="Diagnostic format",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Check source files for well-formed I/O statements."""
    config = _load_config(config_path)
    _configure_logging(config, verbose)
    show_traces = config.show_traces if traces is None else traces

    failed = False
    for path in files:
        text, source = _read_source(path)
        result = check_text(text, config, source_name=path if source else "<stdin>", file=source)

        if show_traces and result.report is not None:
            for trace in result.report.traces:
                typer.echo("")
                typer.echo(trace.render())

        if output_format == OutputFormat.VSCODE:
            _print_vscode_diagnostics(result)
        else:
            _print_human_diagnostics(result)

        typer.echo(result.summary)
        failed = failed or not result.ok

    if failed:
        raise typer.Exit(code=1)


@app.command(name="tokens")
def tokens_command(
    file: str = typer.Argument(..., help="Source file to tokenize ('-' reads stdin)"),
    show_newlines: bool = typer.Option(
        False,
        "--newlines/--no-newlines",
        help="Include NEWLINE tokens in the table",
    ),
) -> None:
    """Show the tokens of a source file."""
    text, source = _read_source(file)

    try:
        tokens = tokenize(text, source)
    except LexicalError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    table = Table(title=f"Tokens: {file}")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Text")
    table.add_column("Line", justify="right")
    table.add_column("Col", justify="right")

    for index, token in enumerate(tokens):
        if token.kind == TokenKind.NEWLINE and not show_newlines:
            continue
        text_cell = "\\n" if token.kind == TokenKind.NEWLINE else token.text
        table.add_row(str(index), token.kind.value, escape(text_cell), str(token.line), str(token.column))

    console.print(table)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
