"""Command line entry point (Typer).

Why the CLI owns I/O:
- The linter stays pure; reading the manifest, printing and exit codes
  happen here.
- Logging is configured once, in the callback, before any command runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_result_json, render_result_json
from adapters.manifest_loader import build_root_package, load_manifest
from cli import doctor
from cli.ui_components import print_result
from core.config import AppSettings
from core.errors import ManifestLintError
from core.services.manifest_linter import ManifestLinter
from core.versions import compare_versions

app = typer.Typer(
    no_args_is_help=True,
    help="Best-practice linter for composer.json manifests.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2


def configure_logging(level: str) -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def validate(
    path: Optional[Path] = typer.Argument(None, help="Manifest to check (defaults to composer.json)."),
    no_dev: bool = typer.Option(False, "--no-dev", help="Do not lint require-dev links."),
    strict: bool = typer.Option(False, "--strict", help="Exit with 1 when warnings are found."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the JSON result to a file."),
) -> None:
    """Validate a manifest and report errors and best-practice warnings."""

    settings = AppSettings()
    manifest_path = path or settings.manifest_path

    try:
        manifest = load_manifest(manifest_path)
    except ManifestLintError as exc:
        _err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=EXIT_LOAD_ERROR)

    linter = ManifestLinter(
        build_root_package(manifest),
        include_dev=settings.include_dev and not no_dev,
    )
    result = linter.validate(manifest)

    if as_json:
        typer.echo(render_result_json(result))
    else:
        print_result(_console, manifest_path, result)

    if output is not None:
        export_result_json(result=result, output_path=output)

    if not result.is_valid:
        raise typer.Exit(code=EXIT_INVALID)
    if (strict or settings.strict) and (result.warnings or result.publish_errors):
        raise typer.Exit(code=EXIT_INVALID)


@app.command()
def compare(
    a: str = typer.Argument(..., help="Left-hand version."),
    operator: str = typer.Argument(..., help="One of ==, !=, <, <=, >, >= (or eq, lt, ...)."),
    b: str = typer.Argument(..., help="Right-hand version."),
) -> None:
    """Compare two versions, printing true or false."""

    try:
        outcome = compare_versions(a, b, operator)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="operator") from exc
    _console.print("true" if outcome else "false")


def run() -> None:
    app()
