"""Doctor commands: configuration diagnostics.

Why a doctor:
- Shows which manifest and options `validate` will actually use once env
  vars and both .env files are merged.
- `doctor set` writes the user .env, so nobody edits it by hand.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.table import Table

from core.config import ENV_PREFIX, AppSettings, get_user_env_file, read_user_env_vars, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Configuration diagnostics and persistent settings.")

_console = Console()

_SETTABLE_KEYS: tuple[str, ...] = ("manifest_path", "include_dev", "strict", "log_level")


@app.command()
def run() -> None:
    """Show the effective settings and where they come from."""

    settings = AppSettings()

    table = Table(title="manifest-lint Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    manifest = settings.manifest_path
    if manifest.is_file():
        table.add_row("Manifest", "OK", str(manifest))
    else:
        table.add_row("Manifest", "MISSING", f"{manifest} (pass a path to `validate`)")

    table.add_row("Include dev", "OK", str(settings.include_dev))
    table.add_row("Strict", "OK", str(settings.strict))

    level = settings.log_level.upper()
    if isinstance(logging.getLevelName(level), int):
        table.add_row("Log level", "OK", level)
    else:
        table.add_row("Log level", "FAIL", f"Unknown level {settings.log_level!r}")

    user_env = get_user_env_file()
    stored = read_user_env_vars()
    if stored:
        table.add_row("User config", "OK", f"{user_env} ({len(stored)} setting(s))")
    else:
        table.add_row("User config", "NONE", str(user_env))

    _console.print(table)


@app.command(name="set")
def set_value(
    key: str = typer.Argument(..., help=f"One of: {', '.join(_SETTABLE_KEYS)}"),
    value: str = typer.Argument(..., help="Value to store."),
) -> None:
    """Persist a setting in the user config .env."""

    normalized = key.strip().lower().replace("-", "_")
    if normalized not in _SETTABLE_KEYS:
        raise typer.BadParameter(f"unknown setting {key!r}; expected one of {', '.join(_SETTABLE_KEYS)}")

    env_path = write_user_env_vars({f"{ENV_PREFIX}{normalized.upper()}": value.strip()})
    _console.print(f"[green]Saved {normalized} to:[/green] {env_path}")
