"""Rich UI components for the CLI.

Why separate components:
- Keeps table/panel layout out of the command functions.
- `validate` prints the same table whether the manifest passed or not.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import ValidationResult

_KINDS: tuple[tuple[str, str, str], ...] = (
    ("errors", "Error", "red"),
    ("publish_errors", "Publish error", "yellow"),
    ("warnings", "Warning", "cyan"),
)


def build_messages_table(result: ValidationResult) -> Table:
    """One row per message, errors first."""

    table = Table(title="Manifest Validation")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Message", style="white")

    index = 0
    for attr, label, style in _KINDS:
        for message in getattr(result, attr):
            index += 1
            table.add_row(str(index), Text(label, style=style), message)
    return table


def build_summary_panel(path: Path, result: ValidationResult) -> Panel:
    if result.errors:
        status = Text(f"{path} is invalid", style="bold red")
    elif result.publish_errors:
        status = Text(f"{path} is valid for simple usage but cannot be published", style="bold yellow")
    elif result.warnings:
        status = Text(f"{path} is valid, but with a few warnings", style="bold yellow")
    else:
        status = Text(f"{path} is valid", style="bold green")

    body = Text.assemble(
        status,
        "\n",
        (
            f"{len(result.errors)} error(s), {len(result.publish_errors)} publish error(s), "
            f"{len(result.warnings)} warning(s)",
            "dim",
        ),
    )
    return Panel(body, border_style="cyan", padding=(0, 2))


def print_result(console: Console, path: Path, result: ValidationResult) -> None:
    if result.errors or result.publish_errors or result.warnings:
        console.print(build_messages_table(result))
    console.print(build_summary_panel(path, result))
