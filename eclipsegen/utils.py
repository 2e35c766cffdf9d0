"""Shared utility functions for eclipsegen.

Provides the Rich console used for all user-facing output, coloured status
helpers, and the path helpers shared by the descriptor
generator and the runner.
"""

from __future__ import annotations

from pathlib import Path, PurePath

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Value / path helpers
# ---------------------------------------------------------------------------


def first_present(*values: str | None, default: str) -> str:
    """Return the first value that is neither ``None`` nor empty.

    Examples::

        first_present(None, "core", default="undefined") -> "core"
        first_present("", None, default="undefined")     -> "undefined"
    """
    for value in values:
        if value:
            return value
    return default


def split_list(value: str | None) -> list[str]:
    """Split a comma-separated string into trimmed, non-empty items."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def relative_path(path: str | Path, basedir: str | Path | None) -> str:
    """Express *path* relative to *basedir* using forward slashes.

    Relative inputs are returned as-is (normalised to POSIX separators).
    Absolute paths outside *basedir* are returned unchanged, since the IDE
    accepts absolute locations for roots outside the project.

    Examples::

        relative_path("/work/app/src/main/java", "/work/app") -> "src/main/java"
        relative_path("/opt/shared/src", "/work/app")         -> "/opt/shared/src"
        relative_path("/work/app", "/work/app")               -> "."
    """
    target = PurePath(path)
    if basedir is None or not target.is_absolute():
        return target.as_posix()

    base = PurePath(basedir)
    if target == base:
        return "."
    if target.is_relative_to(base):
        return target.relative_to(base).as_posix()
    return target.as_posix()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_file_preview(path: str | Path, content: str) -> None:
    """Show the content a file would receive, framed in a panel."""
    console.print(
        Panel(
            Syntax(content, "xml", theme="ansi_dark", word_wrap=True),
            title=f"[bold cyan](dryrun) {escape(str(path))}[/bold cyan]",
            border_style="cyan",
        )
    )


def print_info(message: str) -> None:
    """Print a plain informational message."""
    console.print(escape(message))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")
