"""Shared console helpers for the community health scaffolder.

Everything the tool shows the user goes through the Rich consoles defined
here: question headers and separators while prompting, then success, error
and summary output once the files are written.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

SEPARATOR = "·" * 50
STAR_LINE = "⋆⋅☆⋅⋆" * 20
# Five whole repeats of the star pattern.
BANNER_EDGE = STAR_LINE[:25]
REPO_LINK = "https://github.com"


# ---------------------------------------------------------------------------
# Prompting output
# ---------------------------------------------------------------------------


def print_header(message: str, target: Console | None = None) -> None:
    """Print a framed header above the question sequence."""
    out = target or console
    out.print()
    out.print(Rule(style="cyan"))
    out.print(f"[bold]{escape(message)}[/bold]", justify="center")
    out.print(Rule(style="cyan"))
    out.print()


def print_separator(target: Console | None = None) -> None:
    """Print the dotted line shown between two questions."""
    out = target or console
    out.print()
    out.print(SEPARATOR, style="dim")
    out.print()


# ---------------------------------------------------------------------------
# Status messages
# ---------------------------------------------------------------------------


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str, target: Console | None = None) -> None:
    """Print a yellow warning message."""
    out = target or console
    out.print(f"[bold yellow]{escape(message)}[/bold yellow]")


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


def print_written_files(paths: list[Path], root: Path) -> None:
    """List every written file relative to *root*."""
    table = Table(title="Written files", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Path")

    for index, path in enumerate(paths, start=1):
        try:
            shown = path.relative_to(root)
        except ValueError:
            shown = path
        table.add_row(str(index), str(shown))

    console.print(table)
    console.print()


def print_completion_banner() -> None:
    """Print the banner shown after every file has been written."""
    console.print()
    console.print(
        Panel(
            "[bold green]Community health files setup has been done successfully! ✅[/bold green]\n\n"
            "If you appreciate my efforts, please consider supporting me by ⭐ "
            f"my repository on GitHub: {REPO_LINK}",
            title=BANNER_EDGE,
            subtitle=BANNER_EDGE,
            border_style="magenta",
        )
    )
    console.print()
