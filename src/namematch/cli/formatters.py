"""Rich console output formatting utilities."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from namematch.cli.context import CLIContext

__all__ = [
    "console",
    "error_console",
    "print_did_you_mean",
    "print_distance",
    "print_error",
    "print_info",
    "print_warning",
]

# Shared console instance
console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {message}")


def print_did_you_mean(suggestions: list[str]) -> None:
    """Print 'Did you mean?' suggestions.

    Args:
        suggestions: Names to suggest, best first.
    """
    if not suggestions:
        return

    console.print("[dim]Did you mean?[/dim]")
    for name in suggestions:
        console.print(f"  [cyan]{escape(name)}[/cyan]")


def print_distance(a: str, b: str, distance: int, *, label: str = "distance") -> None:
    """Print the distance between two strings.

    Args:
        a: First string.
        b: Second string.
        distance: Computed distance or score.
        label: What kind of number ``distance`` is.
    """
    if CLIContext.get().quiet:
        console.print(str(distance))
        return

    console.print(
        f"[bold]{label}[/bold]('[cyan]{escape(a)}[/cyan]', "
        f"'[cyan]{escape(b)}[/cyan]') = [green]{distance}[/green]"
    )
