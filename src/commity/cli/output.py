"""
Output formatting utilities for the CLI.

Provides consistent status messages; the commit message itself is printed
verbatim, never through Rich markup.
"""

from rich.console import Console
from rich.markup import escape

# Global console instance; stdout is reserved for the commit message
console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {escape(message)}")
