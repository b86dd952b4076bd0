"""Console output helpers for CLI commands."""

import functools
import sys
from typing import Any, Callable

from rich.console import Console
from rich.markup import escape

# Data goes to stdout, status messages go here
console = Console(stderr=True)


def info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[cyan]ℹ[/cyan] {escape(message)}")


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]✓[/bold green] {escape(message)}")


def warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]⚠[/bold yellow] {escape(message)}")


def error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]✗[/bold red] {escape(message)}")


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorate a command so interrupts and stray errors end the process cleanly.

    ``SystemExit`` raised by the command passes through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            warning("Interrupted")
            sys.exit(130)
        except SystemExit:
            raise
        except Exception as e:
            error(f"Unexpected error: {e}")
            sys.exit(1)

    return wrapper
