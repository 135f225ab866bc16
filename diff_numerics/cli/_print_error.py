"""Error display on stderr."""

from rich.console import Console
from rich.markup import escape


def _print_error(message: str) -> None:
    """Display an error message in red on stderr."""
    console = Console(stderr=True, soft_wrap=True)
    console.print(f"[red]✗[/red] {escape(message)}", highlight=False)
