"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module provides formatted console output using Rich.
It handles:
- Room text and command responses
- Errors and validation reports
- Prompts (the turn prompt and the QUIT confirmation)

Game text is printed literally (markup=False); it comes from world files
and may contain square brackets.
"""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

# Global console instance
console = Console()


def print_message(text: str) -> None:
    """Print a normal game message."""
    if text:
        console.print(text, markup=False, highlight=False)


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(Text(text, style="red"))


def print_warning(text: str) -> None:
    """Print a warning."""
    console.print(Text(text, style="yellow"))


def print_success(text: str) -> None:
    """Print a success message."""
    console.print(Text(text, style="green"))


def print_prompt(prompt: str = "> ") -> str:
    """Print a prompt and get user input."""
    return console.input(Text(prompt, style="bold cyan"))


def print_debug(data: dict[str, object] | str) -> None:
    """Print debug information."""
    console.print("[dim]--- DEBUG ---[/dim]")
    if isinstance(data, dict):
        for key, value in data.items():
            console.print(Text(f"{key}: {value}", style="dim"))
    else:
        console.print(Text(data, style="dim"))
    console.print("[dim]-------------[/dim]")


def print_game_over(message: str) -> None:
    """Print the closing panel."""
    panel = Panel(
        Text(message, justify="center", style="bold"),
        title="Game Over",
        border_style="red",
    )
    console.print(panel)
