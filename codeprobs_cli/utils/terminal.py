"""Utility functions for terminal output."""

from typing import TYPE_CHECKING, List

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from ..client.models import Answer, User
    from ..client.outcomes import Outcome

console = Console()
err_console = Console(stderr=True)

SEPARATOR = "-" * 40


def echo_raw(text: str) -> None:
    """Print server or source text exactly as received, without wrapping."""
    click.echo(text)


def create_table(title: str, headers: list) -> Table:
    """Create a formatted table for display."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in headers:
        table.add_column(header)
    return table


def leaderboard_table(users: List["User"]) -> Table:
    """Two-column leaderboard, one row per user."""
    table = create_table("Leaderboard", ["Username", "Points"])
    for user in users:
        table.add_row(escape(user.username), str(user.points))
    return table


def print_answer(answer: "Answer") -> None:
    """Print header line, content and a separator for one answer."""
    console.print(
        f"[bold]{answer.id}, {escape(answer.user.username)}, "
        f"[green]{answer.upvote_count}[/green], [red]{answer.downvote_count}[/red][/bold]"
    )
    echo_raw(answer.content)
    echo_raw(SEPARATOR)


def print_outcome(outcome: "Outcome") -> None:
    """Print a business outcome with the matching colour."""
    color = "green" if outcome.success else "yellow"
    console.print(f"[{color}]{escape(outcome.message)}[/{color}]")

    if outcome.detail is not None:
        console.print("[bold]Reason:[/bold]")
        echo_raw(outcome.detail)

    if outcome.error is not None:
        console.print("[bold]Reason:[/bold]")
        echo_raw(outcome.error.reason)
        if outcome.error.stdout is not None:
            console.print("[bold cyan]stdout:[/bold cyan]")
            echo_raw(outcome.error.stdout)
        if outcome.error.stderr is not None:
            console.print("[bold red]stderr:[/bold red]")
            echo_raw(outcome.error.stderr)
