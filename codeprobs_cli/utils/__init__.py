"""Utility functions."""

from .terminal import (
    console,
    err_console,
    create_table,
    leaderboard_table,
    print_answer,
    print_outcome,
)

__all__ = [
    "console",
    "err_console",
    "create_table",
    "leaderboard_table",
    "print_answer",
    "print_outcome",
]
