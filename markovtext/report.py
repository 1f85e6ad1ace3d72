#!/usr/bin/env python3
"""
Console Reporting
=================
Renders trained tables and generated text for the terminal.
"""

import sys
from typing import Optional

from .markov import ProbabilityTable
from .settings import get_setting


class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False, stream=None, err_stream=None):
        self.quiet = quiet
        self.stream = stream
        self.err_stream = err_stream

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, file=self.stream or sys.stdout, **kwargs)

    def result(self, text: str):
        """Print text regardless of quiet mode (the command's actual result)."""
        print(text, file=self.stream or sys.stdout)

    def error(self, msg: str):
        print(f"Error: {msg}", file=self.err_stream or sys.stderr)


def show_char(char: str) -> str:
    """Quote a character, escaping whitespace that would break the layout."""
    return repr(char)


def format_row(context: str, row, precision: int) -> str:
    entries = ', '.join(f"{show_char(c)}: {p:.{precision}f}" for c, p in row.items())
    return f"{show_char(context)} -> {entries}"


def format_table(table: ProbabilityTable, precision: Optional[int] = None) -> str:
    """
    Render a table as one line per context, in training order.

    Example:
        'abc' -> 'a': 0.5000, 'd': 0.5000
    """
    if precision is None:
        precision = int(get_setting("report.probability_precision", 4))

    lines = [f"Order-{table.context_length} table, {len(table)} contexts"]
    for context in table:
        lines.append(format_row(context, table[context], precision))
    return '\n'.join(lines)


def format_generated(text: str) -> str:
    """Header plus generated text, laid out like the table dump."""
    return f"\n\nGenerated Text:\n\n{text}"


__all__ = ["Output", "show_char", "format_row", "format_table", "format_generated"]
