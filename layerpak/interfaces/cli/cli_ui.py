#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent output across all commands.
"""

from __future__ import annotations

from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


class TableDisplay:
    """
    Formatted tables for dependencies and layer records.
    """

    @staticmethod
    def show_dependencies(dependencies: list[Any], title: str = "Dependencies"):
        """Display a table of buildpack dependencies."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("ID", style=COLOR_INFO)
        table.add_column("Version")
        table.add_column("Stacks", overflow="fold")
        table.add_column("Licenses", overflow="fold")

        for dep in dependencies:
            table.add_row(
                escape(dep.id),
                escape(dep.version),
                escape(", ".join(dep.stacks)),
                escape(", ".join(lic.type for lic in dep.licenses)),
            )

        console.print(table)

    @staticmethod
    def show_metadata(metadata: dict[str, Any], title: str = "Metadata"):
        """Display a layer metadata record as key/value rows."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Key", style=COLOR_INFO)
        table.add_column("Value", overflow="fold")

        for key in sorted(metadata):
            table.add_row(escape(key), escape(format_value(metadata[key])))

        console.print(table)


def format_value(value: Any) -> str:
    """Compact single-line rendering of a metadata value."""
    if isinstance(value, dict):
        return ", ".join(f"{k}={format_value(v)}" for k, v in value.items())
    if isinstance(value, list | tuple):
        return "[" + "; ".join(format_value(v) for v in value) + "]"
    return str(value)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")
