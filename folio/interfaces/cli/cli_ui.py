#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.

Values coming from the document or the submission log are user content and
are escaped before they reach Rich markup.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from folio.components.normalization.section_specs_comp import SECTION_SPECS
from folio.helpers.dto.normalization_dto import Rejection

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"

STATUS_COLORS = {
    "received": COLOR_INFO,
    "sent": COLOR_SUCCESS,
    "send_failed": COLOR_ERROR,
    "email_not_configured": COLOR_WARNING,
}


class InfoPanel:
    """
    Simple panel for displaying status/info.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {message}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {message}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {message}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}][i][/{COLOR_INFO}] {message}")


def print_json(value: Any):
    """Pretty-print a JSON value with syntax highlighting."""
    console.print(Syntax(json.dumps(value, indent=2, ensure_ascii=False), "json", word_wrap=True))


def print_rejection(rejection: Rejection):
    """Show why an input was refused."""
    detail = f"{escape(rejection.message)} [dim]({rejection.code.value} at {escape(rejection.field)}"
    if rejection.limit is not None:
        detail += f", max {rejection.limit}"
    print_error(detail + ")[/dim]")


def _item_count(section: Any) -> str:
    if not isinstance(section, Mapping):
        return ""
    counts = [f"{key}: {len(value)}" for key, value in section.items() if isinstance(value, list)]
    return ", ".join(counts)


class TableDisplay:
    """
    Formatted tables for sections and submissions.
    """

    @staticmethod
    def show_sections(document: Mapping[str, Any], title: str = "Site Sections"):
        """Display known sections with their visibility and list sizes."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Section", style=COLOR_INFO, width=16)
        table.add_column("Enabled", width=9)
        table.add_column("Items", overflow="fold")

        for section_id in SECTION_SPECS:
            section = document.get(section_id)
            if section is None:
                enabled = "[dim]absent[/dim]"
            elif isinstance(section, Mapping) and section.get("enabled") is False:
                enabled = f"[{COLOR_WARNING}]no[/{COLOR_WARNING}]"
            else:
                enabled = f"[{COLOR_SUCCESS}]yes[/{COLOR_SUCCESS}]"
            table.add_row(section_id, enabled, escape(_item_count(section)))

        extra = sorted(k for k in document if k not in SECTION_SPECS)
        for section_id in extra:
            table.add_row(f"[dim]{escape(section_id)}[/dim]", "", escape(_item_count(document[section_id])))

        console.print(table)

    @staticmethod
    def show_submissions(records: list[Mapping[str, Any]], title: str = "Submissions"):
        """Display submissions, one row each."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("ID", style=COLOR_INFO, width=22)
        table.add_column("Received", width=24)
        table.add_column("From", overflow="fold")
        table.add_column("Subject", overflow="fold")
        table.add_column("Status", width=22)

        for record in records:
            status = str(record.get("status", ""))
            color = STATUS_COLORS.get(status, "white")
            table.add_row(
                escape(str(record.get("id", ""))),
                escape(str(record.get("createdAt", ""))),
                escape(f"{record.get('name', '')} <{record.get('email', '')}>"),
                escape(str(record.get("subject", ""))),
                f"[{color}]{escape(status)}[/{color}]",
            )

        console.print(table)
