"""Rich formatting utilities for the CLI.

Knows how to draw results; knows nothing about how they are produced.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from pathlib import Path

    from unattend_validator.domain.models.finding import Finding, ValidationResult

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Unattend Validator") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


# ---------------------------------------------------------------------------
# JSON rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


def result_json(result: ValidationResult) -> None:
    """Print the result as plain JSON for machine consumption."""
    console.print_json(json.dumps(result.to_dict()))


# ---------------------------------------------------------------------------
# Rule checklist
# ---------------------------------------------------------------------------


def rules_table(checklist: list[tuple[str, str, str]]) -> None:
    """Print the fixed validation checklist."""
    table = Table(title="📐 Unattend validation rules", show_header=True, border_style="blue")
    table.add_column("Check", style="cyan", width=24)
    table.add_column("Severity", width=14)
    table.add_column("Requirement", style="green")
    for name, severity, requirement in checklist:
        table.add_row(name, severity, requirement)
    console.print(table)


# ---------------------------------------------------------------------------
# Validation result rendering
# ---------------------------------------------------------------------------

_SEVERITY_STYLES = {"Error": "red", "Warning": "yellow", "Info": "cyan"}


def summary_panel(result: ValidationResult, report_path: Path | None = None) -> None:
    """Print the PASS/FAIL banner with per-severity counts."""
    color = "green" if result.overall_valid else "red"
    status = "✅ PASS" if result.overall_valid else "❌ FAIL"
    body = (
        f"File: [cyan]{escape(result.file_path)}[/]\n"
        f"Result: [bold {color}]{status}[/]\n"
        f"  ❌ Errors: {result.error_count}  |  "
        f"⚠️  Warnings: {result.warning_count}  |  "
        f"ℹ️  Info: {result.info_count}\n"
        f"XML well-formed: {'yes' if result.xml_well_formed else 'no'}  |  "
        f"Schema valid: {'yes' if result.schema_valid else 'no'}"
    )
    if report_path is not None:
        body += f"\nReport: [bold]{escape(str(report_path))}[/]"
    console.print(Panel(body, title="📊 Summary", border_style=color))


def _findings_table(title: str, findings: list[Finding]) -> Table:
    table = Table(title=title, show_header=True, border_style="blue")
    table.add_column("", width=3)
    table.add_column("Component", style="cyan", width=40)
    table.add_column("Line", justify="right", width=6)
    table.add_column("Message")
    for f in findings:
        style = _SEVERITY_STYLES[f.severity.value]
        table.add_row(
            f.icon,
            escape(f.component or "General"),
            str(f.line) if f.line is not None else "",
            f"[{style}]{escape(f.message)}[/]",
        )
    return table


def findings_tables(result: ValidationResult) -> None:
    """Print every finding, one table per severity."""
    for title, findings in (
        ("Errors", result.errors),
        ("Warnings", result.warnings),
        ("Information", result.infos),
    ):
        if findings:
            console.print(_findings_table(title, findings))
