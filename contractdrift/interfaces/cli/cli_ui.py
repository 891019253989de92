#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent, professional interface across all commands.
"""

from __future__ import annotations

import math

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from contractdrift.helpers.dto.drift_dto import DriftDashboard, Issue

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"
COLOR_DEAD = "bright_black"

RISK_COLORS = {
    "error": COLOR_ERROR,
    "warning": COLOR_WARNING,
    "dead": COLOR_DEAD,
    "ok": COLOR_SUCCESS,
}

METHOD_COLORS = {
    "GET": "green",
    "POST": "blue",
    "PATCH": "yellow",
    "DELETE": "red",
    "PUT": "magenta",
}

ISSUE_LABELS = {
    "extra": "Undocumented Field",
    "unused": "Never Used",
    "type": "Type Mismatch",
    "dead": "Dead Endpoint",
    "deprecated": "Deprecated",
}


class InfoPanel:
    """
    Simple panel for displaying status/info without progress tracking.
    """

    @staticmethod
    def show(title: str, content: str, border_style: str = COLOR_INFO):
        """Show a single info panel."""
        panel = Panel(content, title=f"[bold]{title}[/bold]", border_style=border_style, box=box.ROUNDED)
        console.print(panel)


def describe_issue(issue: Issue) -> str:
    """One-line explanation of an issue for display."""
    if issue.type == "extra":
        return "In traffic but missing from spec"
    if issue.type == "unused":
        return "In spec but never sent by clients"
    if issue.type == "type":
        return (
            f"Expected [{COLOR_SUCCESS}]{escape(str(issue.expected))}[/{COLOR_SUCCESS}] → "
            f"Got [{COLOR_ERROR}]{escape(str(issue.actual))}[/{COLOR_ERROR}] ({escape(str(issue.frequency))})"
        )
    if issue.type == "dead":
        return "No traffic received - candidate for removal"
    if issue.type == "deprecated":
        return f"Still receiving {issue.frequency}"
    return ""


def health_color(score: int) -> str:
    if score >= 80:
        return COLOR_SUCCESS
    if score >= 50:
        return COLOR_WARNING
    return COLOR_ERROR


class DriftDisplay:
    """
    Formatted panels and tables for a drift dashboard.
    """

    @staticmethod
    def show(dashboard: DriftDashboard):
        """Display the full dashboard: health, issues, optimizer, usage, endpoints."""
        DriftDisplay.show_health(dashboard)
        if dashboard.issues:
            DriftDisplay.show_issues(dashboard)
        if dashboard.optimizer:
            DriftDisplay.show_optimizer(dashboard)
        if dashboard.report.field_usage:
            DriftDisplay.show_field_usage(dashboard)
        DriftDisplay.show_endpoints(dashboard)

    @staticmethod
    def show_health(dashboard: DriftDashboard):
        report = dashboard.report
        color = health_color(dashboard.health_score)
        content = (
            f"[bold {color}]{dashboard.health_score}%[/bold {color}] contract health\n"
            f"[bold]Endpoints:[/bold] {report.total_endpoints}   "
            f"[bold]Traffic samples:[/bold] {report.traffic_samples:,}\n"
            f"[{COLOR_SUCCESS}]{dashboard.ok_count} ok[/{COLOR_SUCCESS}]   "
            f"[{COLOR_WARNING}]{dashboard.deprecated_count} deprecated[/{COLOR_WARNING}]   "
            f"[{COLOR_DEAD}]{dashboard.dead_count} dead[/{COLOR_DEAD}]"
        )
        InfoPanel.show(escape(report.spec_name), content, color)

    @staticmethod
    def show_issues(dashboard: DriftDashboard):
        table = Table(title="Issues", box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Issue", width=20)
        table.add_column("Endpoint", style=COLOR_INFO, overflow="fold")
        table.add_column("Field", overflow="fold")
        table.add_column("Details", overflow="fold")

        for issue in dashboard.issues:
            color = RISK_COLORS.get(issue.severity, COLOR_INFO)
            table.add_row(
                f"[{color}]{ISSUE_LABELS.get(issue.type, issue.type)}[/{color}]",
                escape(issue.endpoint),
                escape(issue.field),
                describe_issue(issue),
            )
        console.print(table)

    @staticmethod
    def show_optimizer(dashboard: DriftDashboard):
        table = Table(title="Optimizer", box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Action", width=10)
        table.add_column("Target", overflow="fold")
        table.add_column("Impact", overflow="fold")
        table.add_column("Verdict", width=18)

        for risk in dashboard.optimizer:
            color = COLOR_ERROR if risk.severity == "safe" else COLOR_WARNING
            verdict = "⊘ Can be deleted" if risk.severity == "safe" else "⚠ Deprecated"
            table.add_row(risk.action, escape(risk.target), escape(risk.impact), f"[{color}]{verdict}[/{color}]")
        console.print(table)

    @staticmethod
    def show_field_usage(dashboard: DriftDashboard):
        table = Table(title="Field Usage", box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Field", style=COLOR_INFO)
        table.add_column("Usage", justify="right", width=8)
        table.add_column("", width=22)

        for usage in dashboard.report.field_usage:
            if math.isnan(usage.usage):
                table.add_row(escape(usage.field), "?", "")
                continue
            filled = max(0, min(20, round(usage.usage / 5)))
            table.add_row(escape(usage.field), f"{usage.usage:g}%", "█" * filled + "░" * (20 - filled))
        console.print(table)

    @staticmethod
    def show_endpoints(dashboard: DriftDashboard):
        table = Table(title="Endpoints", box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("Method", width=8)
        table.add_column("Path", overflow="fold")
        table.add_column("Hits", justify="right")
        table.add_column("Status", width=10)

        for endpoint in dashboard.report.endpoints:
            method_color = METHOD_COLORS.get(endpoint.method, COLOR_INFO)
            risk_color = RISK_COLORS.get(endpoint.risk, COLOR_INFO)
            table.add_row(
                f"[{method_color}]{endpoint.method}[/{method_color}]",
                escape(endpoint.path),
                f"{endpoint.hits:,}",
                f"[{risk_color}]{endpoint.risk}[/{risk_color}]",
            )
        console.print(table)


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
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {message}")
