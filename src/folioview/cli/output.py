"""Rich output formatting for CLI commands."""

from __future__ import annotations

import math
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from folioview.dashboard import document as doc
from folioview.dashboard.formatting import (
    PLACEHOLDER,
    PnLClass,
    format_currency,
    format_number,
    format_percent,
    pnl_class,
    short_order_id,
    truncate,
)
from folioview.dashboard.page import EMPTY_TEXT
from folioview.models import KNOWN_ACTIONS, DashboardData, Decision, Position, Snapshot, Summary, Thesis

REASONING_WIDTH = 60

_PNL_COLORS = {
    PnLClass.GAIN: "green",
    PnLClass.LOSS: "red",
    PnLClass.NEUTRAL: "white",
}

_ACTION_COLORS = dict(zip(KNOWN_ACTIONS, ("green", "red", "dim")))


def _colored_pnl(amount: Optional[float], pct: Optional[float]) -> str:
    if amount is None:
        return PLACEHOLDER
    color = _PNL_COLORS[pnl_class(amount)]
    return f"[{color}]{format_currency(amount)} ({format_percent(pct)})[/{color}]"


def _section(title: str, console: Console) -> None:
    console.print(f"[bold]{title}[/bold]")
    console.print("─" * 40)


def print_summary(summary: Optional[Summary], console: Console) -> None:
    """Print the summary cards as a label/value table."""
    if summary is None:
        console.print(f"[dim]{PLACEHOLDER}[/dim]")
        return

    if summary.last_updated:
        console.print(f"[dim]Last updated {escape(summary.last_updated)}[/dim]")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Label", style="dim")
    table.add_column("Value", justify="right")

    table.add_row("Portfolio Value:", format_currency(summary.portfolio_value))
    table.add_row("Daily P&L:", _colored_pnl(summary.daily_pnl, summary.daily_pnl_pct))
    table.add_row("Total Return:", _colored_pnl(summary.total_pnl, summary.total_pnl_pct))
    table.add_row(
        "Positions:",
        str(summary.positions_count) if summary.positions_count is not None else PLACEHOLDER,
    )
    table.add_row("Cash:", format_currency(summary.cash))

    console.print(table)


def print_equity_curve(snapshots: Optional[list[Snapshot]], console: Console) -> None:
    """Print first, last and extreme values of the equity curve."""
    if not snapshots:
        console.print(f"[yellow]{EMPTY_TEXT[doc.CHART_EMPTY]}[/yellow]")
        return

    values = [
        s.portfolio_value
        for s in snapshots
        if s.portfolio_value is not None and math.isfinite(s.portfolio_value)
    ]
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Label", style="dim")
    table.add_column("Value", justify="right")
    table.add_row("Samples:", str(len(snapshots)))
    first, last = snapshots[0].date or PLACEHOLDER, snapshots[-1].date or PLACEHOLDER
    table.add_row("Period:", f"{escape(first)} to {escape(last)}")
    if values:
        table.add_row("Start:", format_currency(values[0]))
        table.add_row("Latest:", format_currency(values[-1]))
        table.add_row("High:", format_currency(max(values)))
        table.add_row("Low:", format_currency(min(values)))
    console.print(table)


def print_positions(positions: Optional[list[Position]], console: Console) -> None:
    """Print open positions."""
    if not positions:
        console.print(f"[yellow]{EMPTY_TEXT[doc.POSITIONS_EMPTY]}[/yellow]")
        return

    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("Ticker", style="bold")
    table.add_column("Shares", justify="right")
    table.add_column("Avg Cost", justify="right")

    for position in positions:
        table.add_row(
            escape(position.ticker or PLACEHOLDER),
            format_number(position.shares),
            format_currency(position.avg_cost),
        )

    console.print(table)


def _action_cell(decision: Decision) -> str:
    action = decision.action or PLACEHOLDER
    color = _ACTION_COLORS[decision.action] if decision.is_known_action else "cyan"
    return f"[{color}]{escape(action.upper())}[/{color}]"


def print_decisions(decisions: Optional[list[Decision]], console: Console) -> None:
    """Print the decision history in published order."""
    if not decisions:
        console.print(f"[yellow]{EMPTY_TEXT[doc.DECISIONS_EMPTY]}[/yellow]")
        return

    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("Date", style="dim")
    table.add_column("Ticker", style="bold")
    table.add_column("Action")
    table.add_column("Qty", justify="right")
    table.add_column("Reasoning")
    table.add_column("Order", style="dim")

    for decision in decisions:
        table.add_row(
            escape(decision.date or PLACEHOLDER),
            escape(decision.ticker or PLACEHOLDER),
            _action_cell(decision),
            format_number(decision.quantity) if decision.quantity else PLACEHOLDER,
            escape(truncate(decision.reasoning, REASONING_WIDTH)),
            escape(short_order_id(decision.order_id)),
        )

    console.print(table)


def print_thesis(thesis: Thesis, console: Console) -> None:
    """Print one thesis as a panel."""
    direction = (thesis.direction or "").upper()
    color = "green" if thesis.direction == "long" else "red" if thesis.direction == "short" else "white"
    header = f"[bold]{escape(thesis.ticker or PLACEHOLDER)}[/bold]"
    if direction:
        header += f"  [{color}]{escape(direction)}[/{color}]"
    if thesis.confidence:
        header += f"  [dim]{escape(thesis.confidence)}[/dim]"

    body = escape(thesis.thesis or "")
    triggers = (
        f"[dim]Entry: {escape(thesis.entry_trigger or PLACEHOLDER)}"
        f"  |  Exit: {escape(thesis.exit_trigger or PLACEHOLDER)}[/dim]"
    )
    console.print(Panel(f"{body}\n\n{triggers}", title=header, title_align="left", expand=True))


def print_theses(theses: Optional[list[Thesis]], console: Console) -> None:
    """Print every thesis."""
    if not theses:
        console.print(f"[yellow]{EMPTY_TEXT[doc.THESES_EMPTY]}[/yellow]")
        return

    for thesis in theses:
        print_thesis(thesis, console)


def print_dashboard(data: DashboardData, console: Console, title: str = "Portfolio Dashboard") -> None:
    """Print the full dashboard to the terminal."""
    console.print()
    console.print(Panel(f"[bold cyan]📊 {escape(title)}[/bold cyan]", expand=False))

    _section("💰 Summary", console)
    print_summary(data.summary, console)
    console.print()

    _section("📈 Equity Curve", console)
    print_equity_curve(data.snapshots, console)
    console.print()

    _section("💼 Positions", console)
    print_positions(data.positions, console)
    console.print()

    _section("🧾 Decisions", console)
    print_decisions(data.decisions, console)
    console.print()

    _section("💡 Investment Theses", console)
    print_theses(data.theses, console)
