"""Unit tests for the rich terminal view."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from folioview.cli.output import (
    _ACTION_COLORS,
    _action_cell,
    print_dashboard,
    print_decisions,
    print_equity_curve,
    print_summary,
)
from folioview.models import KNOWN_ACTIONS, DashboardData, Decision, Position, Snapshot, Summary, Thesis


def _console() -> tuple[Console, StringIO]:
    buf = StringIO()
    return Console(file=buf, width=200, force_terminal=False, color_system=None), buf


class TestPrintDashboard:
    """Tests for print_dashboard."""

    def test_full_dashboard(
        self,
        summary_payload: dict,
        snapshots_payload: list[dict],
        positions_payload: list[dict],
        decisions_payload: list[dict],
        theses_payload: list[dict],
    ) -> None:
        data = DashboardData(
            summary=Summary(**summary_payload),
            snapshots=[Snapshot(**s) for s in snapshots_payload],
            positions=[Position(**p) for p in positions_payload],
            decisions=[Decision(**d) for d in decisions_payload],
            theses=[Thesis(**t) for t in theses_payload],
        )
        console, buf = _console()
        print_dashboard(data, console)
        out = buf.getvalue()

        assert "$104,321.50" in out
        assert "$812.25 (+0.78%)" in out
        assert "AAPL" in out
        assert "9f8e7d6c..." in out
        assert "LONG" in out
        assert "Entry: Pullback to 50-day MA" in out

    def test_empty_dashboard(self) -> None:
        console, buf = _console()
        print_dashboard(DashboardData(), console)
        out = buf.getvalue()

        assert "No portfolio history yet." in out
        assert "No open positions." in out
        assert "No decisions recorded yet." in out
        assert "No active theses." in out


class TestSections:
    """Tests for individual sections."""

    def test_summary_placeholders(self) -> None:
        console, buf = _console()
        print_summary(Summary(portfolio_value=10), console)
        out = buf.getvalue()
        assert "$10.00" in out
        assert "—" in out

    def test_reasoning_truncated(self) -> None:
        console, buf = _console()
        print_decisions([Decision(action="buy", reasoning="r" * 100)], console)
        out = buf.getvalue()
        assert "r" * 60 + "..." in out
        assert "r" * 61 not in out

    def test_markup_in_text_is_literal(self) -> None:
        console, buf = _console()
        print_decisions([Decision(action="short", reasoning="[bold]not markup[/bold]")], console)
        out = buf.getvalue()
        assert "[bold]not markup[/bold]" in out
        assert "SHORT" in out

    def test_equity_curve_stats(self, snapshots_payload: list[dict]) -> None:
        console, buf = _console()
        print_equity_curve([Snapshot(**s) for s in snapshots_payload], console)
        out = buf.getvalue()
        assert "2026-02-02 to 2026-02-04" in out
        assert "$103,000.00" in out
        assert "$104,321.50" in out

    def test_equity_curve_without_dates(self) -> None:
        console, buf = _console()
        print_equity_curve([Snapshot(portfolio_value=1), Snapshot(portfolio_value=2)], console)
        out = buf.getvalue()
        assert "— to —" in out
        assert "$2.00" in out

    def test_equity_curve_skips_non_finite(self) -> None:
        console, buf = _console()
        snapshots = [
            Snapshot(date="2026-02-03", portfolio_value=float("inf")),
            Snapshot(date="2026-02-04", portfolio_value=10),
            Snapshot(date="2026-02-05", portfolio_value=float("nan")),
        ]
        print_equity_curve(snapshots, console)
        out = buf.getvalue()
        assert "inf" not in out
        assert "nan" not in out
        assert "$10.00" in out


class TestActionColors:
    """Tests for decision action coloring."""

    def test_every_known_action_has_a_color(self) -> None:
        assert set(_ACTION_COLORS) == set(KNOWN_ACTIONS)

    def test_known_action_color(self) -> None:
        assert _action_cell(Decision(action="sell")) == "[red]SELL[/red]"

    def test_unknown_action_color(self) -> None:
        assert _action_cell(Decision(action="short")) == "[cyan]SHORT[/cyan]"
        assert _action_cell(Decision()) == "[cyan]—[/cyan]"
