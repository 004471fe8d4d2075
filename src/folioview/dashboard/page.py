"""Serialize a rendered DashboardDocument into a standalone HTML page."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from folioview.dashboard import document as doc
from folioview.dashboard.document import DashboardDocument, Region
from folioview.dashboard.formatting import escape_html
from folioview.models import DashboardSettings

logger = logging.getLogger(__name__)

EMPTY_TEXT = {
    doc.CHART_EMPTY: "No portfolio history yet.",
    doc.POSITIONS_EMPTY: "No open positions.",
    doc.DECISIONS_EMPTY: "No decisions recorded yet.",
    doc.THESES_EMPTY: "No active theses.",
}

POSITION_COLUMNS = ("Ticker", "Shares", "Avg Cost")
DECISION_COLUMNS = ("Date", "Ticker", "Action", "Qty", "Reasoning", "Order")

# Styling vocabulary: gain/loss, badge-<action>, thesis-direction <direction>.
# Unknown action or direction values fall back to the base style.
STYLESHEET = """
body { background: #0b1426; color: #e6edf3; font-family: -apple-system, "Segoe UI", sans-serif; margin: 0; }
header { display: flex; justify-content: space-between; align-items: baseline; padding: 1.5rem 2rem; }
main { padding: 0 2rem 2rem; }
section { background: #111d33; border: 1px solid #1e3a5f; border-radius: 8px; margin-bottom: 1.5rem; padding: 1rem 1.25rem; }
.status { color: #8892a4; font-size: 0.9rem; }
.cards { display: grid; grid-template-columns: repeat(auto-fit, minmax(160px, 1fr)); gap: 1rem; margin-bottom: 1.5rem; }
.card { background: #111d33; border: 1px solid #1e3a5f; border-radius: 8px; padding: 1rem; }
.card-label { color: #8892a4; font-size: 0.8rem; text-transform: uppercase; }
.card-value { font-size: 1.4rem; font-weight: 600; margin-top: 0.35rem; }
.gain { color: #00d4aa; }
.loss { color: #ff5c7a; }
table { border-collapse: collapse; width: 100%; }
th, td { border-bottom: 1px solid #1e3a5f; padding: 0.5rem; text-align: left; }
.num { text-align: right; font-variant-numeric: tabular-nums; }
.reasoning-cell { color: #b8c2d1; max-width: 32rem; }
.order-id { color: #8892a4; font-family: monospace; }
.badge { border-radius: 4px; font-size: 0.75rem; padding: 0.15rem 0.5rem; text-transform: uppercase; background: #2a3a55; }
.badge-buy { background: rgba(0, 212, 170, 0.2); color: #00d4aa; }
.badge-sell { background: rgba(255, 92, 122, 0.2); color: #ff5c7a; }
.badge-hold { background: rgba(136, 146, 164, 0.2); color: #8892a4; }
.empty { color: #8892a4; font-style: italic; }
.thesis-card { border: 1px solid #1e3a5f; border-radius: 6px; margin-bottom: 0.75rem; padding: 0.75rem 1rem; }
.thesis-header { display: flex; gap: 0.75rem; align-items: center; }
.thesis-ticker { font-weight: 700; }
.thesis-direction { font-size: 0.75rem; text-transform: uppercase; }
.thesis-direction.long { color: #00d4aa; }
.thesis-direction.short { color: #ff5c7a; }
.thesis-confidence { color: #8892a4; font-size: 0.8rem; }
.thesis-triggers { color: #8892a4; font-size: 0.85rem; }
"""

CHART_BOOTSTRAP = """
(function () {
  var cfg = JSON.parse(document.getElementById("equity-chart-config").textContent);
  var money = function (v) {
    return "$" + Number(v).toLocaleString("en-US", { minimumFractionDigits: 2, maximumFractionDigits: 2 });
  };
  cfg.options.plugins.tooltip = { callbacks: { label: function (ctx) { return money(ctx.parsed.y); } } };
  cfg.options.scales.y.ticks.callback = money;
  new Chart(document.getElementById("equity-chart"), cfg);
})();
"""


def _attrs(region: Region, extra_class: str = "") -> str:
    classes = " ".join(c for c in (extra_class, region.class_name) if c)
    parts = [f'id="{escape_html(region.id)}"']
    if classes:
        parts.append(f'class="{classes}"')
    if not region.visible:
        parts.append('style="display:none"')
    return " ".join(parts)


def _card(label: str, region: Region) -> str:
    return (
        '<div class="card">'
        f'<div class="card-label">{escape_html(label)}</div>'
        f"<div {_attrs(region)}>{escape_html(region.text)}</div>"
        "</div>"
    )


def _empty_message(region: Region) -> str:
    return f"<p {_attrs(region, 'empty')}>{escape_html(EMPTY_TEXT[region.id])}</p>"


def _table(region: Region, columns: tuple[str, ...]) -> str:
    head = "".join(f"<th>{escape_html(c)}</th>" for c in columns)
    body = "".join(region.fragments)
    return (
        f"<table {_attrs(region)}>"
        f"<thead><tr>{head}</tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table>"
    )


def _chart_config_json(region: Region) -> Optional[str]:
    if region.chart is None:
        return None
    # A literal "</" would close the script element early
    return json.dumps(region.chart.to_config(), allow_nan=False).replace("</", "<\\/")


def render_page(document: DashboardDocument, settings: Optional[DashboardSettings] = None) -> str:
    """Build the full HTML page for a rendered document.

    Args:
        document: Document populated by the renderers
        settings: Supplies the page title and Chart.js URL

    Returns:
        The page as a string
    """
    settings = settings or DashboardSettings()
    status = document.region(doc.LAST_UPDATED)
    chart = document.region(doc.EQUITY_CHART)
    config_json = _chart_config_json(chart)

    cards = "".join([
        _card("Portfolio Value", document.region(doc.PORTFOLIO_VALUE)),
        _card("Daily P&L", document.region(doc.DAILY_PNL)),
        _card("Total Return", document.region(doc.TOTAL_RETURN)),
        _card("Positions", document.region(doc.POSITIONS_COUNT)),
        _card("Cash", document.region(doc.CASH_VALUE)),
    ])

    chart_section = f"<canvas {_attrs(chart)}></canvas>" + _empty_message(document.region(doc.CHART_EMPTY))
    scripts = ""
    if config_json is not None:
        chart_section += f'<script type="application/json" id="equity-chart-config">{config_json}</script>'
        scripts = (
            f'<script src="{escape_html(settings.chart_js_url)}"></script>'
            f"<script>{CHART_BOOTSTRAP}</script>"
        )

    theses = document.region(doc.THESES_LIST)
    title = escape_html(settings.title)

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{title}</title>\n"
        f"<style>{STYLESHEET}</style>\n"
        "</head>\n"
        "<body>\n"
        f'<header><h1>{title}</h1><span {_attrs(status, "status")}>{escape_html(status.text)}</span></header>\n'
        "<main>\n"
        f'<div class="cards">{cards}</div>\n'
        f"<section><h2>Equity Curve</h2>{chart_section}</section>\n"
        "<section><h2>Positions</h2>"
        f"{_table(document.region(doc.POSITIONS_TABLE), POSITION_COLUMNS)}"
        f"{_empty_message(document.region(doc.POSITIONS_EMPTY))}</section>\n"
        "<section><h2>Decisions</h2>"
        f"{_table(document.region(doc.DECISIONS_TABLE), DECISION_COLUMNS)}"
        f"{_empty_message(document.region(doc.DECISIONS_EMPTY))}</section>\n"
        "<section><h2>Investment Theses</h2>"
        f"<div {_attrs(theses)}>{''.join(theses.fragments)}</div>"
        f"{_empty_message(document.region(doc.THESES_EMPTY))}</section>\n"
        "</main>\n"
        f"{scripts}\n"
        "</body>\n"
        "</html>\n"
    )


def write_page(
    document: DashboardDocument,
    path: Path,
    settings: Optional[DashboardSettings] = None,
) -> Path:
    """Render the page and write it to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_page(document, settings), encoding="utf-8")
    logger.info(f"Wrote dashboard to {path}")
    return path
