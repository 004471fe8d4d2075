"""Display formatting helpers.

Every function here is total: any input, including ``None`` or a value of
the wrong type, produces a display string instead of raising.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Optional

PLACEHOLDER = "—"
ELLIPSIS = "..."

# Order IDs at or below this length are shown in full
ORDER_ID_MAX_LEN = 12
ORDER_ID_PREFIX_LEN = 8

_HTML_ESCAPES = (
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
)


class PnLClass(str, Enum):
    """Styling class for a profit/loss figure."""

    NEUTRAL = ""
    GAIN = "gain"
    LOSS = "loss"


def _to_number(value: Any) -> Optional[float]:
    """Coerce a value to a finite float, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        val = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(val):
        return None
    # Normalize -0.0 so it formats like zero
    return val + 0.0


def escape_html(value: Any) -> str:
    """Escape a value for safe embedding in HTML text or attributes.

    Args:
        value: Text to escape; non-strings are converted with ``str()``

    Returns:
        The escaped text, or an empty string for empty input
    """
    if value is None or value == "":
        return ""
    text = str(value)
    for raw, entity in _HTML_ESCAPES:
        text = text.replace(raw, entity)
    return text


def format_currency(value: Any) -> str:
    """Format a value as US dollars with grouping and two decimals.

    Args:
        value: Amount to format

    Returns:
        e.g. ``"$1,234.50"``, or the placeholder when absent
    """
    val = _to_number(value)
    if val is None:
        return PLACEHOLDER
    return f"${val:,.2f}"


def format_percent(value: Any) -> str:
    """Format a value as a signed percentage.

    The value is already a percentage (``3.5`` means 3.5%). Non-negative
    values, zero included, carry an explicit ``+``.
    """
    val = _to_number(value)
    if val is None:
        return PLACEHOLDER
    sign = "+" if val >= 0 else ""
    return f"{sign}{val:.2f}%"


def format_number(value: Any) -> str:
    """Format a share count or quantity as a plain number."""
    val = _to_number(value)
    if val is None:
        return PLACEHOLDER
    if val.is_integer():
        return str(int(val))
    return str(val)


def pnl_class(value: Any) -> PnLClass:
    """Classify a P&L figure for styling.

    Args:
        value: P&L amount

    Returns:
        NEUTRAL for absent or zero, GAIN for positive, LOSS for negative
    """
    val = _to_number(value)
    if val is None or val == 0:
        return PnLClass.NEUTRAL
    return PnLClass.GAIN if val > 0 else PnLClass.LOSS


def truncate(value: Optional[str], max_len: int) -> str:
    """Cut text to ``max_len`` characters, marking the cut with an ellipsis."""
    if not value:
        return PLACEHOLDER
    text = str(value)
    if len(text) > max_len:
        return text[:max_len] + ELLIPSIS
    return text


def short_order_id(order_id: Optional[str]) -> str:
    """Shorten a long broker order ID to its first few characters."""
    if not order_id:
        return PLACEHOLDER
    text = str(order_id)
    if len(text) > ORDER_ID_MAX_LEN:
        return text[:ORDER_ID_PREFIX_LEN] + ELLIPSIS
    return text
