"""
Sales Report - Revenue per Calendar Day
=======================================

Feeds the dashboard chart. Recomputed from the full order list on every
call; nothing is stored.
"""

import logging
from datetime import datetime, timezone
from numbers import Number
from typing import Any, Dict, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)


def order_date(timestamp: Any) -> Optional[str]:
    """UTC calendar date (YYYY-MM-DD) of an ISO-8601 timestamp, or None."""
    if not isinstance(timestamp, str):
        return None
    try:
        moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).date().isoformat()


def _order_total(order: Mapping[str, Any]) -> Number:
    total = order.get("total")
    if isinstance(total, bool) or not total:
        return 0
    if isinstance(total, Number):
        return total
    try:
        return float(total)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric order total: {total!r}")
        return 0


def daily_totals(orders: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """
    Sum order totals per UTC day.

    Days appear in order of their first order, not sorted. Orders without
    a readable timestamp are skipped; a missing total counts as 0.

    Returns:
        [{"date": "2024-05-01", "total": 250}, ...]
    """
    chart: Dict[str, Number] = {}

    for order in orders:
        if not isinstance(order, Mapping):
            logger.warning(f"Skipping malformed order entry: {order!r}")
            continue
        day = order_date(order.get("timestamp"))
        if day is None:
            logger.warning(f"Skipping order with unreadable timestamp: {order.get('timestamp')!r}")
            continue
        chart[day] = chart.get(day, 0) + _order_total(order)

    return [{"date": day, "total": total} for day, total in chart.items()]
