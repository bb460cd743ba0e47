"""
Order Formatter - WhatsApp Order Confirmation Text
==================================================

Renders a stored order into the confirmation message sent to the customer.
WhatsApp markdown (*bold*) is used for the header and total.
"""

from datetime import datetime, timezone
from typing import Any, Mapping, Union

HEADER = "🧾 *Order Summary*"
FOOTER = "🙏 Thank you for ordering from *{business}*!"


def format_amount(value: Any) -> str:
    """Render a number without a trailing ".0" when it is whole."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_local_datetime(timestamp: str) -> str:
    """
    Calendar-style local time, e.g. "5/1/2024, 3:45:30 PM".

    Unparsable timestamps are shown as given.
    """
    try:
        moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return str(timestamp)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    local = moment.astimezone()
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local:%M:%S} {meridiem}"


def to_number(value: Any) -> Union[int, float]:
    """Numeric value of a loosely typed field ("2" -> 2.0); 0 when not a number."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def _line_total(item: Mapping[str, Any]) -> Union[int, float]:
    return to_number(item.get("qty", 0)) * to_number(item.get("price", 0))


def format_order_summary(
    order: Mapping[str, Any],
    timestamp: str,
    currency: str = "₹",
    business_name: str = "Gustanto",
) -> str:
    """
    Build the order confirmation message.

    Args:
        order: Order dict with "items" ({name, qty, price}) and "total".
        timestamp: ISO-8601 creation time of the order.
        currency: Symbol placed before every amount.
        business_name: Shown in the thank-you line.

    Returns:
        Multi-line message body.
    """
    lines = [HEADER, f"📅 {format_local_datetime(timestamp)}", ""]

    for item in order.get("items") or []:
        lines.append(
            f"{item.get('name', '')} x{item.get('qty', 0)} – "
            f"{currency}{format_amount(_line_total(item))}"
        )

    lines.append("")
    lines.append(f"*Total*: {currency}{format_amount(order.get('total', 0))}")
    lines.append(FOOTER.format(business=business_name))
    return "\n".join(lines)
