# Domain Layer
# ============
# Pure functions over plain order dicts. No file, network or framework access.
from .order_formatter import format_order_summary, format_amount
from .sales_report import daily_totals, order_date

__all__ = ["format_order_summary", "format_amount", "daily_totals", "order_date"]
