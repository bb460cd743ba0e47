from .order_store import OrderStore, OrderWriteError, utc_timestamp

__all__ = ["OrderStore", "OrderWriteError", "utc_timestamp"]
