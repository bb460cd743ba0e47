"""
Order Store - Flat-File JSON Order Persistence
==============================================

All orders live in a single JSON array on disk. Orders are appended once
and never updated or deleted.

ARCHITECTURAL DECISION:
- Appends are a full read-modify-write of the file, serialized by a
  process-local lock so concurrent requests in one server cannot drop
  each other's orders. Several processes sharing one file are NOT safe.
- The file is rewritten through a temp file + os.replace, so a crash
  mid-write leaves the previous collection intact.
- Reads degrade to an empty list on missing or unparsable data. An
  unparsable file is copied aside before the next append replaces it.

EXTENSIBILITY:
- To move to SQLite or a document store: keep the list_orders/append_order
  signatures and swap this class.
"""

import json
import logging
import os
import shutil
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

Order = Dict[str, Any]


class OrderWriteError(Exception):
    """Raised when the order collection cannot be written to disk."""
    pass


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class OrderStore:
    """
    Append-only order collection backed by one JSON file.

    Usage:
        store = OrderStore(Path("orders.json"))
        store.append_order({"phone": "+911234567890", "items": [], "total": 0,
                            "timestamp": utc_timestamp()})
        orders = store.list_orders()
    """

    def __init__(self, orders_path: Path):
        self.orders_path = Path(orders_path)
        self._lock = threading.Lock()

    def _read_collection(self) -> Optional[List[Order]]:
        """
        Read the collection from disk.

        Returns:
            The stored orders, an empty list when the file is absent or empty,
            or None when the file exists but does not hold a JSON array.
        """
        try:
            data = self.orders_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error(f"Error reading {self.orders_path}: {e}")
            return None

        if not data.strip():
            return []

        try:
            orders = json.loads(data)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing {self.orders_path}: {e}")
            return None

        if not isinstance(orders, list):
            logger.error(f"{self.orders_path} does not contain a JSON array")
            return None
        return orders

    def _preserve_corrupt_file(self):
        """Copy an unparsable collection aside before it gets overwritten."""
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        backup = self.orders_path.with_name(f"{self.orders_path.name}.corrupt-{stamp}")
        try:
            shutil.copy2(self.orders_path, backup)
            logger.error(f"Unparsable order file preserved as {backup}")
        except OSError as e:
            logger.error(f"Could not preserve unparsable order file: {e}")

    def _write_collection(self, orders: List[Order]):
        tmp_path = self.orders_path.with_name(self.orders_path.name + ".tmp")
        try:
            self.orders_path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(orders, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.orders_path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save order: {e}")
            raise OrderWriteError(str(e)) from e

    # ── Public API ─────────────────────────────────────────────────

    def list_orders(self) -> List[Order]:
        """All stored orders in insertion order; empty on any failure."""
        orders = self._read_collection()
        return orders if orders is not None else []

    def append_order(self, order: Order):
        """
        Append one order and rewrite the whole collection.

        Raises:
            OrderWriteError: the collection could not be written.
        """
        with self._lock:
            orders = self._read_collection()
            if orders is None:
                self._preserve_corrupt_file()
                orders = []
            orders.append(order)
            self._write_collection(orders)

        items = order.get("items")
        item_count = len(items) if isinstance(items, list) else 0
        logger.info(f"Order saved for {order.get('phone')} ({item_count} items, {len(orders)} orders total)")
