"""
FastAPI Web Application - Gustanto POS Backend
==============================================

JSON API used by the POS frontend: menu codex, order intake with WhatsApp
confirmation, promotional messages, order history and daily revenue.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from contextlib import asynccontextmanager

from fastapi import FastAPI, BackgroundTasks, Body
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from gustanto_pos.domain import format_order_summary, daily_totals
from gustanto_pos.infrastructure.config import get_settings
from gustanto_pos.infrastructure.catalog import CatalogReader, CatalogNotFoundError
from gustanto_pos.infrastructure.persistence import OrderStore, OrderWriteError, utc_timestamp
from gustanto_pos.infrastructure.messaging import (
    MessagingProvider,
    TwilioWhatsAppProvider,
    MessageDeliveryError,
)

logger = logging.getLogger(__name__)

LIVENESS_MESSAGE = "Gustanto POS Backend is Live ✅"

# ── Globals ────────────────────────────────────────────────────────
catalog: Optional[CatalogReader] = None
order_store: Optional[OrderStore] = None
messenger: Optional[MessagingProvider] = None


class PromoRequest(BaseModel):
    message: Optional[str] = None
    phone: Optional[Union[str, int]] = None


# ── Lifespan ───────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    global catalog, order_store, messenger
    settings = get_settings()
    for issue in settings.validate():
        logger.warning(issue)

    catalog = CatalogReader(settings.codex_file)
    order_store = OrderStore(settings.orders_file)
    messenger = TwilioWhatsAppProvider.from_settings(settings.messaging)
    logger.info(f"Codex: {settings.codex_file} · Orders: {settings.orders_file}")
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="Gustanto POS Backend",
        description="Menu, orders and WhatsApp notifications",
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return application


app = create_app()


# ══════════════════════════════════════════════════════════════════
#  BACKGROUND TASKS
# ══════════════════════════════════════════════════════════════════

def notify_order_confirmation(order: Dict[str, Any], timestamp: str):
    """Background task: WhatsApp the order summary to the customer."""
    storefront = get_settings().storefront
    body = format_order_summary(
        order,
        timestamp,
        currency=storefront.currency_symbol,
        business_name=storefront.business_name,
    )
    try:
        sid = messenger.send_message(order["phone"], body)
        logger.info(f"Order confirmation sent: {sid}")
    except MessageDeliveryError as e:
        logger.error(f"Failed to send WhatsApp order confirmation to {order['phone']}: {e}")


# ══════════════════════════════════════════════════════════════════
#  ROUTES
# ══════════════════════════════════════════════════════════════════

@app.get("/", response_class=PlainTextResponse)
async def health():
    return LIVENESS_MESSAGE


@app.get("/codex")
async def get_codex():
    try:
        return catalog.get_catalog()
    except CatalogNotFoundError:
        return JSONResponse(status_code=500, content={"error": "Codex not found"})


@app.post("/order")
async def create_order(background_tasks: BackgroundTasks, order: Optional[Dict[str, Any]] = Body(None)):
    """Save the order, then WhatsApp a confirmation after responding."""
    order = order or {}
    if not order.get("phone"):
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Customer phone number is required"},
        )

    timestamp = utc_timestamp()
    record = {**order, "timestamp": timestamp}

    try:
        await run_in_threadpool(order_store.append_order, record)
    except OrderWriteError:
        return JSONResponse(status_code=500, content={"success": False})

    background_tasks.add_task(notify_order_confirmation, order, timestamp)
    return {"success": True}


@app.post("/send-promo")
async def send_promo(promo: Optional[PromoRequest] = Body(None)):
    """Send a promotional WhatsApp message and report the gateway result."""
    promo = promo or PromoRequest()
    if not promo.message or not promo.phone:
        return JSONResponse(
            status_code=400,
            content={"success": False, "message": "Message and phone number are required"},
        )

    try:
        sid = await run_in_threadpool(messenger.send_message, str(promo.phone), promo.message)
    except MessageDeliveryError as e:
        logger.error(f"Promo message error: {e}")
        return JSONResponse(status_code=500, content={"success": False, "error": str(e)})

    logger.info(f"Promo message sent: {sid}")
    return {"success": True, "sid": sid}


@app.get("/orders")
async def list_orders():
    return await run_in_threadpool(order_store.list_orders)


@app.get("/chart-data")
async def chart_data():
    orders = await run_in_threadpool(order_store.list_orders)
    return daily_totals(orders)


# ── Static frontend ────────────────────────────────────────────────
def mount_static_files(application: FastAPI, directory: Path):
    """Serve the frontend at "/". Must run after the API routes are registered."""
    if directory.is_dir():
        application.mount("/", StaticFiles(directory=directory), name="static")


mount_static_files(app, get_settings().static_dir)
