from typing import Any, Optional
import logging

from bson import ObjectId
from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.domain.models import (
    ITEM_STATUS_CONFIRMED,
    ITEM_STATUS_DELIVERED,
    CreateOrderRequest,
    OrderStats,
)
from app.domain.order_builder import build_order
from app.interfaces.IOrderRepository import IOrderRepository
from app.interfaces.IReservationRepository import IReservationRepository

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# DEPENDENCIES (repositories live on app.state, see app.main)
# ---------------------------------------------------------
def get_order_repository(request: Request) -> IOrderRepository:
    return request.app.state.order_repo


def get_reservation_repository(request: Request) -> IReservationRepository:
    return request.app.state.reservation_repo


def to_json(document: Any) -> Any:
    """Mongo documents may carry ObjectIds, render them as plain strings."""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})


def server_error(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": message})


# ---------------------------------------------------------
# ROUTES
# ---------------------------------------------------------
@router.get("/orders")
async def list_orders(orders: IOrderRepository = Depends(get_order_repository)):
    try:
        return to_json(await orders.find_all())
    except Exception as e:
        logger.error(f"❌ Error fetching orders: {e}", exc_info=True)
        return server_error("Failed to fetch orders")


@router.get("/reservations")
async def list_reservations(reservations: IReservationRepository = Depends(get_reservation_repository)):
    try:
        return to_json(await reservations.find_all())
    except Exception as e:
        logger.error(f"❌ Error fetching reservations: {e}", exc_info=True)
        return server_error("Failed to fetch reservations")


@router.get("/stats")
async def get_stats(orders: IOrderRepository = Depends(get_order_repository)):
    """
    Dashboard counters.
    confirmed/delivered count orders with AT LEAST ONE item in that status,
    so an order with mixed items shows up in both.
    """
    try:
        stats = OrderStats(
            total_orders=await orders.count(),
            confirmed_orders=await orders.count_with_item_status(ITEM_STATUS_CONFIRMED),
            delivered_orders=await orders.count_with_item_status(ITEM_STATUS_DELIVERED),
            revenue=await orders.revenue(),
        )
        return stats.model_dump()
    except Exception as e:
        logger.error(f"❌ Error fetching stats: {e}", exc_info=True)
        return server_error("Failed to fetch stats")


@router.post("/orders")
async def create_order(
    body: Optional[CreateOrderRequest] = None,
    orders: IOrderRepository = Depends(get_order_repository),
):
    try:
        order = build_order(body or CreateOrderRequest())
        await orders.insert(order)
        logger.info(f"📦 Order created for {order['phone']} ({order['phone_source']})")
        return {"message": "Order created successfully", "order": to_json(order)}
    except Exception as e:
        logger.error(f"❌ Error creating order: {e}", exc_info=True)
        return server_error("Failed to create order")


@router.get("/orders/{phone}")
async def get_latest_order(phone: str, orders: IOrderRepository = Depends(get_order_repository)):
    """Latest order for a phone. Unlike the list endpoint, _id is kept here."""
    try:
        order = await orders.find_latest_by_phone(phone)
        if order is None:
            return JSONResponse(status_code=404, content={"message": "Order not found"})
        return to_json(order)
    except Exception as e:
        logger.error(f"❌ Error fetching order: {e}", exc_info=True)
        return server_error("Failed to fetch order")
