"""
배송 API — 배송 목록(탭별), 자동 주문 추천/생성, 상태 전이
"""

from typing import Literal

from fastapi import APIRouter, Depends, Query

from stocktics.dependencies import get_controller, get_notifier
from stocktics.schemas.common import NotificationResultResponse
from stocktics.schemas.deliveries import (
    AutoOrderRequest, AutoOrderResponse, DeliveredResponse, DeliveryListResponse,
    DeliveryResponse,
)
from stocktics.schemas.inventory import ItemResponse
from stocktics.services.delivery_tracker import TABS
from stocktics.services.inventory_controller import InventoryController
from stocktics.services.notifier import EmailNotifier
from stocktics.services.restock_workflows import auto_order

router = APIRouter(prefix="/api/deliveries", tags=["deliveries"])


@router.get("", response_model=DeliveryListResponse)
def list_deliveries(
    tab: Literal["all", "pending", "completed", "cancelled"] = Query("all", description="탭 필터"),
    controller: InventoryController = Depends(get_controller),
):
    tracker = controller.tracker
    deliveries = tracker.snapshot() if tab == "all" else tracker.by_tab(tab)
    return DeliveryListResponse(
        tab=tab,
        counts={t: len(tracker.by_tab(t)) for t in TABS},
        deliveries=[DeliveryResponse.model_validate(d) for d in deliveries],
    )


@router.get("/recommendations", response_model=list[ItemResponse])
def list_recommendations(controller: InventoryController = Depends(get_controller)):
    """자동 주문 추천 (critical/low 상품 상위 3건)"""
    return [ItemResponse.model_validate(i) for i in controller.restock_recommendations()]


@router.post("/auto-order", response_model=AutoOrderResponse)
async def create_auto_order(
    req: AutoOrderRequest,
    controller: InventoryController = Depends(get_controller),
    notifier: EmailNotifier = Depends(get_notifier),
):
    delivery, result = await auto_order(controller, notifier, req.item_id)
    return AutoOrderResponse(
        delivery=DeliveryResponse.model_validate(delivery),
        notification=NotificationResultResponse.model_validate(result),
    )


@router.post("/{delivery_id}/advance", response_model=DeliveryResponse)
async def advance_delivery(delivery_id: int, controller: InventoryController = Depends(get_controller)):
    """ordered → processing → shipped 한 단계 전진"""
    delivery = controller.advance_delivery(delivery_id)
    await controller.publish("deliveries.updated", {
        "delivery_id": delivery.id, "status": delivery.status.value, "action": "advance",
    })
    return DeliveryResponse.model_validate(delivery)


@router.post("/{delivery_id}/deliver", response_model=DeliveredResponse)
async def mark_delivered(delivery_id: int, controller: InventoryController = Depends(get_controller)):
    """배송완료 처리 — 연결 상품이 있으면 재고 반영"""
    delivery, item = controller.mark_delivered(delivery_id)
    await controller.publish("deliveries.updated", {
        "delivery_id": delivery.id,
        "status": delivery.status.value,
        "action": "delivered",
        "item_id": item.id if item else None,
    })
    if item:
        message = (
            f"Stock updated: {delivery.product_name} now has "
            f"{item.current_stock}/{item.max_capacity} units"
        )
    else:
        message = "Product has been marked as delivered"
    return DeliveredResponse(
        delivery=DeliveryResponse.model_validate(delivery),
        item=ItemResponse.model_validate(item) if item else None,
        message=message,
    )


@router.post("/{delivery_id}/cancel", response_model=DeliveryResponse)
async def cancel_delivery(delivery_id: int, controller: InventoryController = Depends(get_controller)):
    delivery = controller.cancel_delivery(delivery_id)
    await controller.publish("deliveries.updated", {
        "delivery_id": delivery.id, "status": delivery.status.value, "action": "cancel",
    })
    return DeliveryResponse.model_validate(delivery)
