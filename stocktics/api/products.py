"""
상품 API — 진열대 상품 조회, 재고 수정, 재입고 예약
"""

from typing import Literal

from fastapi import APIRouter, Depends, Query

from stocktics.dependencies import get_controller, get_notifier
from stocktics.schemas.common import NotificationResultResponse
from stocktics.schemas.inventory import (
    ItemListResponse, ItemResponse, ScheduleRestockRequest, ScheduleRestockResponse,
    StockUpdateRequest,
)
from stocktics.services.inventory_controller import InventoryController
from stocktics.services.notifier import EmailNotifier
from stocktics.services.restock_workflows import ScheduleRequest, schedule_restock

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=ItemListResponse)
def list_products(
    status: Literal["all", "critical", "low", "good"] = Query("all", description="상태 필터"),
    controller: InventoryController = Depends(get_controller),
):
    """상품 목록 (상태별 필터 + 상태별 개수)"""
    items = controller.filter_items(status)
    return ItemListResponse(
        total=len(items),
        by_status=controller.status_counts(),
        items=[ItemResponse.model_validate(i) for i in items],
    )


@router.get("/{item_id}", response_model=ItemResponse)
def get_product(item_id: int, controller: InventoryController = Depends(get_controller)):
    return ItemResponse.model_validate(controller.get_item(item_id))


@router.put("/{item_id}/stock", response_model=ItemResponse)
async def update_stock(
    item_id: int,
    req: StockUpdateRequest,
    controller: InventoryController = Depends(get_controller),
):
    """재고 수동 수정 — 용량 초과분은 잘라내고 상태를 재판정한다."""
    item = controller.set_stock(item_id, req.current_stock)
    await controller.publish("inventory.updated", {
        "item_id": item.id,
        "action": "stock_updated",
        "current_stock": item.current_stock,
        "status": item.status.value,
    })
    return ItemResponse.model_validate(item)


@router.post("/{item_id}/schedule", response_model=ScheduleRestockResponse)
async def schedule_product_restock(
    item_id: int,
    req: ScheduleRestockRequest,
    controller: InventoryController = Depends(get_controller),
    notifier: EmailNotifier = Depends(get_notifier),
):
    """상품 재입고 예약 — 상품 문구 갱신 + 담당자 메일"""
    item, result = await schedule_restock(
        controller, notifier, item_id,
        ScheduleRequest(**req.model_dump()),
        annotate=True,
    )
    return ScheduleRestockResponse(
        item=ItemResponse.model_validate(item),
        notification=NotificationResultResponse.model_validate(result),
    )
