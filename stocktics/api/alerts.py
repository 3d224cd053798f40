"""
알림 API — 활성 알림 조회/통계, 해결, 재입고 예약, 공급사 연락
"""

from typing import Literal

from fastapi import APIRouter, Depends, Query

from stocktics.dependencies import get_controller, get_notifier
from stocktics.schemas.alerts import (
    AlertListResponse, AlertResponse, AlertStatsResponse, ContactVendorRequest,
    ContactVendorResponse, ResolveAlertResponse,
)
from stocktics.schemas.common import NotificationResultResponse
from stocktics.schemas.inventory import (
    ItemResponse, ScheduleRestockRequest, ScheduleRestockResponse,
)
from stocktics.services.inventory_controller import InventoryController
from stocktics.services.notifier import EmailNotifier
from stocktics.services.restock_workflows import ScheduleRequest, contact_vendor, schedule_restock

router = APIRouter(prefix="/api/alerts", tags=["alerts"])


@router.get("", response_model=AlertListResponse)
def list_alerts(
    urgency: Literal["all", "high", "medium", "low"] = Query("all", description="긴급도 필터"),
    controller: InventoryController = Depends(get_controller),
):
    alerts = controller.filter_alerts(urgency)
    return AlertListResponse(
        total=len(alerts),
        alerts=[AlertResponse.model_validate(a) for a in alerts],
    )


@router.get("/stats", response_model=AlertStatsResponse)
def get_alert_stats(controller: InventoryController = Depends(get_controller)):
    return AlertStatsResponse(**controller.alert_stats())


@router.post("/{alert_id}/resolve", response_model=ResolveAlertResponse)
async def resolve_alert(alert_id: int, controller: InventoryController = Depends(get_controller)):
    """알림 해결 — 상품을 보충하고 알림은 다음 파생에서 사라진다."""
    item = controller.resolve_alert(alert_id)
    await controller.publish("inventory.updated", {
        "item_id": item.id,
        "action": "resolved",
        "current_stock": item.current_stock,
        "status": item.status.value,
    })
    return ResolveAlertResponse(
        message="The alert has been marked as resolved.",
        item=ItemResponse.model_validate(item),
        active_alerts=len(controller.alerts()),
    )


@router.post("/{alert_id}/schedule", response_model=ScheduleRestockResponse)
async def schedule_alert_restock(
    alert_id: int,
    req: ScheduleRestockRequest,
    controller: InventoryController = Depends(get_controller),
    notifier: EmailNotifier = Depends(get_notifier),
):
    """알림에서 재입고 예약 — 담당자 메일만 발송 (상품 문구 불변)"""
    alert = controller.get_alert(alert_id)
    item, result = await schedule_restock(
        controller, notifier, alert.product_id,
        ScheduleRequest(**req.model_dump()),
        annotate=False,
    )
    return ScheduleRestockResponse(
        item=ItemResponse.model_validate(item),
        notification=NotificationResultResponse.model_validate(result),
    )


@router.post("/{alert_id}/contact", response_model=ContactVendorResponse)
async def contact_alert_vendor(
    alert_id: int,
    req: ContactVendorRequest,
    controller: InventoryController = Depends(get_controller),
    notifier: EmailNotifier = Depends(get_notifier),
):
    result = await contact_vendor(controller, notifier, alert_id, req.vendor, req.message)
    return ContactVendorResponse(
        alert_id=alert_id,
        notification=NotificationResultResponse.model_validate(result),
    )
