"""
알림(메일) 기록 API — 최근 발송 시도 조회 (인메모리, 비영속)
"""

from fastapi import APIRouter, Depends, Query

from stocktics.dependencies import get_event_bus
from stocktics.events.event_bus import AsyncEventBus

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("/recent")
def list_recent_notifications(
    count: int = Query(20, ge=1, le=500),
    bus: AsyncEventBus = Depends(get_event_bus),
):
    """최근 메일 발송 시도 (최신순)"""
    events = bus.get_recent("notifications.sent", count)
    return {
        "total": len(events),
        "notifications": [
            {**e["data"], "timestamp": e["timestamp"]}
            for e in reversed(events)
        ],
    }
