"""
WebSocket 엔드포인트 — 실시간 이벤트 Push
클라이언트가 /ws/realtime에 연결하면 다음 메시지를 받는다:
  - clock: 1초마다 현재 시각
  - dashboard_update: 주기적으로 (기본 5초) 재고/알림 요약
  - inventory_tick / inventory_update / alerts_changed / delivery_update / notification:
    이벤트 버스에서 중계
"""

import asyncio
import json
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from stocktics.config import settings
from stocktics.dependencies import get_controller
from stocktics.services.inventory_controller import InventoryController

logger = logging.getLogger(__name__)

router = APIRouter()

# 이벤트 버스 토픽 → WebSocket 메시지 타입
TOPIC_MESSAGE_TYPES = {
    "inventory.ticked": "inventory_tick",
    "inventory.updated": "inventory_update",
    "alerts.changed": "alerts_changed",
    "deliveries.updated": "delivery_update",
    "notifications.sent": "notification",
}


class ConnectionManager:
    """WebSocket 연결 관리자"""

    def __init__(self):
        self.active_connections: list[WebSocket] = []

    async def connect(self, websocket: WebSocket):
        await websocket.accept()
        self.active_connections.append(websocket)
        logger.info(f"WebSocket 연결: {len(self.active_connections)}개 활성")

    def disconnect(self, websocket: WebSocket):
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
        logger.info(f"WebSocket 해제: {len(self.active_connections)}개 활성")

    async def broadcast(self, message: dict):
        """모든 연결된 클라이언트에게 메시지 전송"""
        if not self.active_connections:
            return

        text = json.dumps(message, ensure_ascii=False, default=str)
        disconnected = []
        for ws in self.active_connections:
            try:
                await ws.send_text(text)
            except Exception:
                disconnected.append(ws)

        for ws in disconnected:
            self.disconnect(ws)


ws_manager = ConnectionManager()


async def broadcast_event(event_type: str, data: dict):
    """외부에서 호출 가능한 브로드캐스트 헬퍼"""
    await ws_manager.broadcast({
        "type": event_type,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "data": data,
    })


async def relay_bus_event(topic: str, data: dict):
    """이벤트 버스 구독 핸들러 — 토픽을 메시지 타입으로 바꿔 중계"""
    await broadcast_event(TOPIC_MESSAGE_TYPES.get(topic, topic), data)


def _dashboard_summary(controller: InventoryController) -> dict:
    return {
        "by_status": controller.status_counts(),
        "alerts": controller.alert_stats(),
        "pending_deliveries": len(controller.tracker.by_tab("pending")),
    }


@router.websocket("/ws/realtime")
async def websocket_endpoint(
    websocket: WebSocket,
    controller: InventoryController = Depends(get_controller),
):
    """실시간 WebSocket 엔드포인트"""
    await ws_manager.connect(websocket)

    async def dashboard_loop():
        while True:
            try:
                await asyncio.sleep(settings.DASHBOARD_PUSH_INTERVAL_SECONDS)
                await websocket.send_text(json.dumps({
                    "type": "dashboard_update",
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                    "data": _dashboard_summary(controller),
                }, ensure_ascii=False, default=str))
            except (WebSocketDisconnect, Exception):
                break

    dashboard_task = asyncio.create_task(dashboard_loop())
    try:
        # 클라이언트 메시지 수신 루프 (핑/퐁 유지)
        while True:
            try:
                data = await websocket.receive_text()
                if data == "ping":
                    await websocket.send_text(json.dumps({"type": "pong"}))
            except WebSocketDisconnect:
                break
    except Exception as e:
        logger.error(f"WebSocket 에러: {e}")
    finally:
        dashboard_task.cancel()
        ws_manager.disconnect(websocket)
