"""
FastAPI 앱 엔트리포인트
- CORS 설정
- 라우터 등록 (WebSocket 포함)
- 도메인 예외 → HTTP 상태 코드 변환
- AsyncEventBus + 시뮬레이터 백그라운드 시작
- 헬스체크 엔드포인트
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stocktics import __version__
from stocktics.api import alerts, dashboard, deliveries, notifications, products, simulation
from stocktics.api.websocket import TOPIC_MESSAGE_TYPES, relay_bus_event, router as ws_router
from stocktics.config import settings
from stocktics.dependencies import event_bus, simulation_manager
from stocktics.exceptions import (
    AlertNotFound, DeliveryNotFound, InvalidDeliveryTransition, ItemNotFound,
    RestockNotNeeded, StockticsError,
)
from stocktics.schemas.common import HealthResponse

# 로깅 설정
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    ItemNotFound: 404,
    AlertNotFound: 404,
    DeliveryNotFound: 404,
    InvalidDeliveryTransition: 409,
    RestockNotNeeded: 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작/종료 시 백그라운드 컴포넌트 관리"""
    # ── 1. 이벤트 버스 → WebSocket 중계 구독 ──
    for topic in TOPIC_MESSAGE_TYPES:
        await event_bus.subscribe(topic, relay_bus_event)

    # ── 2. AsyncEventBus 시작 (구독자 루프) ──
    await event_bus.start()
    logger.info("AsyncEventBus 시작 완료")

    # ── 3. 시뮬레이터 시작 ──
    await simulation_manager.start()
    logger.info("시뮬레이션 백그라운드 태스크 시작")

    yield

    # ── 종료 ──
    await simulation_manager.stop()
    await event_bus.stop()
    logger.info("종료 완료")


app = FastAPI(
    title="Stocktics 진열대 재입고 모니터링",
    description="실시간 재고 시뮬레이션, 알림, 재입고/배송 워크플로 데모",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StockticsError)
async def handle_domain_error(request: Request, exc: StockticsError):
    status_code = _STATUS_BY_ERROR.get(type(exc), 400)
    logger.info(f"요청 거부 ({status_code}) {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, **exc.data},
    )


# 라우터 등록
app.include_router(dashboard.router)
app.include_router(products.router)
app.include_router(alerts.router)
app.include_router(deliveries.router)
app.include_router(notifications.router)
app.include_router(simulation.router)
app.include_router(ws_router)


@app.get("/api/health", response_model=HealthResponse)
def health_check():
    """시스템 상태 확인"""
    return HealthResponse(
        status="ok",
        redis_connected=event_bus.is_redis,
        simulation_running=simulation_manager.is_running,
        timestamp=datetime.now(timezone.utc),
    )
