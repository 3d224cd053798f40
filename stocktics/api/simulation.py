"""
시뮬레이션 API — 속도 변경, 수동 틱, 리셋
"""

import logging

from fastapi import APIRouter, Depends

from stocktics.dependencies import get_simulation
from stocktics.schemas.common import MessageResponse
from stocktics.schemas.simulation import SpeedRequest, SpeedResponse, TickResponse
from stocktics.simulator.simulation_manager import SimulationManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/simulation", tags=["simulation"])


@router.put("/speed", response_model=SpeedResponse)
def set_speed(req: SpeedRequest, simulation: SimulationManager = Depends(get_simulation)):
    """시뮬레이션 속도 변경 (1x, 5x, 10x)"""
    simulation.speed = req.speed
    return SpeedResponse(
        message=f"시뮬레이션 속도가 {req.speed}x로 변경되었습니다",
        speed=req.speed,
    )


@router.post("/tick", response_model=TickResponse)
async def run_tick(simulation: SimulationManager = Depends(get_simulation)):
    """타이머를 기다리지 않고 재고 틱 1회 수행"""
    tick = await simulation.tick()
    controller = simulation.controller
    return TickResponse(
        tick=tick,
        active_alerts=len(controller.alerts()),
        by_status=controller.status_counts(),
    )


@router.post("/reset", response_model=MessageResponse)
async def reset_data(simulation: SimulationManager = Depends(get_simulation)):
    """상품/배송을 초기 상태로 리셋한다."""
    await simulation.reset()
    logger.info("[Reset] 데이터 초기화 완료")

    from stocktics.api.websocket import broadcast_event
    await broadcast_event("system_reset", {"message": "System reset complete"})

    return MessageResponse(message="데이터가 초기 상태로 리셋되었습니다")
