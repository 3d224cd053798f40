"""
대시보드 API — 매장 전체 현황 요약
"""

from fastapi import APIRouter, Depends

from stocktics.config import settings
from stocktics.dependencies import get_controller, get_simulation
from stocktics.schemas.alerts import AlertResponse
from stocktics.schemas.dashboard import DashboardOverview, SimulationStatus
from stocktics.services.inventory_controller import InventoryController
from stocktics.simulator.simulation_manager import SimulationManager

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/overview", response_model=DashboardOverview)
def get_overview(
    controller: InventoryController = Depends(get_controller),
    simulation: SimulationManager = Depends(get_simulation),
):
    """대시보드 전체 현황 반환"""
    return DashboardOverview(
        store_id=settings.STORE_ID,
        current_time=simulation.current_time,
        products_monitored=len(controller.items()),
        by_status=controller.status_counts(),
        alert_stats=controller.alert_stats(),
        critical_alerts=[AlertResponse.model_validate(a) for a in controller.alerts()[:3]],
        pending_deliveries=len(controller.tracker.by_tab("pending")),
        simulation=SimulationStatus(
            speed=simulation.speed,
            is_running=simulation.is_running,
            tick_count=simulation.tick_count,
        ),
    )
