"""
대시보드 관련 Pydantic 스키마
"""

from datetime import datetime

from pydantic import BaseModel

from stocktics.schemas.alerts import AlertResponse


class SimulationStatus(BaseModel):
    speed: int
    is_running: bool
    tick_count: int


class DashboardOverview(BaseModel):
    store_id: str
    current_time: datetime
    products_monitored: int
    by_status: dict[str, int]
    alert_stats: dict[str, int]
    critical_alerts: list[AlertResponse] = []  # 상위 3건
    pending_deliveries: int
    simulation: SimulationStatus
