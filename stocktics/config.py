"""
애플리케이션 설정
- Redis, 시뮬레이션 타이머, 알림 스텁 관련 설정을 관리한다.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # 매장
    STORE_ID: str = "1247"

    # Redis (없으면 인메모리 큐로 fallback)
    REDIS_URL: str = "redis://localhost:6379"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # 로깅
    LOG_LEVEL: str = "INFO"

    # 시뮬레이션 기본 속도 (1x, 5x, 10x)
    SIMULATION_DEFAULT_SPEED: int = 1

    # 재고 변동 간격 (초, 1x 기준)
    STOCK_TICK_INTERVAL_SECONDS: float = 60.0

    # 시계 갱신 간격 (초)
    CLOCK_INTERVAL_SECONDS: float = 1.0

    # WebSocket 대시보드 요약 push 간격 (초)
    DASHBOARD_PUSH_INTERVAL_SECONDS: float = 5.0

    # 틱당 재고 변동 범위 (양 끝 포함)
    STOCK_DELTA_MIN: int = -3
    STOCK_DELTA_MAX: int = 2

    # 센서 전환 확률
    SENSOR_SWITCH_PROBABILITY: float = 0.1

    # 이메일 알림 스텁
    NOTIFY_SUCCESS_RATE: float = 0.95
    NOTIFY_DELAY_SECONDS: float = 1.0

    # 난수 시드 (None이면 비결정적)
    RANDOM_SEED: int | None = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
