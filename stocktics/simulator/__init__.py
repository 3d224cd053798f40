"""
시뮬레이터 패키지
- 초기 데이터(data_generator), 재고 변동(stock_simulator), 타이머 관리(simulation_manager)
- 순환 import를 피하기 위해 SimulationManager는 모듈에서 직접 import한다.
"""

from stocktics.simulator.stock_simulator import StockSimulator

__all__ = ["StockSimulator"]
