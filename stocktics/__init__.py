"""
Stocktics — 매장 진열대 재고 모니터링 백엔드
"""

__version__ = "0.1.0"
