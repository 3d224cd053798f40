"""
도메인 예외 — 앱 예외 핸들러에서 HTTP 상태 코드로 변환한다.
"""


class StockticsError(Exception):
    """모든 도메인 예외의 기반 클래스"""

    def __init__(self, message: str, **data):
        super().__init__(message)
        self.message = message
        self.data = data


class ItemNotFound(StockticsError):
    def __init__(self, item_id: int):
        super().__init__(f"상품을 찾을 수 없습니다: {item_id}", item_id=item_id)


class AlertNotFound(StockticsError):
    """해당 상품에 대한 활성 알림이 없음 (이미 good 상태)"""

    def __init__(self, alert_id: int):
        super().__init__(f"활성 알림이 없습니다: {alert_id}", alert_id=alert_id)


class DeliveryNotFound(StockticsError):
    def __init__(self, delivery_id: int):
        super().__init__(f"배송을 찾을 수 없습니다: {delivery_id}", delivery_id=delivery_id)


class InvalidDeliveryTransition(StockticsError):
    def __init__(self, delivery_id: int, current: str, target: str):
        super().__init__(
            f"배송 {delivery_id}: {current} → {target} 전이는 허용되지 않습니다",
            delivery_id=delivery_id,
            current=current,
            target=target,
        )


class RestockNotNeeded(StockticsError):
    """good 상태 상품에 자동 주문을 요청한 경우"""

    def __init__(self, item_id: int, status: str):
        super().__init__(
            f"상품 {item_id}은(는) {status} 상태, 자동 주문 대상이 아닙니다",
            item_id=item_id,
            status=status,
        )
