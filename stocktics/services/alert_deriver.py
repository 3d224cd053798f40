"""
알림 파생 — 상품 목록에서 활성 알림 집합을 매번 새로 계산한다.
증분 갱신 없이 순수 함수로 투영하므로, 상품 상태가 good으로 돌아오면 알림은 자연히 사라진다.
"""

from collections.abc import Iterable, Sequence

from stocktics.models import Alert, Item, Urgency
from stocktics.models.alert import URGENCY_BY_STATUS


def derive_alerts(items: Iterable[Item]) -> list[Alert]:
    """critical/low 상품마다 알림 1건, 상품 순서 유지"""
    return [
        Alert(
            id=item.id,
            product=item.name,
            shelf=item.shelf,
            urgency=URGENCY_BY_STATUS[item.status],
            prediction=item.prediction,
            product_id=item.id,
        )
        for item in items
        if item.status in URGENCY_BY_STATUS
    ]


def filter_alerts(alerts: Sequence[Alert], urgency: str = "all") -> list[Alert]:
    if urgency == "all":
        return list(alerts)
    wanted = Urgency(urgency)
    return [a for a in alerts if a.urgency == wanted]


def alert_stats(alerts: Sequence[Alert]) -> dict[str, int]:
    stats = {u.value: 0 for u in Urgency}
    for alert in alerts:
        stats[alert.urgency.value] += 1
    stats["total"] = len(alerts)
    return stats
