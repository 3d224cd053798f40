from stocktics.models import StockStatus, Urgency
from stocktics.services.alert_deriver import alert_stats, derive_alerts, filter_alerts
from stocktics.simulator.data_generator import initial_items
from tests.conftest import make_item


def test_one_alert_per_critical_or_low_item_in_order():
    items = [
        make_item(1, stock=1, capacity=10),   # critical
        make_item(2, stock=9, capacity=10),   # good
        make_item(3, stock=4, capacity=10),   # low
    ]
    alerts = derive_alerts(items)
    assert [a.id for a in alerts] == [1, 3]
    assert [a.urgency for a in alerts] == [Urgency.HIGH, Urgency.MEDIUM]
    assert alerts[0].product_id == 1
    assert alerts[1].product == "Product 3"


def test_alert_set_matches_item_statuses_exactly():
    items = initial_items()
    alerts = derive_alerts(items)
    expected = [i.id for i in items if i.status in (StockStatus.CRITICAL, StockStatus.LOW)]
    assert [a.id for a in alerts] == expected
    for alert in alerts:
        item = next(i for i in items if i.id == alert.id)
        expected_urgency = Urgency.HIGH if item.status == StockStatus.CRITICAL else Urgency.MEDIUM
        assert alert.urgency == expected_urgency
        assert alert.prediction == item.prediction


def test_no_alerts_when_all_good():
    assert derive_alerts([make_item(1, stock=10, capacity=10)]) == []


def test_filter_and_stats():
    alerts = derive_alerts([
        make_item(1, stock=1, capacity=10),
        make_item(2, stock=4, capacity=10),
        make_item(3, stock=0, capacity=10),
    ])
    assert [a.id for a in filter_alerts(alerts, "high")] == [1, 3]
    assert [a.id for a in filter_alerts(alerts, "medium")] == [2]
    assert filter_alerts(alerts, "low") == []
    assert len(filter_alerts(alerts, "all")) == 3
    assert alert_stats(alerts) == {"high": 2, "medium": 1, "low": 0, "total": 3}
