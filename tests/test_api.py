from stocktics.api.websocket import relay_bus_event
from stocktics.config import settings
from stocktics.models import DeliveryStatus


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_list_products_and_filter(client):
    data = client.get("/api/products").json()
    assert data["total"] == 18
    assert data["by_status"] == {"critical": 6, "low": 4, "good": 8}
    assert data["items"][0]["stock_percentage"] == 25.0

    critical = client.get("/api/products", params={"status": "critical"}).json()
    assert critical["total"] == 6
    assert {i["status"] for i in critical["items"]} == {"critical"}

    assert client.get("/api/products", params={"status": "bogus"}).status_code == 422


def test_product_not_found(client):
    resp = client.get("/api/products/999")
    assert resp.status_code == 404
    assert resp.json()["item_id"] == 999


def test_update_stock_clamps(client):
    resp = client.put("/api/products/3/stock", json={"current_stock": 1000})
    assert resp.status_code == 200
    assert resp.json()["current_stock"] == 20
    assert resp.json()["status"] == "good"
    assert client.put("/api/products/3/stock", json={"current_stock": -1}).status_code == 422


def test_schedule_from_product(client):
    resp = client.post("/api/products/2/schedule", json={
        "date": "2024-06-01", "time": "09:00", "priority": "high", "assigned_to": "lisa",
    })
    body = resp.json()
    assert resp.status_code == 200
    assert body["item"]["last_update"] == "Scheduled for restock"
    assert body["notification"]["title"] == "Restock Scheduled & Email Sent"

    recent = client.get("/api/notifications/recent").json()
    assert recent["total"] == 1
    assert recent["notifications"][0]["to"] == "lisa.wilson@store.com"


def test_alerts_and_resolve(client):
    assert client.get("/api/alerts/stats").json() == {"total": 10, "high": 6, "medium": 4, "low": 0}
    high = client.get("/api/alerts", params={"urgency": "high"}).json()
    assert high["total"] == 6

    resp = client.post("/api/alerts/7/resolve")
    assert resp.status_code == 200
    assert resp.json()["item"]["status"] == "good"
    assert resp.json()["active_alerts"] == 9

    assert client.post("/api/alerts/7/resolve").status_code == 404


def test_schedule_from_alert_leaves_item(client):
    before = client.get("/api/products/9").json()
    resp = client.post("/api/alerts/9/schedule", json={"date": "2024-06-01", "time": "10:00"})
    assert resp.status_code == 200
    assert client.get("/api/products/9").json() == before


def test_contact_vendor(client):
    resp = client.post("/api/alerts/1/contact", json={"vendor": "coca-cola"})
    assert resp.status_code == 200
    assert resp.json()["notification"]["description"] == (
        "Email sent to Coca Cola Distributor for Coca Cola 12pk restock."
    )


def test_deliveries_tabs(client):
    data = client.get("/api/deliveries").json()
    assert data["counts"] == {"pending": 2, "completed": 1, "cancelled": 0}
    assert [d["progress"] for d in data["deliveries"]] == [75, 50, 100]

    pending = client.get("/api/deliveries", params={"tab": "pending"}).json()
    assert [d["id"] for d in pending["deliveries"]] == [1, 2]


def test_recommendations(client):
    recs = client.get("/api/deliveries/recommendations").json()
    assert [r["id"] for r in recs] == [1, 2, 4]


def test_auto_order_flow(client):
    resp = client.post("/api/deliveries/auto-order", json={"item_id": 11})
    assert resp.status_code == 200
    delivery = resp.json()["delivery"]
    assert delivery["quantity"] == 34  # ceil(42 * 0.8)
    assert delivery["priority"] == "high"
    assert delivery["auto_ordered"] is True

    delivery_id = delivery["id"]
    assert client.post(f"/api/deliveries/{delivery_id}/advance").json()["status"] == "processing"
    assert client.post(f"/api/deliveries/{delivery_id}/advance").json()["status"] == "shipped"
    assert client.post(f"/api/deliveries/{delivery_id}/advance").status_code == 409

    delivered = client.post(f"/api/deliveries/{delivery_id}/deliver").json()
    assert delivered["delivery"]["status"] == DeliveryStatus.DELIVERED.value
    assert delivered["item"]["current_stock"] == 38
    assert delivered["message"] == "Stock updated: Thums Up 600ml now has 38/42 units"


def test_auto_order_rejects_good_item(client):
    resp = client.post("/api/deliveries/auto-order", json={"item_id": 3})
    assert resp.status_code == 409
    assert resp.json()["status"] == "good"


def test_deliver_unlinked_delivery_conflicts_when_already_delivered(client):
    assert client.post("/api/deliveries/3/deliver").status_code == 409
    assert client.post("/api/deliveries/3/cancel").status_code == 409
    assert client.post("/api/deliveries/99/cancel").status_code == 404


def test_cancel_delivery(client):
    resp = client.post("/api/deliveries/2/cancel")
    assert resp.json()["status"] == "cancelled"
    assert resp.json()["progress"] == 0


def test_simulation_endpoints(client):
    assert client.put("/api/simulation/speed", json={"speed": 5}).json()["speed"] == 5
    assert client.put("/api/simulation/speed", json={"speed": 2}).status_code == 422

    tick = client.post("/api/simulation/tick").json()
    assert tick["tick"] == 1
    assert sum(tick["by_status"].values()) == 18

    client.post("/api/alerts/4/resolve")
    assert client.post("/api/simulation/reset").status_code == 200
    assert client.get("/api/products/4").json()["current_stock"] == 5


def test_dashboard_overview(client):
    data = client.get("/api/dashboard/overview").json()
    assert data["products_monitored"] == 18
    assert data["pending_deliveries"] == 2
    assert [a["id"] for a in data["critical_alerts"]] == [1, 2, 4]
    assert data["simulation"]["speed"] == 1


def test_websocket_ping(client):
    with client.websocket_connect("/ws/realtime") as ws:
        ws.send_text("ping")
        assert ws.receive_json() == {"type": "pong"}


def test_bus_events_are_relayed_to_websocket(client):
    with client.websocket_connect("/ws/realtime") as ws:
        # pong을 받으면 연결이 브로드캐스트 대상에 등록된 상태
        ws.send_text("ping")
        assert ws.receive_json() == {"type": "pong"}

        ws.portal.call(relay_bus_event, "notifications.sent", {"to": "team@store.com", "delivered": False})
        message = ws.receive_json()
        assert message["type"] == "notification"
        assert message["data"] == {"to": "team@store.com", "delivered": False}

        ws.portal.call(relay_bus_event, "deliveries.updated", {"delivery_id": 3, "item_id": None})
        assert ws.receive_json()["type"] == "delivery_update"


def test_dashboard_push_uses_request_controller(client, controller, monkeypatch):
    monkeypatch.setattr(settings, "DASHBOARD_PUSH_INTERVAL_SECONDS", 0.05)
    controller.resolve_alert(4)

    with client.websocket_connect("/ws/realtime") as ws:
        message = ws.receive_json()

    assert message["type"] == "dashboard_update"
    assert message["data"]["alerts"]["total"] == 9
    assert message["data"]["by_status"] == controller.status_counts()
