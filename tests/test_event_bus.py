import asyncio

from stocktics.events.event_bus import AsyncEventBus, _deserialize, _serialize


def test_stream_fields_keep_native_types():
    data = {
        "delivered": False,
        "auto": True,
        "item_id": None,
        "tick": 3,
        "action": "delivered",
        "alert_ids": [1, 2],
        "by_status": {"critical": 1, "low": 0},
    }
    fields = _serialize(data)
    assert all(isinstance(v, str) for v in fields.values())
    assert _deserialize(fields) == data


def test_numeric_looking_text_stays_text():
    data = {"store_id": "1247", "shelf": "A3"}
    assert _deserialize(_serialize(data)) == data


def test_unstarted_bus_only_records():
    bus = AsyncEventBus("redis://localhost:1")
    asyncio.run(bus.publish("alerts.changed", {"total": 1}))
    assert not bus.is_running
    assert bus.get_recent("alerts.changed")[0]["data"] == {"total": 1}


def test_inmemory_fallback_dispatches_to_subscribers():
    received = []

    async def handler(topic, data):
        received.append((topic, data))

    async def run():
        bus = AsyncEventBus("redis://localhost:1")
        await bus.subscribe("notifications.sent", handler)
        await bus.subscribe("notifications.sent", handler)  # 중복 등록 무시
        await bus.start()
        try:
            assert bus.is_running
            assert not bus.is_redis
            await bus.publish("notifications.sent", {"to": "team@store.com", "delivered": False})
            for _ in range(100):
                if received:
                    break
                await asyncio.sleep(0.02)
        finally:
            await bus.stop()

    asyncio.run(run())
    assert received == [("notifications.sent", {"to": "team@store.com", "delivered": False})]
