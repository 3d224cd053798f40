import asyncio
import random

import pytest

from stocktics.models import NotificationType
from stocktics.services.notifier import (
    DEFAULT_TEAM_EMAIL,
    DEFAULT_VENDOR_EMAIL,
    EmailNotifier,
    compose_contact_email,
    compose_order_email,
    compose_schedule_email,
    team_member_email,
    vendor_email,
)


def test_success_rate_is_roughly_respected():
    notifier = EmailNotifier(rng=random.Random(2024), success_rate=0.95, delay_seconds=0)
    message = compose_order_email("Milk", "B2", 10, "low", "Mon Jan 01 2024")

    async def send_many():
        return [await notifier.send(message) for _ in range(1000)]

    results = asyncio.run(send_many())
    assert 920 <= sum(results) <= 980


@pytest.mark.parametrize("rate", [-0.1, 1.5])
def test_rejects_invalid_success_rate(rate):
    with pytest.raises(ValueError):
        EmailNotifier(success_rate=rate)


def test_send_publishes_attempt(notifier, failing_notifier, event_bus):
    message = compose_schedule_email("Milk", "B2", "2024-06-01", "09:00", "high", "sarah")
    assert asyncio.run(notifier.send(message)) is True
    assert asyncio.run(failing_notifier.send(message)) is False

    sent = event_bus.get_recent("notifications.sent")
    assert [e["data"]["delivered"] for e in sent] == [True, False]
    assert sent[0]["data"]["to"] == "sarah.johnson@store.com"
    assert sent[0]["data"]["type"] == "schedule"


def test_contact_email():
    message = compose_contact_email(
        "Amul Butter 500g", "D3", "high", "Critical: Restock within 1 hour",
        "Amul Dairy", store_id="1247",
    )
    assert message.to == "restock@amul.com"
    assert message.subject == "Restock Request - Amul Butter 500g (Priority: HIGH)"
    assert "Location: Shelf D3" in message.body
    assert "Store #1247" in message.body
    assert message.type == NotificationType.CONTACT


def test_schedule_email_notes_are_optional():
    plain = compose_schedule_email("Milk", "B2", "2024-06-01", "09:00", "normal", "nobody")
    assert plain.to == DEFAULT_TEAM_EMAIL
    assert "Additional Notes" not in plain.body

    noted = compose_schedule_email("Milk", "B2", "2024-06-01", "09:00", "urgent", "mike", "use back door")
    assert "Additional Notes: use back door" in noted.body
    assert "Priority: URGENT" in noted.body
    assert noted.subject == "Restock Schedule: Milk - 2024-06-01"


def test_order_email():
    message = compose_order_email("Milk", "B2", 20, "critical", "Wed Jan 03 2024")
    assert message.to == "inventory@store.com"
    assert message.subject == "Auto-Order Placed: Milk"
    assert "Quantity: 20 units" in message.body
    assert message.type == NotificationType.ORDER


def test_address_fallbacks():
    assert vendor_email("Nobody Inc") == DEFAULT_VENDOR_EMAIL
    assert vendor_email("Tata Consumer Products") == "orders@tata.com"
    assert team_member_email("lisa") == "lisa.wilson@store.com"
    assert team_member_email("") == DEFAULT_TEAM_EMAIL
