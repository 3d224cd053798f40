"""
이메일 알림 스텁 — 실제 발송 없이 네트워크 호출을 흉내낸다.
- 인위적 지연 후 성공/실패(bool)만 반환 (기본 성공률 95%)
- 실패 시 상세 정보 없음, 재시도/큐잉/타임아웃 없음
- 모든 시도는 로그로 남기고 notifications.sent 이벤트로 발행
"""

import asyncio
import logging
import random

from stocktics.config import settings
from stocktics.events.event_bus import AsyncEventBus
from stocktics.models import EmailMessage, NotificationType

logger = logging.getLogger(__name__)

STORE_INVENTORY_EMAIL = "inventory@store.com"
DEFAULT_VENDOR_EMAIL = "vendor@example.com"
DEFAULT_TEAM_EMAIL = "team@store.com"

# 공급사 선택 키 → (표시 이름, 연락 이메일)
VENDORS = {
    "coca-cola": ("Coca Cola Distributor", "orders@cocacola-dist.com"),
    "wonder-bread": ("Wonder Bread Supplier", "restock@wonderbread.com"),
    "pg": ("P&G Products", "wholesale@pg.com"),
    "fresh-produce": ("Fresh Produce Co", "orders@freshproduce.com"),
    "dairy": ("Dairy Supply Chain", "urgent@dairychain.com"),
    "frito-lay": ("Frito-Lay Distribution", "restock@fritolay.com"),
    "general-mills": ("General Mills", "orders@generalmills.com"),
    "electronics": ("Electronics Wholesale", "tech@electronicswholesale.com"),
    "britannia": ("Britannia Industries", "orders@britannia.com"),
    "parle": ("Parle Products", "supply@parle.com"),
    "amul": ("Amul Dairy", "restock@amul.com"),
    "tata": ("Tata Consumer Products", "orders@tata.com"),
    "haldiram": ("Haldiram's", "wholesale@haldirams.com"),
    "patanjali": ("Patanjali Ayurved", "orders@patanjali.com"),
}

TEAM_MEMBERS = {
    "john": "john.smith@store.com",
    "sarah": "sarah.johnson@store.com",
    "mike": "mike.davis@store.com",
    "lisa": "lisa.wilson@store.com",
}


def vendor_email(vendor_name: str) -> str:
    for name, email in VENDORS.values():
        if name == vendor_name:
            return email
    return DEFAULT_VENDOR_EMAIL


def team_member_email(member: str) -> str:
    return TEAM_MEMBERS.get(member, DEFAULT_TEAM_EMAIL)


def compose_contact_email(
    product_name: str, shelf: str, urgency: str, prediction: str, vendor_name: str,
    store_id: str = settings.STORE_ID,
) -> EmailMessage:
    """공급사 재입고 요청 메일"""
    return EmailMessage(
        to=vendor_email(vendor_name),
        subject=f"Restock Request - {product_name} (Priority: {urgency.upper()})",
        body=(
            f"Dear {vendor_name} Team,\n\n"
            "We need to restock the following item:\n\n"
            f"Product: {product_name}\n"
            f"Location: Shelf {shelf}\n"
            f"Priority Level: {urgency.upper()}\n"
            f"AI Analysis: {prediction}\n\n"
            "Please confirm availability and expected delivery time for this restock request.\n\n"
            "Thank you for your prompt attention to this matter.\n\n"
            "Best regards,\n"
            "SmartRestock System\n"
            f"Store #{store_id}\n"
        ),
        type=NotificationType.CONTACT,
    )


def compose_schedule_email(
    product_name: str, shelf: str, date: str, time: str, priority: str,
    assigned_to: str, notes: str = "",
) -> EmailMessage:
    """담당자 재입고 작업 배정 메일"""
    body = (
        "Hello,\n\n"
        "You have been assigned a restock task:\n\n"
        f"Product: {product_name}\n"
        f"Location: Shelf {shelf}\n"
        f"Scheduled Date: {date}\n"
        f"Scheduled Time: {time}\n"
        f"Priority: {priority.upper()}\n"
    )
    if notes:
        body += f"\nAdditional Notes: {notes}\n"
    body += (
        "\nPlease ensure this task is completed on time.\n\n"
        "Best regards,\n"
        "SmartRestock System\n"
    )
    return EmailMessage(
        to=team_member_email(assigned_to),
        subject=f"Restock Schedule: {product_name} - {date}",
        body=body,
        type=NotificationType.SCHEDULE,
    )


def compose_order_email(
    product_name: str, shelf: str, quantity: int, urgency: str, estimated_delivery: str,
) -> EmailMessage:
    """자동 주문 확인 메일 (매장 재고 담당 수신)"""
    return EmailMessage(
        to=STORE_INVENTORY_EMAIL,
        subject=f"Auto-Order Placed: {product_name}",
        body=(
            "An automatic order has been placed:\n\n"
            f"Product: {product_name}\n"
            f"Location: Shelf {shelf}\n"
            f"Quantity: {quantity} units\n"
            f"Urgency: {urgency.upper()}\n"
            f"Estimated Delivery: {estimated_delivery}\n\n"
            "Order will be tracked in the delivery section.\n\n"
            "SmartRestock System\n"
        ),
        type=NotificationType.ORDER,
    )


class EmailNotifier:
    """시뮬레이션 이메일 발송기"""

    def __init__(
        self,
        rng: random.Random | None = None,
        success_rate: float = settings.NOTIFY_SUCCESS_RATE,
        delay_seconds: float = settings.NOTIFY_DELAY_SECONDS,
        event_bus: AsyncEventBus | None = None,
    ):
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError("success_rate는 0~1 사이여야 합니다")
        self.rng = rng or random.Random()
        self.success_rate = success_rate
        self.delay_seconds = delay_seconds
        self.event_bus = event_bus

    def set_event_bus(self, bus: AsyncEventBus):
        self.event_bus = bus

    async def send(self, message: EmailMessage) -> bool:
        """메일 1건 발송 시뮬레이션. 성공 여부만 반환한다."""
        logger.info(f"[Email] 발송 중 → {message.to} | {message.subject} ({message.type.value})")

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        delivered = self.rng.random() < self.success_rate
        if delivered:
            logger.info(f"[Email] 발송 성공 → {message.to}")
        else:
            logger.warning(f"[Email] 발송 실패 → {message.to} (재시도 없음)")

        if self.event_bus:
            await self.event_bus.publish("notifications.sent", {
                **message.to_dict(),
                "delivered": delivered,
            })
        return delivered
