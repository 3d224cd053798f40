"""
재입고 워크플로 — 상태 변경 + 이메일 알림 + 사용자 메시지

메일 실패는 치명적이지 않다: 상태 변경은 그대로 유지하고
"기록은 되었으나 발송 실패" 메시지를 반환한다. 재시도 없음.
"""

import logging
from dataclasses import dataclass

from stocktics.models import Delivery, Item, NotificationResult
from stocktics.services.inventory_controller import InventoryController
from stocktics.services.notifier import (
    VENDORS,
    EmailNotifier,
    compose_contact_email,
    compose_order_email,
    compose_schedule_email,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleRequest:
    date: str
    time: str
    priority: str = "normal"
    assigned_to: str = ""
    notes: str = ""


async def schedule_restock(
    controller: InventoryController,
    notifier: EmailNotifier,
    item_id: int,
    req: ScheduleRequest,
    annotate: bool = True,
) -> tuple[Item, NotificationResult]:
    """
    재입고 예약. 상품 화면에서 예약하면 상품 문구를 갱신하고(annotate=True),
    알림 화면에서 예약하면 문구는 그대로 둔다.
    """
    item = controller.get_item(item_id)
    if annotate:
        item = controller.schedule_restock(item_id, req.date, req.time)
        await controller.publish("inventory.updated", {"item_id": item.id, "action": "scheduled"})

    sent = await notifier.send(compose_schedule_email(
        product_name=item.name,
        shelf=item.shelf,
        date=req.date,
        time=req.time,
        priority=req.priority,
        assigned_to=req.assigned_to,
        notes=req.notes,
    ))

    recipient = req.assigned_to or "assigned team member"
    if sent:
        result = NotificationResult(
            delivered=True,
            title="Restock Scheduled & Email Sent",
            description=f"Restocking scheduled for {item.name} and notification sent to {recipient}.",
        )
    else:
        result = NotificationResult(
            delivered=False,
            title="Restock Scheduled",
            description=f"Restocking scheduled for {item.name}. Email notification failed.",
        )
    return item, result


async def contact_vendor(
    controller: InventoryController,
    notifier: EmailNotifier,
    alert_id: int,
    vendor: str,
    message: str = "",
) -> NotificationResult:
    """알림 대상 상품의 공급사에 재입고 요청 메일 발송"""
    alert = controller.get_alert(alert_id)

    vendor_name = VENDORS[vendor][0] if vendor in VENDORS else "Vendor"
    logger.info(f"공급사 연락: {alert.product} → {vendor_name}")
    if message:
        logger.debug(f"공급사 메모: {message}")

    sent = await notifier.send(compose_contact_email(
        product_name=alert.product,
        shelf=alert.shelf,
        urgency=alert.urgency.value,
        prediction=alert.prediction,
        vendor_name=vendor_name,
    ))
    if sent:
        return NotificationResult(
            delivered=True,
            title="Vendor Contacted Successfully",
            description=f"Email sent to {vendor_name} for {alert.product} restock.",
        )
    return NotificationResult(
        delivered=False,
        title="Contact Request Processed",
        description=f"Contact request logged for {alert.product}. Email delivery failed.",
    )


async def auto_order(
    controller: InventoryController,
    notifier: EmailNotifier,
    item_id: int,
) -> tuple[Delivery, NotificationResult]:
    """자동 주문 생성 후 주문 확인 메일 발송"""
    item = controller.get_item(item_id)
    delivery = controller.auto_order(item_id)
    await controller.publish("deliveries.updated", {
        "delivery_id": delivery.id,
        "status": delivery.status.value,
        "action": "auto_order",
    })

    eta = delivery.estimated_delivery.strftime("%a %b %d %Y")
    sent = await notifier.send(compose_order_email(
        product_name=item.name,
        shelf=item.shelf,
        quantity=delivery.quantity,
        urgency=item.status.value,
        estimated_delivery=eta,
    ))
    description = f"Ordered {delivery.quantity} units of {item.name} for delivery on {eta}"
    if not sent:
        description += ". Order confirmation email failed."
    return delivery, NotificationResult(delivered=sent, title="Auto-Order Placed", description=description)
