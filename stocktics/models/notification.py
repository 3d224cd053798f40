"""
이메일 알림 페이로드 — 알림 스텁에 전달되는 내부 계약
"""

import enum
from dataclasses import asdict, dataclass


class NotificationType(str, enum.Enum):
    CONTACT = "contact"
    SCHEDULE = "schedule"
    ORDER = "order"


@dataclass(frozen=True)
class EmailMessage:
    to: str
    subject: str
    body: str
    type: NotificationType

    def to_dict(self) -> dict:
        data = asdict(self)
        data["type"] = self.type.value
        return data


@dataclass(frozen=True)
class NotificationResult:
    """발송 결과 + 사용자에게 보여줄 메시지"""
    delivered: bool
    title: str
    description: str
