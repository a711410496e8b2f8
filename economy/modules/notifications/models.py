"""Economy events delivered to the notification sink."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from economy.modules.common.clock import utcnow


class EventType(str, Enum):
    GIFT_RECEIVED = "gift_received"
    GIFT_ACCEPTED = "gift_accepted"
    GIFT_REJECTED = "gift_rejected"
    GIFT_RETURNED = "gift_returned"


@dataclass(slots=True, frozen=True)
class NotificationEvent:
    type: EventType
    gift_id: Optional[str] = None
    data: dict[str, Any] = field(default_factory=dict)
    occurred_at: datetime = field(default_factory=utcnow)

    def to_message(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "gift_id": self.gift_id,
            "data": dict(self.data),
            "occurred_at": self.occurred_at.isoformat(),
        }
