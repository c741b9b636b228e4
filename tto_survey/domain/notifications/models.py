from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class NotificationType(str, Enum):
    COMPLETED = "completed"
    FLAGGED = "flagged"
    QUALITY_UPDATE = "quality_update"


@dataclass(frozen=True)
class NotificationPayload:
    """Body of one ``send-interview-notification`` invocation.

    ``quality_status`` is meaningful for ``quality_update`` and
    ``quality_notes`` for ``flagged``; both are optional everywhere.
    """

    session_id: str
    respondent_code: str
    interviewer_id: str
    notification_type: NotificationType
    quality_status: Optional[str] = None
    quality_notes: Optional[str] = None

    def __post_init__(self) -> None:
        # Raises ValueError for anything outside the three known types.
        object.__setattr__(self, "notification_type", NotificationType(self.notification_type))

    def to_body(self) -> dict[str, Any]:
        """Wire form with camelCase keys; unset optional fields are left out."""
        body: dict[str, Any] = {
            "sessionId": self.session_id,
            "respondentCode": self.respondent_code,
            "interviewerId": self.interviewer_id,
            "notificationType": self.notification_type.value,
        }
        if self.quality_status is not None:
            body["qualityStatus"] = self.quality_status
        if self.quality_notes is not None:
            body["qualityNotes"] = self.quality_notes
        return body


__all__ = ["NotificationPayload", "NotificationType"]
