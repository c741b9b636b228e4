"""Interview notifications sent to the backend notification function."""

from .models import NotificationPayload, NotificationType
from .services import (
    NotificationResult,
    notify_interview_completed,
    notify_quality_update,
    notify_session_flagged,
    request_performance_report,
    send_interview_notification,
)

__all__ = [
    "NotificationPayload",
    "NotificationResult",
    "NotificationType",
    "notify_interview_completed",
    "notify_quality_update",
    "notify_session_flagged",
    "request_performance_report",
    "send_interview_notification",
]
