"""Fire-and-forget notification dispatch.

Every coroutine here resolves to a ``Result`` and never raises (task
cancellation aside), so UI flows can trigger notifications without guarding
against delivery problems.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from tto_survey.clients.functions import FunctionsClient, get_functions_client
from tto_survey.core.result import Failure, Result, Success

from .models import NotificationPayload, NotificationType

logger = logging.getLogger(__name__)

SEND_INTERVIEW_NOTIFICATION = "send-interview-notification"
SEND_PERFORMANCE_REPORT = "send-performance-report"

NotificationResult = Result[Any, Exception]


async def _invoke_quietly(
    function_name: str,
    build_body: Callable[[], dict[str, Any]],
    client: Optional[FunctionsClient],
) -> NotificationResult:
    try:
        body = build_body()
        functions = client or get_functions_client()
        response = await functions.invoke(function_name, body)
    except Exception as exc:
        logger.error("Failed to invoke %s: %s", function_name, exc, exc_info=True)
        return Failure(exc)

    if response.error is not None:
        logger.error(
            "Error invoking %s: %s",
            function_name,
            response.error,
            extra={"function": function_name, "error_context": response.error.context},
        )
        return Failure(response.error)

    logger.info("Invoked %s successfully", function_name, extra={"function": function_name})
    return Success(response.data)


async def send_interview_notification(
    payload: NotificationPayload,
    *,
    client: Optional[FunctionsClient] = None,
) -> NotificationResult:
    logger.info(
        "Sending interview notification",
        extra={
            "session_id": payload.session_id,
            "interviewer_id": payload.interviewer_id,
            "notification_type": payload.notification_type.value,
        },
    )
    return await _invoke_quietly(SEND_INTERVIEW_NOTIFICATION, payload.to_body, client)


async def notify_interview_completed(
    session_id: str,
    respondent_code: str,
    interviewer_id: str,
    *,
    client: Optional[FunctionsClient] = None,
) -> NotificationResult:
    payload = NotificationPayload(
        session_id=session_id,
        respondent_code=respondent_code,
        interviewer_id=interviewer_id,
        notification_type=NotificationType.COMPLETED,
    )
    return await send_interview_notification(payload, client=client)


async def notify_session_flagged(
    session_id: str,
    respondent_code: str,
    interviewer_id: str,
    notes: Optional[str] = None,
    *,
    client: Optional[FunctionsClient] = None,
) -> NotificationResult:
    payload = NotificationPayload(
        session_id=session_id,
        respondent_code=respondent_code,
        interviewer_id=interviewer_id,
        notification_type=NotificationType.FLAGGED,
        quality_notes=notes,
    )
    return await send_interview_notification(payload, client=client)


async def notify_quality_update(
    session_id: str,
    respondent_code: str,
    interviewer_id: str,
    quality_status: str,
    notes: Optional[str] = None,
    *,
    client: Optional[FunctionsClient] = None,
) -> NotificationResult:
    payload = NotificationPayload(
        session_id=session_id,
        respondent_code=respondent_code,
        interviewer_id=interviewer_id,
        notification_type=NotificationType.QUALITY_UPDATE,
        quality_status=quality_status,
        quality_notes=notes,
    )
    return await send_interview_notification(payload, client=client)


async def request_performance_report(
    schedule_id: str,
    *,
    is_test: bool = False,
    client: Optional[FunctionsClient] = None,
) -> NotificationResult:
    """Ask the backend to e-mail the performance report for a schedule now."""
    logger.info("Requesting performance report", extra={"schedule_id": schedule_id, "is_test": is_test})
    return await _invoke_quietly(
        SEND_PERFORMANCE_REPORT,
        lambda: {"scheduleId": schedule_id, "isTest": is_test},
        client,
    )


__all__ = [
    "NotificationResult",
    "SEND_INTERVIEW_NOTIFICATION",
    "SEND_PERFORMANCE_REPORT",
    "notify_interview_completed",
    "notify_quality_update",
    "notify_session_flagged",
    "request_performance_report",
    "send_interview_notification",
]
