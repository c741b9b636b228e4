from __future__ import annotations

import pytest

from tto_survey.clients.functions import (
    FunctionResponse,
    FunctionsClientError,
    FunctionsHttpError,
)
from tto_survey.core.result import Failure, Success
from tto_survey.domain.notifications import (
    NotificationPayload,
    NotificationType,
    notify_interview_completed,
    notify_quality_update,
    notify_session_flagged,
    request_performance_report,
    send_interview_notification,
)


class _RecordingClient:
    def __init__(self, response: FunctionResponse | None = None, exc: Exception | None = None) -> None:
        self._response = response or FunctionResponse(data={"success": True, "message": "Notification sent"})
        self._exc = exc
        self.calls: list[tuple[str, dict]] = []

    async def invoke(self, name: str, body: dict) -> FunctionResponse:
        self.calls.append((name, body))
        if self._exc is not None:
            raise self._exc
        return self._response


@pytest.mark.asyncio
async def test_notify_interview_completed_builds_completed_payload():
    client = _RecordingClient()

    result = await notify_interview_completed("sess-1", "R-001", "int-9", client=client)

    assert client.calls == [
        (
            "send-interview-notification",
            {
                "sessionId": "sess-1",
                "respondentCode": "R-001",
                "interviewerId": "int-9",
                "notificationType": "completed",
            },
        )
    ]
    assert isinstance(result, Success)
    assert result.value == {"success": True, "message": "Notification sent"}


@pytest.mark.asyncio
async def test_notify_session_flagged_sets_notes_without_status():
    client = _RecordingClient()

    await notify_session_flagged("sess-1", "R-001", "int-9", "note", client=client)

    _, body = client.calls[0]
    assert body["notificationType"] == "flagged"
    assert body["qualityNotes"] == "note"
    assert "qualityStatus" not in body


@pytest.mark.asyncio
async def test_notify_session_flagged_without_notes_omits_field():
    client = _RecordingClient()

    await notify_session_flagged("sess-1", "R-001", "int-9", client=client)

    _, body = client.calls[0]
    assert "qualityNotes" not in body


@pytest.mark.asyncio
async def test_notify_quality_update_sends_status_and_notes():
    client = _RecordingClient()

    await notify_quality_update("sess-2", "R-002", "int-9", "rejected", "too fast", client=client)

    _, body = client.calls[0]
    assert body == {
        "sessionId": "sess-2",
        "respondentCode": "R-002",
        "interviewerId": "int-9",
        "notificationType": "quality_update",
        "qualityStatus": "rejected",
        "qualityNotes": "too fast",
    }


@pytest.mark.asyncio
async def test_remote_error_is_returned_not_raised():
    error = FunctionsHttpError(404, {"error": "Interviewer not found"})
    client = _RecordingClient(response=FunctionResponse(error=error))

    result = await notify_interview_completed("sess-1", "R-001", "missing", client=client)

    assert isinstance(result, Failure)
    assert result.error is error
    assert result.as_dict() == {"success": False, "error": error}


@pytest.mark.asyncio
async def test_transport_exception_becomes_failure():
    client = _RecordingClient(exc=ConnectionResetError("peer went away"))

    result = await notify_session_flagged("sess-1", "R-001", "int-9", "note", client=client)

    assert result.is_failure()
    assert isinstance(result.error, ConnectionResetError)


@pytest.mark.asyncio
async def test_missing_functions_url_becomes_failure(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "")

    result = await notify_interview_completed("sess-1", "R-001", "int-9")

    assert isinstance(result, Failure)
    assert isinstance(result.error, FunctionsClientError)


@pytest.mark.asyncio
async def test_unserializable_payload_becomes_failure():
    client = _RecordingClient()

    class _BrokenPayload(NotificationPayload):
        def to_body(self) -> dict:
            raise TypeError("Object of type set is not JSON serializable")

    payload = _BrokenPayload("sess-1", "R-001", "int-9", NotificationType.COMPLETED)
    result = await send_interview_notification(payload, client=client)

    assert isinstance(result.error, TypeError)
    assert client.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        FunctionResponse(data={"success": True}),
        FunctionResponse(data=None),
        FunctionResponse(error=FunctionsHttpError(500, {"error": "boom"})),
    ],
)
async def test_result_carries_exactly_one_of_data_or_error(response):
    payload = NotificationPayload("sess-1", "R-001", "int-9", "quality_update", quality_status="approved")

    result = await send_interview_notification(payload, client=_RecordingClient(response=response))

    shape = result.as_dict()
    assert set(shape) in ({"success", "data"}, {"success", "error"})
    assert shape["success"] is ("data" in shape)


def test_payload_rejects_unknown_notification_type():
    with pytest.raises(ValueError):
        NotificationPayload("sess-1", "R-001", "int-9", "archived")


def test_payload_coerces_string_notification_type():
    payload = NotificationPayload("sess-1", "R-001", "int-9", "flagged", quality_notes="n")

    assert payload.notification_type is NotificationType.FLAGGED
    assert payload.to_body()["notificationType"] == "flagged"


@pytest.mark.asyncio
async def test_request_performance_report_invokes_report_function():
    client = _RecordingClient(response=FunctionResponse(data={"sent": 1}))

    result = await request_performance_report("sched-7", is_test=True, client=client)

    assert client.calls == [("send-performance-report", {"scheduleId": "sched-7", "isTest": True})]
    assert result.unwrap() == {"sent": 1}
