from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response, StreamingResponse

from tto_survey.core.ai.schemas import CopilotRequest
from tto_survey.core.ai.service import CopilotService, get_copilot_service
from tto_survey.core.ai.stream import pipe
from tto_survey.core.error_handler import describe_exception
from tto_survey.core.result import Failure

logger = logging.getLogger(__name__)

router = APIRouter(tags=["copilot"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def _json_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=CORS_HEADERS)


@router.options("/ai-copilot")
async def api_ai_copilot_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/ai-copilot")
async def api_ai_copilot(
    request: Request,
    copilot: CopilotService = Depends(get_copilot_service),
) -> Response:
    try:
        body = CopilotRequest.model_validate(await request.json())
        result = await copilot.open_stream(body)
    except Exception as exc:
        logger.error("AI copilot error: %s", describe_exception(exc), exc_info=True)
        return _json_error(500, describe_exception(exc))

    if isinstance(result, Failure):
        return _json_error(result.error.status_code, result.error.message)

    # Content-Type is set verbatim so Starlette does not append a charset.
    return StreamingResponse(
        pipe(result.value),
        status_code=200,
        headers={**CORS_HEADERS, "Content-Type": "text/event-stream"},
    )
