"""Pydantic schemas for the copilot proxy request body.

The schema is structural only. It checks that the body is an
object and that ``messages`` is a list. Individual messages are forwarded to
the gateway exactly as the caller sent them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CopilotRequest(BaseModel):
    """Chat request sent by the interview UI."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    messages: list[Any]
    stage: Any = None
    session_context: Any = Field(default=None, alias="sessionContext")


__all__ = ["CopilotRequest"]
