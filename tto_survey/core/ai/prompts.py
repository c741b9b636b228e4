"""System prompt for the TTO interview copilot.

``copilot_system_prompt()`` returns the fixed protocol prompt, optionally
followed by the current interview stage and a compact JSON dump of the
session context, in that order.
"""

from __future__ import annotations

import json
import math
from typing import Any

TTO_PROTOCOL_SYSTEM_PROMPT = (
    "You are an AI Interview Co-pilot assisting interviewers conducting EQ-5D-5L "
    "Time Trade-Off (TTO) valuation studies.\n"
    "\n"
    "Your role is to:\n"
    "1. Provide real-time protocol guidance during TTO interviews\n"
    "2. Monitor data quality and flag potential issues\n"
    "3. Help interviewers maintain EQ-VT protocol standards\n"
    "4. Offer suggestions for handling difficult respondent situations\n"
    "\n"
    "Key TTO Protocol Knowledge:\n"
    "- The TTO method compares Life A (health state for 10 years) vs Life B "
    "(full health for variable time)\n"
    "- Values range from -1 to 1, where 1 = full health, 0 = dead, negative = worse than death\n"
    "- For worse-than-death states, use Lead-Time TTO with 10 years lead time in full health\n"
    "- Standard protocol uses 10 health states per interview\n"
    "- Watch for quality issues: straight-lining, satisficing, inconsistent responses\n"
    "\n"
    "Data Quality Indicators to Monitor:\n"
    "- Response times under 5 seconds may indicate satisficing\n"
    "- Identical values for all states suggests straight-lining\n"
    "- Logical inconsistencies (e.g., severe state valued higher than mild)\n"
    "\n"
    "Be concise, professional, and supportive. Focus on actionable guidance."
)


def _is_set(value: Any) -> bool:
    """JSON truthiness: null, false, 0 and "" are unset; objects and arrays are set even when empty."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def _js_number(value: float) -> Any:
    """Number as a JSON client sees it: integral floats drop the fraction, NaN/inf become null."""
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value


def _normalize(data: Any) -> Any:
    if isinstance(data, float):
        return _js_number(data)
    if isinstance(data, dict):
        return {key: _normalize(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_normalize(item) for item in data]
    return data


def _compact_json(data: Any) -> str:
    return json.dumps(_normalize(data), ensure_ascii=False, separators=(",", ":"))


def _stage_label(stage: Any) -> str:
    """String form of a stage value, following JavaScript string conversion."""
    if isinstance(stage, str):
        return stage
    if isinstance(stage, bool):
        return "true" if stage else "false"
    if isinstance(stage, float):
        number = _js_number(stage)
        if number is None:
            return "NaN" if math.isnan(stage) else ("Infinity" if stage > 0 else "-Infinity")
        return str(number)
    if isinstance(stage, int):
        return str(stage)
    if isinstance(stage, list):
        # Array join renders null elements as empty strings.
        return ",".join("" if item is None else _stage_label(item) for item in stage)
    if isinstance(stage, dict):
        return "[object Object]"
    return str(stage)


def copilot_system_prompt(*, stage: Any = None, session_context: Any = None) -> str:
    prompt = TTO_PROTOCOL_SYSTEM_PROMPT
    if _is_set(stage):
        prompt += f"\n\nCurrent interview stage: {_stage_label(stage)}"
    if _is_set(session_context):
        prompt += f"\n\nSession context: {_compact_json(session_context)}"
    return prompt


__all__ = ["TTO_PROTOCOL_SYSTEM_PROMPT", "copilot_system_prompt"]
