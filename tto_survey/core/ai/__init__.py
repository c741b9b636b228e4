"""AI Copilot subsystem (chat proxy to the AI gateway).

The proxy never inspects or stores model output: successful replies are
streamed straight back to the interviewer's browser.
"""

from .service import CopilotService, get_copilot_service

__all__ = ["CopilotService", "get_copilot_service"]
