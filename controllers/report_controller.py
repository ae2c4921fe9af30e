"""Controller for assistant-generated reports."""

import logging
from typing import Any, List

from fastapi import HTTPException, Request

from services.assistants.report_orchestrator import ReportOrchestrator
from services.assistants.response_utils import serialize_response

logger = logging.getLogger(__name__)


def build_orchestrator(request: Request) -> ReportOrchestrator:
    """Create an orchestrator from the gateway and settings kept on `app.state`."""
    gateway = getattr(request.app.state, "assistants_gateway", None)
    if gateway is None:
        raise HTTPException(status_code=500, detail="Assistants gateway not initialized.")
    settings = request.app.state.settings
    if not settings.assistant_id:
        raise HTTPException(status_code=500, detail="ASSISTANT_ID is not configured.")
    return ReportOrchestrator(
        gateway,
        settings.assistant_id,
        poll_interval=settings.poll_interval_seconds,
        logger=logging.getLogger("services.assistants"),
    )


async def generate_report(request: Request, content: str, images_base64: List[str]) -> Any:
    """Generate a report and return the serialized thread messages.

    Args:
        request: FastAPI Request (used to access app.state for shared clients).
        content: Prompt text for the assistant.
        images_base64: Base64-encoded JPEG images.

    Returns:
        The message collection of the assistant thread as plain data.

    Raises:
        HTTPException(500) carrying the stage error message on failure.
    """
    orchestrator = build_orchestrator(request)
    result = await orchestrator.generate_report(content, images_base64)
    if result.is_err():
        logger.error("Report generation failed: %s", result.error)
        raise HTTPException(status_code=500, detail=str(result.error))
    return serialize_response(result.value)
