"""FastAPI routes for report generation."""

import logging
from typing import Any, List, Tuple

from fastapi import APIRouter, Depends, HTTPException, Request

from controllers.report_controller import generate_report
from utils.auth import require_bearer_token

router = APIRouter(prefix="/report", tags=["report"])
logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body. Expected { content: string, imagesBase64: string[] }"


def _validated_body(body: Any) -> Tuple[str, List[str]]:
    """Return `(content, images)` or raise HTTPException(400) for any other shape."""
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail=INVALID_BODY_MESSAGE)
    content = body.get("content")
    images = body.get("imagesBase64")
    if not isinstance(content, str) or not content or not isinstance(images, list):
        raise HTTPException(status_code=400, detail=INVALID_BODY_MESSAGE)
    if not all(isinstance(image, str) for image in images):
        raise HTTPException(status_code=400, detail=INVALID_BODY_MESSAGE)
    return content, images


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_BODY_MESSAGE) from None


@router.post("/generate", dependencies=[Depends(require_bearer_token)])
async def post_generate_report(request: Request):
    """Generate a report from prompt text and base64 images.

    Body: `{"content": str, "imagesBase64": [str]}`.
    """
    content, images = _validated_body(await _read_json(request))
    try:
        return await generate_report(request, content, images)
    except HTTPException:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.error("Unhandled error: %s", exc)
        raise HTTPException(status_code=500, detail="An unexpected error occurred") from exc
