"""Bearer token validation against the external authentication service."""

import logging

import httpx
from fastapi import HTTPException, Request

VALIDATE_PATH = "/auth/validate"
VALIDATE_TIMEOUT_SECONDS = 10.0

logger = logging.getLogger(__name__)


async def require_bearer_token(request: Request) -> dict:
    """FastAPI dependency that rejects requests without a valid bearer token.

    Returns:
        The identity payload returned by the authentication service.

    Raises:
        HTTPException(401) when the header is missing or the token is rejected.
    """
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        logger.warning("Bearer token is missing or invalid")
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization header")

    token = auth_header.split(" ", 1)[1].strip()
    auth_app_url = request.app.state.settings.auth_app_url
    if not auth_app_url:
        logger.error("AUTH_APP_URL is not configured; rejecting request.")
        raise HTTPException(status_code=401, detail="Failed to validate token")

    try:
        async with httpx.AsyncClient(timeout=VALIDATE_TIMEOUT_SECONDS) as client:
            response = await client.post(
                f"{auth_app_url.rstrip('/')}{VALIDATE_PATH}",
                json={},
                headers={"Authorization": f"Bearer {token}"},
            )
            response.raise_for_status()
            identity = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Token validation failed: %s", exc)
        raise HTTPException(status_code=401, detail="Failed to validate token") from exc

    if not isinstance(identity, dict) or not identity.get("id"):
        raise HTTPException(status_code=401, detail="Invalid token")

    logger.info("Token validated successfully")
    return identity
