"""Fetch the thread messages once a run has completed."""

import logging
from typing import Any, Optional

from models.errors import ResultFetchError
from services.assistants.gateway import AssistantsGateway
from utils.result import Err, Ok, Result


class ResultCollector:
    def __init__(self, gateway: AssistantsGateway, logger: Optional[logging.Logger] = None) -> None:
        self.gateway = gateway
        self.logger = logger or logging.getLogger(__name__)

    async def collect(self, session_id: str) -> Result[Any, ResultFetchError]:
        """Return the full message collection of the thread, unmodified."""
        try:
            messages = await self.gateway.list_messages(session_id)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            self.logger.error("Error listing messages for thread %s: %s", session_id, exc)
            return Err(ResultFetchError(f"Error listing thread messages: {exc}"))
        return Ok(messages)
