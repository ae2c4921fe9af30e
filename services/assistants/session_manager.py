"""Open the remote conversation thread that scopes one report request."""

import logging
from typing import Optional

from models.errors import SessionCreationError
from models.report_models import Session
from services.assistants.gateway import AssistantsGateway
from utils.result import Err, Ok, Result


class SessionManager:
    """Create single-use assistant threads."""

    def __init__(self, gateway: AssistantsGateway, logger: Optional[logging.Logger] = None) -> None:
        self.gateway = gateway
        self.logger = logger or logging.getLogger(__name__)

    async def create_session(self) -> Result[Session, SessionCreationError]:
        """Open exactly one remote thread. No retries; the thread is never closed."""
        self.logger.info("Creating assistant thread...")
        try:
            session_id = await self.gateway.create_session()
        except Exception as exc:  # pylint: disable=broad-exception-caught
            self.logger.error("Error creating assistant thread: %s", exc)
            return Err(SessionCreationError(f"Error creating assistant thread: {exc}"))
        self.logger.info("Assistant thread %s created.", session_id)
        return Ok(Session(session_id=session_id))
