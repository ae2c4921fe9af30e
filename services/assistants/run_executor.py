"""Append the request message to a thread and start an assistant run."""

import logging
from typing import Optional, Sequence, Union

from models.errors import MessageAppendError, RunCreationError
from models.report_models import ContentBlock, RunJob
from services.assistants.gateway import AssistantsGateway
from utils.result import Err, Ok, Result


class RunExecutor:
    """Submit assembled content to the remote assistant."""

    def __init__(self, gateway: AssistantsGateway, logger: Optional[logging.Logger] = None) -> None:
        self.gateway = gateway
        self.logger = logger or logging.getLogger(__name__)

    async def submit_run(
        self,
        session_id: str,
        assistant_id: str,
        content: Sequence[ContentBlock],
    ) -> Result[RunJob, Union[MessageAppendError, RunCreationError]]:
        """Append `content` as a user message, then start a run of `assistant_id`.

        The appended message is left in place if starting the run fails.
        """
        self.logger.info("Adding message to thread %s...", session_id)
        try:
            await self.gateway.append_message(session_id, content)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            self.logger.error("Error adding message to thread: %s", exc)
            return Err(MessageAppendError(f"Error adding message to thread: {exc}"))
        self.logger.info("Message added to thread.")

        self.logger.info("Creating run...")
        try:
            run_id, status = await self.gateway.start_run(session_id, assistant_id)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            self.logger.error("Error creating run: %s", exc)
            return Err(RunCreationError(f"Error creating run: {exc}"))
        self.logger.info("Run %s created with status %s.", run_id, status)

        return Ok(RunJob(session_id=session_id, assistant_id=assistant_id, run_id=run_id, status=status))
