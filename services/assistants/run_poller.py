"""Poll an assistant run until it reaches a terminal status."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Union

from models.errors import RunFailedError, RunStatusError
from models.report_models import FAILED_STATUSES, RunJob, is_terminal
from services.assistants.gateway import AssistantsGateway
from utils.result import Err, Ok, Result

DEFAULT_POLL_INTERVAL = 5.0


class RunPoller:
    """Re-read run status at a fixed interval until the run is terminal.

    There is no attempt limit and no deadline. A failed status query ends
    polling immediately.
    """

    def __init__(
        self,
        gateway: AssistantsGateway,
        *,
        interval: float = DEFAULT_POLL_INTERVAL,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if interval < 0:
            raise ValueError("Poll interval must be non-negative.")
        self.gateway = gateway
        self.interval = interval
        self.sleep = sleep
        self.logger = logger or logging.getLogger(__name__)

    async def wait_for_completion(self, run: RunJob) -> Result[RunJob, Union[RunStatusError, RunFailedError]]:
        """Block the calling task until `run` is terminal and return the outcome.

        `run.status` is updated with every status read from the remote side.
        """
        while True:
            self.logger.info("Checking run status for run ID: %s...", run.run_id)
            try:
                status = await self.gateway.get_run_status(run.session_id, run.run_id)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                self.logger.error("Error checking run status: %s", exc)
                return Err(RunStatusError(f"Error checking run status: {exc}"))

            run.status = status
            if is_terminal(status):
                break
            self.logger.debug("Run %s is %s; next check in %.1fs.", run.run_id, status, self.interval)
            await self.sleep(self.interval)

        if run.status in FAILED_STATUSES:
            self.logger.error("Run %s finished with status: %s", run.run_id, run.status)
            return Err(RunFailedError(run.status))

        self.logger.info("Run status: completed.")
        return Ok(run)
