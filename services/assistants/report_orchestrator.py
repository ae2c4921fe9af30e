"""Report generation on top of the OpenAI Assistants API.

A report request runs through a fixed sequence of stages:

1. open a fresh assistant thread,
2. decode and upload the caller's images (concurrently),
3. build the message content (images first, then the prompt text),
4. append the message and start a run of the configured assistant,
5. poll the run every few seconds until it is terminal,
6. list the thread messages.

Each stage returns a `Result`. The first `Err` ends the request and is handed
back to the caller unchanged; its `stage` attribute names where it happened.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

from models.errors import ReportError
from services.assistants.content_assembler import assemble_content
from services.assistants.gateway import AssistantsGateway
from services.assistants.image_uploader import ImageInput, ImageUploadPipeline
from services.assistants.result_collector import ResultCollector
from services.assistants.run_executor import RunExecutor
from services.assistants.run_poller import DEFAULT_POLL_INTERVAL, RunPoller
from services.assistants.session_manager import SessionManager
from utils.result import Result


class ReportOrchestrator:
    """Drive one assistant run per report request.

    Instances hold no per-request state, so one orchestrator can serve
    concurrent requests; each call gets its own thread and run.
    """

    def __init__(
        self,
        gateway: AssistantsGateway,
        assistant_id: str,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if gateway is None:
            raise ValueError("Assistants gateway must be provided.")
        if not assistant_id:
            raise ValueError("Assistant id must be provided.")
        self.assistant_id = assistant_id
        self.logger = logger or logging.getLogger(__name__)
        self.sessions = SessionManager(gateway, logger=self.logger)
        self.uploader = ImageUploadPipeline(gateway, logger=self.logger)
        self.executor = RunExecutor(gateway, logger=self.logger)
        self.poller = RunPoller(gateway, interval=poll_interval, sleep=sleep, logger=self.logger)
        self.collector = ResultCollector(gateway, logger=self.logger)

    async def generate_report(self, content: str, images_base64: Sequence[ImageInput]) -> Result[Any, ReportError]:
        """Generate a report from `content` and base64 images.

        Args:
            content: Prompt text sent as the last block of the user message.
            images_base64: Base64-encoded images (or `ImageAsset`s), possibly empty.

        Returns:
            `Ok(messages)` with the thread's message collection, or the first
            stage's `Err`.
        """
        self.logger.info("%d images received...", len(images_base64))
        self.logger.info("Generating report...")

        result = await self._run_stages(content, images_base64)
        if result.is_err():
            self.logger.error("Error generating report at stage '%s': %s", result.error.stage, result.error)
        else:
            self.logger.info("Report generated successfully!")
        return result

    async def _run_stages(self, content: str, images_base64: Sequence[ImageInput]) -> Result[Any, ReportError]:
        session = await self.sessions.create_session()
        if session.is_err():
            return session
        session_id = session.value.session_id

        uploads = await self.uploader.upload_images(images_base64)
        if uploads.is_err():
            return uploads

        blocks = assemble_content(uploads.value, content)

        run = await self.executor.submit_run(session_id, self.assistant_id, blocks)
        if run.is_err():
            return run

        finished = await self.poller.wait_for_completion(run.value)
        if finished.is_err():
            return finished
        self.logger.info("Run completed successfully.")

        return await self.collector.collect(session_id)
