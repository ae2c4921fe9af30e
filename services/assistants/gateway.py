"""Remote assistant capability used by the report pipeline.

`AssistantsGateway` lists the six calls the pipeline needs from the remote
provider. `OpenAIAssistantsGateway` implements them on top of the OpenAI
Assistants API (threads, files, messages and runs). Gateway methods raise on
failure; the pipeline components turn those exceptions into typed errors.
"""

from __future__ import annotations

from typing import Any, List, Protocol, Sequence, Tuple

from openai import AsyncOpenAI

from models.report_models import ContentBlock
from services.assistants.response_utils import read_status

VISION_PURPOSE = "vision"


class AssistantsGateway(Protocol):
    async def create_session(self) -> str: ...

    async def upload_file(self, payload: bytes, filename: str, mime_type: str, purpose: str) -> str: ...

    async def append_message(self, session_id: str, content: Sequence[ContentBlock]) -> None: ...

    async def start_run(self, session_id: str, assistant_id: str) -> Tuple[str, str]: ...

    async def get_run_status(self, session_id: str, run_id: str) -> str: ...

    async def list_messages(self, session_id: str) -> Any: ...


class OpenAIAssistantsGateway:
    """Assistants API adapter backed by a shared `AsyncOpenAI` client."""

    def __init__(self, client: AsyncOpenAI) -> None:
        if client is None:
            raise ValueError("OpenAI client must be provided.")
        self.client = client

    async def create_session(self) -> str:
        thread = await self.client.beta.threads.create()
        return thread.id

    async def upload_file(
        self, payload: bytes, filename: str, mime_type: str, purpose: str = VISION_PURPOSE
    ) -> str:
        response = await self.client.files.create(file=(filename, payload, mime_type), purpose=purpose)
        return response.id

    async def append_message(self, session_id: str, content: Sequence[ContentBlock]) -> None:
        payload: List[dict] = [block.to_payload() for block in content]
        await self.client.beta.threads.messages.create(thread_id=session_id, role="user", content=payload)

    async def start_run(self, session_id: str, assistant_id: str) -> Tuple[str, str]:
        """Start a run and return `(run_id, status)` as reported by the API."""
        run = await self.client.beta.threads.runs.create(thread_id=session_id, assistant_id=assistant_id)
        return run.id, read_status(run)

    async def get_run_status(self, session_id: str, run_id: str) -> str:
        run = await self.client.beta.threads.runs.retrieve(run_id=run_id, thread_id=session_id)
        return read_status(run)

    async def list_messages(self, session_id: str) -> Any:
        return await self.client.beta.threads.messages.list(thread_id=session_id)
