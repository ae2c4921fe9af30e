from __future__ import annotations

import asyncio
import base64
from typing import Any, Dict, List, Optional

import pytest

JPEG_BYTES = b"\xff\xd8\xff\xe0fake-jpeg\xff\xd9"
VALID_IMAGE = base64.b64encode(JPEG_BYTES).decode("ascii")
CORRUPT_IMAGE = "not*base64!"


class FakeGateway:
    """In-memory stand-in for the remote assistant provider."""

    def __init__(self, statuses: Optional[List[Any]] = None) -> None:
        self.calls: List[tuple] = []
        self.statuses: List[Any] = list(statuses if statuses is not None else ["completed"])
        self.failures: Dict[str, Exception] = {}
        self.failing_payloads: set = set()
        self.messages: Any = {"data": [{"role": "assistant", "content": "report"}]}
        self.uploads: List[tuple] = []
        self.appended: List[list] = []

    def _check(self, name: str) -> None:
        if name in self.failures:
            raise self.failures[name]

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]

    async def create_session(self) -> str:
        self.calls.append(("create_session",))
        self._check("create_session")
        return "thread_1"

    async def upload_file(self, payload: bytes, filename: str, mime_type: str, purpose: str) -> str:
        self.calls.append(("upload_file", filename))
        self.uploads.append((payload, filename, mime_type, purpose))
        file_id = f"file_{len(self.uploads)}"
        await asyncio.sleep(0)
        if payload in self.failing_payloads:
            raise RuntimeError("upload rejected")
        return file_id

    async def append_message(self, session_id: str, content) -> None:
        self.calls.append(("append_message", session_id))
        self._check("append_message")
        self.appended.append(list(content))

    async def start_run(self, session_id: str, assistant_id: str):
        self.calls.append(("start_run", session_id, assistant_id))
        self._check("start_run")
        return "run_1", "queued"

    async def get_run_status(self, session_id: str, run_id: str) -> str:
        self.calls.append(("get_run_status", session_id, run_id))
        if not self.statuses:
            raise AssertionError("status queried after the scripted sequence ended")
        status = self.statuses.pop(0)
        if isinstance(status, Exception):
            raise status
        return status

    async def list_messages(self, session_id: str) -> Any:
        self.calls.append(("list_messages", session_id))
        self._check("list_messages")
        return self.messages


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def fake_sleep() -> RecordingSleep:
    return RecordingSleep()
