import asyncio

import pytest

from models.errors import RunStatusError, SessionCreationError, UploadError
from models.report_models import ImageBlock, TextBlock
from services.assistants.report_orchestrator import ReportOrchestrator

from conftest import CORRUPT_IMAGE, VALID_IMAGE, FakeGateway


def _run(coro):  # noqa: ANN001
    return asyncio.run(coro)


def _orchestrator(gateway, sleep):
    return ReportOrchestrator(gateway, "asst_1", sleep=sleep)


def test_text_only_report(fake_sleep):
    gateway = FakeGateway(statuses=["completed"])
    result = _run(_orchestrator(gateway, fake_sleep).generate_report("Summarize findings", []))

    assert result.is_ok()
    assert result.value is gateway.messages
    assert gateway.call_names() == [
        "create_session",
        "append_message",
        "start_run",
        "get_run_status",
        "list_messages",
    ]
    assert gateway.appended == [[TextBlock("Summarize findings")]]
    assert gateway.uploads == []


def test_single_image_report(fake_sleep):
    gateway = FakeGateway(statuses=["in_progress", "completed"])
    result = _run(_orchestrator(gateway, fake_sleep).generate_report("X", [VALID_IMAGE]))

    assert result.is_ok()
    assert gateway.appended == [[ImageBlock("file_1"), TextBlock("X")]]
    assert fake_sleep.delays == [5.0]


def test_many_images_yield_one_block_each(fake_sleep):
    gateway = FakeGateway(statuses=["completed"])
    _run(_orchestrator(gateway, fake_sleep).generate_report("X", [VALID_IMAGE] * 4))

    blocks = gateway.appended[0]
    assert [type(block) for block in blocks] == [ImageBlock] * 4 + [TextBlock]


def test_corrupt_image_stops_before_run(fake_sleep):
    gateway = FakeGateway(statuses=["completed"])
    result = _run(_orchestrator(gateway, fake_sleep).generate_report("X", [VALID_IMAGE, CORRUPT_IMAGE]))

    assert result.is_err()
    assert isinstance(result.error, UploadError)
    names = gateway.call_names()
    assert "append_message" not in names
    assert "start_run" not in names
    assert "get_run_status" not in names


def test_status_error_on_second_poll(fake_sleep):
    gateway = FakeGateway(statuses=["in_progress", RuntimeError("timeout")])
    result = _run(_orchestrator(gateway, fake_sleep).generate_report("X", []))

    assert isinstance(result.error, RunStatusError)
    assert result.error.stage == "poll"
    assert gateway.call_names().count("get_run_status") == 2
    assert "list_messages" not in gateway.call_names()


def test_session_failure_short_circuits(fake_sleep):
    gateway = FakeGateway()
    gateway.failures["create_session"] = RuntimeError("down")
    result = _run(_orchestrator(gateway, fake_sleep).generate_report("X", [VALID_IMAGE]))

    assert isinstance(result.error, SessionCreationError)
    assert gateway.call_names() == ["create_session"]


def test_concurrent_reports_use_separate_threads(fake_sleep):
    class CountingGateway(FakeGateway):
        def __init__(self):
            super().__init__(statuses=["completed", "completed"])
            self.created = 0

        async def create_session(self):
            self.created += 1
            self.calls.append(("create_session",))
            return f"thread_{self.created}"

    gateway = CountingGateway()
    orchestrator = _orchestrator(gateway, fake_sleep)

    async def scenario():
        return await asyncio.gather(
            orchestrator.generate_report("A", []),
            orchestrator.generate_report("B", []),
        )

    first, second = _run(scenario())
    assert first.is_ok() and second.is_ok()
    appended_threads = [call[1] for call in gateway.calls if call[0] == "append_message"]
    assert sorted(appended_threads) == ["thread_1", "thread_2"]


def test_requires_assistant_id(gateway):
    with pytest.raises(ValueError):
        ReportOrchestrator(gateway, "")
