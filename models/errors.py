"""Typed failures for each report generation stage."""

from __future__ import annotations

from typing import List, Optional


class ReportError(Exception):
    """Base class for report generation failures.

    Attributes:
        stage: Name of the pipeline stage that produced the error.
    """

    stage = "report"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DecodeError(ReportError):
    stage = "decode"


class UploadError(ReportError):
    """One or more image uploads failed; `errors` holds every item failure."""

    stage = "upload"

    def __init__(self, message: str, errors: Optional[List[ReportError]] = None) -> None:
        super().__init__(message)
        self.errors: List[ReportError] = list(errors or [])


class SessionCreationError(ReportError):
    stage = "session"


class MessageAppendError(ReportError):
    stage = "append_message"


class RunCreationError(ReportError):
    stage = "start_run"


class RunStatusError(ReportError):
    stage = "poll"


class RunFailedError(ReportError):
    """The run reached a terminal state other than completed."""

    stage = "poll"

    def __init__(self, status: str) -> None:
        super().__init__(f"Run failed with status: {status}")
        self.status = status


class ResultFetchError(ReportError):
    stage = "collect"
