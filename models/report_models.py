"""Domain models for assistant-driven report generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Union

JPEG_MIME_TYPE = "image/jpeg"


class RunStatus(str, Enum):
    """Statuses reported by the remote assistant for a run."""

    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    REQUIRES_ACTION = "requires_action"
    CANCELLING = "cancelling"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    INCOMPLETE = "incomplete"


FAILED_STATUSES: FrozenSet[str] = frozenset(
    {RunStatus.FAILED.value, RunStatus.CANCELLED.value, RunStatus.EXPIRED.value, RunStatus.INCOMPLETE.value}
)
TERMINAL_STATUSES: FrozenSet[str] = FAILED_STATUSES | {RunStatus.COMPLETED.value}


def is_terminal(status: str) -> bool:
    """Return True when no further transition can be observed for the status."""
    return status in TERMINAL_STATUSES


@dataclass(frozen=True)
class Session:
    """Remote conversation thread scoped to a single report request."""

    session_id: str


@dataclass(frozen=True)
class ImageAsset:
    """Caller-supplied image before decoding."""

    raw_base64: str
    mime_type: str = JPEG_MIME_TYPE


@dataclass(frozen=True)
class DecodedImage:
    """Binary image payload ready for upload.

    Attributes:
        payload: Raw image bytes.
        mime_type: MIME type sent with the upload.
        filename: Filename unique within the upload batch.
    """

    payload: bytes
    mime_type: str
    filename: str


@dataclass(frozen=True)
class UploadedImageRef:
    """Reference to an image stored in the remote asset store."""

    remote_file_id: str


@dataclass(frozen=True)
class TextBlock:
    value: str

    def to_payload(self) -> Dict[str, Any]:
        return {"type": "text", "text": self.value}


@dataclass(frozen=True)
class ImageBlock:
    remote_file_id: str

    def to_payload(self) -> Dict[str, Any]:
        return {"type": "image_file", "image_file": {"file_id": self.remote_file_id}}


ContentBlock = Union[TextBlock, ImageBlock]


@dataclass
class RunJob:
    """Handle on one assistant run.

    `status` is only ever replaced by re-reading the remote run.
    """

    session_id: str
    assistant_id: str
    run_id: str
    status: str
