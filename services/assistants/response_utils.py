"""Utilities for reading and serializing Assistants API objects."""

from typing import Any


def read_status(run: Any) -> str:
    """Return the status string of a run object or mapping."""
    status = run.get("status") if isinstance(run, dict) else getattr(run, "status", None)
    if status is None:
        raise RuntimeError("Run object did not include a status.")
    return getattr(status, "value", status)


def serialize_response(response: Any) -> Any:
    """Convert a response object into a serializable structure."""
    if hasattr(response, "model_dump"):
        return response.model_dump()
    if hasattr(response, "to_dict"):
        return response.to_dict()
    if isinstance(response, (dict, list, str, int, float, bool)) or response is None:
        return response
    return str(response)
