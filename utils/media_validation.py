"""Validation and decoding helpers for base64 image payloads."""

import base64
import binascii
import time

from models.errors import DecodeError
from models.report_models import JPEG_MIME_TYPE, DecodedImage
from utils.result import Err, Ok, Result


def build_image_filename(index: int = 0) -> str:
    """Return a time-derived filename that stays unique within one batch."""
    return f"image_{time.time_ns()}_{index}.jpg"


def decode_image(raw_base64: str, *, index: int = 0) -> Result[DecodedImage, DecodeError]:
    """Decode a base64 image into an uploadable JPEG payload.

    Args:
        raw_base64: Base64-encoded image data (surrounding whitespace is ignored).
        index: Position of the image in its batch, used in the filename.

    Returns:
        `Ok(DecodedImage)` or `Err(DecodeError)` when the input is not valid
        base64 or decodes to nothing.
    """
    if not isinstance(raw_base64, str):
        return Err(DecodeError(f"Image {index} must be a base64 string."))

    try:
        payload = base64.b64decode(raw_base64.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        return Err(DecodeError(f"Image {index} is not valid base64: {exc}"))

    if not payload:
        return Err(DecodeError(f"Image {index} is empty."))

    return Ok(DecodedImage(payload=payload, mime_type=JPEG_MIME_TYPE, filename=build_image_filename(index)))
