"""Concurrent upload of caller images to the remote asset store."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence, Union

from models.errors import ReportError, UploadError
from models.report_models import DecodedImage, ImageAsset, UploadedImageRef
from services.assistants.gateway import VISION_PURPOSE, AssistantsGateway
from utils.media_validation import decode_image
from utils.result import Err, Ok, Result

ImageInput = Union[str, ImageAsset]


class ImageUploadPipeline:
    """Decode and upload a batch of base64 images.

    Every image is attempted even when a sibling fails; the batch only
    succeeds when all uploads succeed.
    """

    def __init__(
        self,
        gateway: AssistantsGateway,
        *,
        purpose: str = VISION_PURPOSE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.gateway = gateway
        self.purpose = purpose
        self.logger = logger or logging.getLogger(__name__)

    async def upload_images(self, images: Sequence[ImageInput]) -> Result[List[UploadedImageRef], UploadError]:
        """Upload all images concurrently and return their references in input order."""
        if not images:
            return Ok([])

        self.logger.info("Uploading %d images...", len(images))
        results = await self.upload_each(images)

        failures = [result.error for result in results if result.is_err()]
        if failures:
            self.logger.error("Error uploading one or more images (%d of %d failed).", len(failures), len(results))
            error = UploadError("Error uploading one or more images", errors=failures)
            error.__cause__ = failures[0]
            return Err(error)

        self.logger.info("All images uploaded successfully.")
        return Ok([result.value for result in results])

    async def upload_each(self, images: Sequence[ImageInput]) -> List[Result[UploadedImageRef, ReportError]]:
        """Return one result per input image, preserving order."""
        tasks = [self._upload_one(image, index) for index, image in enumerate(images)]
        return list(await asyncio.gather(*tasks))

    async def _upload_one(self, image: ImageInput, index: int) -> Result[UploadedImageRef, ReportError]:
        raw = image.raw_base64 if isinstance(image, ImageAsset) else image
        decoded = decode_image(raw, index=index)
        if decoded.is_err():
            self.logger.error("Error decoding image %d: %s", index, decoded.error)
            return decoded
        return await self._upload_decoded(decoded.value, index)

    async def _upload_decoded(self, image: DecodedImage, index: int) -> Result[UploadedImageRef, ReportError]:
        try:
            file_id = await self.gateway.upload_file(image.payload, image.filename, image.mime_type, self.purpose)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            self.logger.error("Error uploading image %d: %s", index, exc)
            return Err(UploadError(f"Error uploading image: {exc}"))
        self.logger.info("Image uploaded successfully with ID: %s", file_id)
        return Ok(UploadedImageRef(remote_file_id=file_id))

