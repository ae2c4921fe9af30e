"""Build the ordered content blocks of the report request message."""

from typing import List, Sequence

from models.report_models import ContentBlock, ImageBlock, TextBlock, UploadedImageRef


def assemble_content(image_refs: Sequence[UploadedImageRef], text: str) -> List[ContentBlock]:
    """Return one image block per reference, in order, followed by a single text block."""
    blocks: List[ContentBlock] = [ImageBlock(remote_file_id=ref.remote_file_id) for ref in image_refs]
    blocks.append(TextBlock(value=text))
    return blocks
