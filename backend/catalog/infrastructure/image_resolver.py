"""Image Resolver — maps a requested image filename to a file on disk.

Invariants:
    - Only single-segment names ending in ".jpg" are accepted (BadRequestError otherwise)
    - Missing image → default placeholder (image_dir/default.jpg), logged at DEBUG only
    - Missing placeholder → PlaceholderMissingError at resolution time (never masked)
    - Stateless after construction: safe under unlimited concurrency

Design Decisions:
    - Fallback is an explicit branch on is_file(), not an exception path
    - Never writes image bytes; uploads are materialized by an external mechanism
"""

import logging
import os
from pathlib import Path

from catalog.core.content_namer import IMAGE_SUFFIX
from catalog.core.errors import (
    BadRequestError, ErrorContext, PlaceholderMissingError,
)

logger = logging.getLogger(__name__)

DEFAULT_IMAGE = "default.jpg"


class ImageResolver:
    """Resolve image filenames inside a fixed image directory."""

    def __init__(self, image_dir: str | os.PathLike):
        self.image_dir = Path(image_dir)
        self.placeholder = self.image_dir / DEFAULT_IMAGE

    def resolve(self, requested_filename: str) -> Path:
        ctx = ErrorContext(image_filename=requested_filename)
        candidate = self.image_dir / requested_filename
        if not str(candidate).endswith(IMAGE_SUFFIX):
            raise BadRequestError("Image path does not end with .jpg", ctx)
        if Path(requested_filename).name != requested_filename or "\\" in requested_filename:
            raise BadRequestError("Image path must be a plain filename", ctx)

        if candidate.is_file():
            return candidate

        logger.debug(
            f"Image not found: {candidate}",
            extra={"image_filename": requested_filename},
        )
        if not self.placeholder.is_file():
            logger.error(
                f"Default placeholder image missing: {self.placeholder}",
                extra={"image_filename": requested_filename},
            )
            raise PlaceholderMissingError(str(self.placeholder), ctx)
        return self.placeholder
