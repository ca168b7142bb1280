"""Content Namer — content-addressed filenames for submitted images.

Invariants:
    - Only the stem of the final path segment is hashed (directory and extension ignored)
    - Same stem always yields the same filename; case-sensitive
    - Never raises: empty or garbage references hash their (empty/garbage) stem

Design Decisions:
    - SHA-256 hex digest: fixed-size, collision-resistant, filesystem-safe
    - Both "/" and "\\" treated as separators: references come from browser forms
"""

import hashlib
import os

IMAGE_SUFFIX = ".jpg"


def image_stem(original_reference: str) -> str:
    """Final path segment with its last extension stripped."""
    segment = original_reference.replace("\\", "/").rsplit("/", 1)[-1]
    stem, _ext = os.path.splitext(segment)
    return stem


def derive_image_filename(original_reference: str) -> str:
    """Return `<sha256-hex-of-stem>.jpg` for an image reference."""
    digest = hashlib.sha256(image_stem(original_reference).encode("utf-8"))
    return digest.hexdigest() + IMAGE_SUFFIX
