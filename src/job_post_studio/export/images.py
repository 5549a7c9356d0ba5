"""Turn the base64 images returned by the service into files."""

from __future__ import annotations

import base64
import binascii
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def decode_image(b64_data: str) -> bytes:
    """Decode one base64 image, accepting an optional ``data:`` URL prefix.

    Raises:
        ValueError: the string is not valid base64.
    """
    if b64_data.startswith("data:") and "," in b64_data:
        b64_data = b64_data.split(",", 1)[1]
    try:
        return base64.b64decode(b64_data, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 image data: {e}") from e


def image_filename(index: int, prefix: str = "generated_image") -> str:
    """File name for the image at zero-based ``index``."""
    return f"{prefix}_{index + 1}.png"


def data_url(b64_data: str, content_type: str = "image/png") -> str:
    return f"data:{content_type};base64,{b64_data}"


def save_images(images: list[str], out_dir: str | Path) -> list[Path]:
    """Write every image to ``out_dir`` and return the written paths."""
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    paths = []
    for i, b64_data in enumerate(images):
        path = out / image_filename(i)
        path.write_bytes(decode_image(b64_data))
        paths.append(path)
    logger.info("Saved %d images to %s", len(paths), out)
    return paths
