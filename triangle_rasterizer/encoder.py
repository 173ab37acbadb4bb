#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/encoder.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
from pathlib import Path
from typing import Union

from .canvas import Canvas
from .errors import EncodeError

logger = logging.getLogger(__name__)


def save_image(canvas: Canvas, filename: Union[str, Path], **pil_kwargs) -> Path:
    """Encode the canvas and write it to filename atomically.

    The image format follows the file extension (.png, .bmp, .ppm, ...).
    Data is written to a temporary file beside the target and renamed into
    place, so a failed save never leaves a partial image behind.

    Raises
    ------
    EncodeError
        If Pillow cannot encode the format or the file cannot be written.
    """
    path = Path(filename)
    image = canvas.to_image()

    # Keep the extension last so Pillow can still detect the format
    tmp_path = path.with_name(path.stem + ".tmp" + path.suffix)
    try:
        image.save(tmp_path, **pil_kwargs)
        tmp_path.replace(path)
    except (OSError, ValueError, KeyError) as e:
        if tmp_path.exists():
            tmp_path.unlink()
        raise EncodeError(f"Failed to save image {path}: {e}") from e

    logger.info("Wrote %dx%d image to %s", canvas.w, canvas.h, path)
    return path
