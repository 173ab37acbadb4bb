#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
from concurrent.futures import ThreadPoolExecutor

from .canvas import Canvas
from .geometry import BoundingBox
from .triangle import Triangle

logger = logging.getLogger(__name__)


def _fill_columns(canvas: Canvas, triangle: Triangle, x_start, x_end, y_start, y_end):
    """Write every pixel of the column band [x_start, x_end) x [y_start, y_end)."""
    count = 0
    for x in range(x_start, x_end):
        for y in range(y_start, y_end):
            canvas.set_pixel(x, y, triangle.color_at((x, y)))
            count += 1
    return count


def _column_bands(box: BoundingBox, workers: int):
    """
    Split the box's x range into at most `workers` disjoint half-open bands.
    Bands differ in width by at most one column.
    """
    n = min(workers, box.width)
    base, extra = divmod(box.width, n)
    bands = []
    start = box.x0
    for i in range(n):
        end = start + base + (1 if i < extra else 0)
        bands.append((start, end))
        start = end
    return bands


def fill_triangle(canvas: Canvas, triangle: Triangle, workers: int = 1) -> int:
    """
    Paints the triangle onto an existing canvas.

    Every pixel of the triangle's bounding box (clamped to the canvas) is set
    to triangle.color_at(); pixels outside the box are not touched.
    Returns the number of pixels visited.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    if triangle.is_degenerate():
        logger.warning("Degenerate triangle %r covers no pixels; "
                       "bounding box is filled with the background", triangle)

    box = triangle.bounding_box().clamp(canvas.w, canvas.h)
    if box is None:
        logger.debug("Bounding box of %r lies outside the %dx%d canvas",
                     triangle, canvas.w, canvas.h)
        return 0
    logger.debug("Rasterizing %r over %r", triangle, box)

    y_start, y_end = box.y0, box.y1 + 1
    if workers == 1 or box.width == 1:
        return _fill_columns(canvas, triangle, box.x0, box.x1 + 1, y_start, y_end)

    # Each band owns disjoint columns, so no locking is needed on the buffer
    bands = _column_bands(box, workers)
    logger.debug("Splitting %d columns into %d bands", box.width, len(bands))
    with ThreadPoolExecutor(max_workers=len(bands)) as executor:
        futures = [executor.submit(_fill_columns, canvas, triangle,
                                   x_start, x_end, y_start, y_end)
                   for x_start, x_end in bands]
        return sum(f.result() for f in futures)


def rasterize(triangle: Triangle, width: int, height: int, workers: int = 1) -> Canvas:
    """
    Rasterizes a single triangle into a fresh width x height canvas.

    Vertices are expected inside [0, width) x [0, height); the bounding box is
    clamped to the canvas regardless. Pixels not covered by the triangle keep
    the background color.
    """
    canvas = Canvas(width, height)
    visited = fill_triangle(canvas, triangle, workers=workers)
    logger.info("Rasterized triangle on %dx%d canvas (%d pixels visited)",
                width, height, visited)
    return canvas
