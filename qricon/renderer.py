"""Rasterize QR module matrices onto a pixel canvas."""
from __future__ import annotations

import logging

from PIL import Image, ImageDraw

from .models import ModuleMatrix
from .services.errors import err_invalid_dimension

logger = logging.getLogger("qricon.renderer")

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def module_pixels(matrix_size: int, target_size: int) -> int:
    """Return the whole number of pixels per module that fits ``target_size``."""

    if matrix_size < 1:
        raise err_invalid_dimension("Module matrix must have at least one module")
    if target_size < matrix_size:
        raise err_invalid_dimension(
            f"Target size {target_size}px is smaller than the {matrix_size} module matrix"
        )
    scale = target_size // matrix_size
    if scale < 1:
        raise err_invalid_dimension(f"Target size {target_size}px leaves no room for a module")
    return scale


def rasterize(matrix: ModuleMatrix, target_size: int) -> Image.Image:
    """Draw ``matrix`` as black and white blocks of identical integer size.

    The canvas side snaps down to ``module_pixels * matrix.size`` so no module
    is ever stretched by a fractional amount.
    """

    scale = module_pixels(matrix.size, target_size)
    actual_size = scale * matrix.size

    canvas = Image.new("RGB", (actual_size, actual_size), WHITE)
    draw = ImageDraw.Draw(canvas)
    for x, y in matrix.dark_cells():
        left = x * scale
        top = y * scale
        right = min(left + scale, actual_size)
        bottom = min(top + scale, actual_size)
        if right > left and bottom > top:
            draw.rectangle([(left, top), (right - 1, bottom - 1)], fill=BLACK)

    logger.debug(
        "matrix rasterized",
        extra={"modules": matrix.size, "module_pixels": scale, "canvas_size": actual_size},
    )
    return canvas
