"""Centre an icon over a rasterized QR canvas behind a white safe area."""
from __future__ import annotations

import logging

from PIL import Image, ImageDraw

from .models import Placement, SafeArea
from .services.errors import err_icon_too_large, err_invalid_dimension

logger = logging.getLogger("qricon.compositor")

SAFE_AREA_FILL = (255, 255, 255)


def place_icon(canvas_size: tuple[int, int], icon_size: tuple[int, int], margin: int) -> Placement:
    """Compute the icon offset and the clipped safe area around it.

    The icon is centred with floor division, so odd remainders leave the
    extra pixel on the right and bottom. The safe area is a square of side
    ``max(width, height) + 2 * margin`` centred on the icon; each edge is
    clipped to the canvas on its own.
    """

    canvas_width, canvas_height = canvas_size
    icon_width, icon_height = icon_size
    if margin < 0:
        raise err_invalid_dimension(f"Safe-area margin must not be negative, got {margin}")
    if icon_width > canvas_width or icon_height > canvas_height:
        raise err_icon_too_large(
            f"Icon {icon_width}x{icon_height} does not fit canvas {canvas_width}x{canvas_height}"
        )

    x_offset = (canvas_width - icon_width) // 2
    y_offset = (canvas_height - icon_height) // 2

    inner = max(icon_width, icon_height)
    side = inner + 2 * margin
    left = x_offset - margin - (inner - icon_width) // 2
    top = y_offset - margin - (inner - icon_height) // 2

    safe_area = SafeArea(
        left=max(0, left),
        top=max(0, top),
        right=min(canvas_width, left + side),
        bottom=min(canvas_height, top + side),
        size=side,
    )
    return Placement(x_offset=x_offset, y_offset=y_offset, safe_area=safe_area)


def composite(
    canvas: Image.Image,
    icon: Image.Image,
    margin: int,
    placement: Placement | None = None,
) -> Image.Image:
    """Return a copy of ``canvas`` with ``icon`` pasted opaquely in its centre.

    ``placement`` may be passed when the caller already computed it with
    :func:`place_icon` for the same sizes and margin.
    """

    if placement is None:
        placement = place_icon(canvas.size, icon.size, margin)
    final = canvas.copy()

    area = placement.safe_area
    if not area.is_empty:
        draw = ImageDraw.Draw(final)
        draw.rectangle([(area.left, area.top), (area.right - 1, area.bottom - 1)], fill=SAFE_AREA_FILL)

    final.paste(icon.convert(final.mode), (placement.x_offset, placement.y_offset))

    logger.debug(
        "icon composited",
        extra={
            "x_offset": placement.x_offset,
            "y_offset": placement.y_offset,
            "safe_area": (area.left, area.top, area.right, area.bottom),
        },
    )
    return final
