"""Icon loading and fitting."""
from __future__ import annotations

import logging
import os

from PIL import Image

from .services.errors import err_invalid_dimension
from .storage import load_image

logger = logging.getLogger("qricon.icon")

RESAMPLE = Image.Resampling.LANCZOS
WHITE = (255, 255, 255, 255)


def load_icon(path: str | os.PathLike[str]) -> Image.Image:
    return load_image(path)


def fit_size(width: int, height: int, max_size: int) -> tuple[int, int]:
    """Scale ``(width, height)`` to fit a ``max_size`` square, keeping the aspect ratio."""

    if max_size < 1:
        raise err_invalid_dimension(f"Icon bound must be at least 1px, got {max_size}")
    if width < 1 or height < 1:
        raise err_invalid_dimension(f"Icon has no pixels ({width}x{height})")
    ratio = min(max_size / width, max_size / height)
    new_width = min(max_size, max(1, round(width * ratio)))
    new_height = min(max_size, max(1, round(height * ratio)))
    return new_width, new_height


def _has_alpha(image: Image.Image) -> bool:
    return image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info


def prepare_icon(source: Image.Image, max_size: int) -> Image.Image:
    """Return an opaque RGB copy of ``source`` no larger than ``max_size`` on either side.

    Transparent pixels are flattened onto white, matching the safe area the
    icon is later pasted over.
    """

    size = fit_size(source.width, source.height, max_size)
    working = source.convert("RGBA" if _has_alpha(source) else "RGB")
    icon = working.resize(size, resample=RESAMPLE)
    if icon.mode == "RGBA":
        icon = Image.alpha_composite(Image.new("RGBA", icon.size, WHITE), icon)
    icon = icon.convert("RGB")

    logger.debug("icon prepared", extra={"source_size": source.size, "icon_size": icon.size})
    return icon
