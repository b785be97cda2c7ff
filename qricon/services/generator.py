"""QR rendering pipeline: encode, rasterize, fit icon, composite, save."""
from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from ..compositor import composite, place_icon
from ..config import settings
from ..icon import load_icon, prepare_icon
from ..models import Placement
from ..renderer import rasterize
from ..schemas import RenderParameters
from ..storage import save_image
from ..symbol_encoder import encode_payload
from .errors import ServiceError

logger = logging.getLogger("qricon.generator")


@dataclass(slots=True)
class RenderResult:
    image: Image.Image
    module_count: int
    module_pixels: int
    canvas_size: int
    icon_size: tuple[int, int]
    placement: Placement


@dataclass(slots=True)
class GenerateResult:
    output_path: Path
    module_count: int
    module_pixels: int
    canvas_size: int
    icon_size: tuple[int, int]
    placement: Placement


class QRIconGenerator:
    def __init__(self, parameters: RenderParameters | None = None):
        self.parameters = parameters or RenderParameters.from_settings(settings)

    def render(self, payload: str, icon_source: Image.Image) -> RenderResult:
        """Build the final image in memory without touching the filesystem."""

        matrix = encode_payload(payload)
        canvas = rasterize(matrix, self.parameters.target_size)
        canvas_size = canvas.width

        icon = prepare_icon(icon_source, self.parameters.icon_bound(canvas_size))
        placement = place_icon(canvas.size, icon.size, self.parameters.margin)
        image = composite(canvas, icon, self.parameters.margin, placement)

        return RenderResult(
            image=image,
            module_count=matrix.size,
            module_pixels=canvas_size // matrix.size,
            canvas_size=canvas_size,
            icon_size=icon.size,
            placement=placement,
        )

    def generate(
        self,
        payload: str,
        icon_path: str | os.PathLike[str],
        output_path: str | os.PathLike[str],
    ) -> GenerateResult:
        """Render ``payload`` with the icon at ``icon_path`` and save it to ``output_path``.

        Nothing is written unless every stage succeeds.
        """

        start = time.perf_counter()
        try:
            icon_source = load_icon(icon_path)
            rendered = self.render(payload, icon_source)
            saved = save_image(rendered.image, output_path)
        except ServiceError as exc:
            logger.warning(
                "pipeline failed",
                extra={"code": exc.code, "icon_path": str(icon_path), "output_path": str(output_path)},
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "pipeline completed",
            extra={
                "output_path": str(saved),
                "modules": rendered.module_count,
                "module_pixels": rendered.module_pixels,
                "canvas_size": rendered.canvas_size,
                "icon_size": rendered.icon_size,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return GenerateResult(
            output_path=saved,
            module_count=rendered.module_count,
            module_pixels=rendered.module_pixels,
            canvas_size=rendered.canvas_size,
            icon_size=rendered.icon_size,
            placement=rendered.placement,
        )
