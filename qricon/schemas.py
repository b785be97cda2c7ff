"""Pydantic schemas for render parameters."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt

from .config import Settings


class RenderParameters(BaseModel):
    """Fixed geometry of one pipeline run."""

    model_config = ConfigDict(frozen=True)

    target_size: PositiveInt = Field(default=400, description="Requested canvas side before snapping")
    icon_ratio: PositiveInt = Field(default=5, description="Icon bound is the snapped canvas side divided by this")
    margin: NonNegativeInt = Field(default=5, description="White padding around the icon on each side")

    @classmethod
    def from_settings(cls, config: Settings) -> "RenderParameters":
        return cls(target_size=config.canvas_size, icon_ratio=config.icon_ratio, margin=config.safe_margin)

    def icon_bound(self, canvas_size: int) -> int:
        return canvas_size // self.icon_ratio
