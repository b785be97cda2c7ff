from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from qricon.models import ModuleMatrix

ICON_COLOR = (200, 30, 30)


def _pattern_matrix(size: int) -> ModuleMatrix:
    return ModuleMatrix.from_rows([[(x * 7 + y * 3 + x * y) % 3 == 0 for x in range(size)] for y in range(size)])


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def solid_icon() -> Image.Image:
    return Image.new("RGB", (100, 100), ICON_COLOR)


@pytest.fixture
def icon_path(tmp_path: Path, solid_icon: Image.Image) -> Path:
    path = tmp_path / "icon.png"
    solid_icon.save(path)
    return path


@pytest.fixture
def pattern_matrix() -> Callable[[int], ModuleMatrix]:
    """Build a deterministic, irregular module layout of the given side."""

    return _pattern_matrix
