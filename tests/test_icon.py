from __future__ import annotations

import pytest
from PIL import Image

from qricon.icon import fit_size, load_icon, prepare_icon
from qricon.services.errors import ServiceError


def test_square_icon_is_resized_to_bound(solid_icon):
    icon = prepare_icon(solid_icon, 50)

    assert icon.size == (50, 50)
    assert icon.mode == "RGB"


def test_aspect_ratio_is_preserved():
    icon = prepare_icon(Image.new("RGB", (200, 100), "blue"), 50)

    assert icon.size == (50, 25)


@pytest.mark.parametrize("max_size", [1, 2, 7, 40, 80, 333])
@pytest.mark.parametrize("source", [(1, 1), (10, 10), (100, 100), (640, 480), (3, 900), (1000, 1)])
def test_prepared_icon_never_exceeds_bound(source, max_size):
    width, height = fit_size(*source, max_size)

    assert 1 <= width <= max_size
    assert 1 <= height <= max_size
    assert max(width, height) == max_size


def test_transparent_pixels_become_white():
    source = Image.new("RGBA", (40, 20), (0, 0, 0, 0))
    source.paste((255, 0, 0, 255), (0, 0, 20, 20))

    icon = prepare_icon(source, 20)

    assert icon.mode == "RGB"
    assert icon.size == (20, 10)
    assert icon.getpixel((0, 5)) == (255, 0, 0)
    assert icon.getpixel((19, 5)) == (255, 255, 255)


def test_palette_icon_is_converted_to_rgb():
    source = Image.new("P", (30, 30), 3)

    assert prepare_icon(source, 15).mode == "RGB"


def test_zero_bound_is_rejected(solid_icon):
    with pytest.raises(ServiceError) as excinfo:
        prepare_icon(solid_icon, 0)

    assert excinfo.value.code == "ERR_INVALID_DIMENSION"


def test_load_missing_icon(tmp_path):
    with pytest.raises(ServiceError) as excinfo:
        load_icon(tmp_path / "missing.png")

    assert excinfo.value.code == "ERR_FILE_NOT_FOUND"


def test_load_undecodable_icon(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not an image")

    with pytest.raises(ServiceError) as excinfo:
        load_icon(path)

    assert excinfo.value.code == "ERR_ICON_LOAD"


def test_load_icon_survives_file_close(icon_path):
    icon = load_icon(icon_path)

    assert icon.size == (100, 100)
    assert prepare_icon(icon, 10).size == (10, 10)
