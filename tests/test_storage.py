from __future__ import annotations

import os
import stat

import pytest
from PIL import Image

from qricon.storage import save_image


@pytest.fixture
def umask_022():
    previous = os.umask(0o022)
    yield
    os.umask(previous)


def test_saved_image_follows_umask(tmp_path, umask_022):
    output = save_image(Image.new("RGB", (4, 4), "white"), tmp_path / "qr.png")

    assert stat.S_IMODE(output.stat().st_mode) == 0o644


def test_replacing_output_keeps_umask_mode(tmp_path, umask_022):
    output = tmp_path / "qr.png"
    output.write_bytes(b"previous")
    output.chmod(0o600)

    save_image(Image.new("RGB", (4, 4), "black"), output)

    assert stat.S_IMODE(output.stat().st_mode) == 0o644
    with Image.open(output) as image:
        assert image.size == (4, 4)


def test_save_leaves_no_temporary_files(tmp_path):
    save_image(Image.new("RGB", (4, 4), "white"), tmp_path / "qr.png")

    assert [p.name for p in tmp_path.iterdir()] == ["qr.png"]
