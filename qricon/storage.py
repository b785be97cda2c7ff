"""Image decode and encode helpers built on Pillow."""
from __future__ import annotations

import io
import logging
import os
import tempfile
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .services.errors import err_file_not_found, err_icon_load, err_write

logger = logging.getLogger("qricon.storage")


def load_image(path: str | os.PathLike[str]) -> Image.Image:
    """Decode the image at ``path`` fully into memory."""

    source = Path(path)
    if not source.exists():
        raise err_file_not_found(f"Icon file not found: {source}")
    try:
        with Image.open(source) as opened:
            image = opened.copy()
    except UnidentifiedImageError as exc:
        raise err_icon_load(f"Unrecognized image format: {source}") from exc
    except OSError as exc:
        raise err_icon_load(f"Could not read image {source}: {exc}") from exc
    return image


def format_for_path(path: str | os.PathLike[str]) -> str:
    """Return the Pillow format name registered for the file extension."""

    suffix = Path(path).suffix.lower()
    fmt = Image.registered_extensions().get(suffix)
    if fmt is None or fmt not in Image.SAVE:
        raise err_write(f"Unsupported output format for {path!s}")
    return fmt


def encode_image(image: Image.Image, fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    try:
        image.save(buffer, format=fmt)
    except (OSError, ValueError, KeyError) as exc:
        raise err_write(f"Could not encode image as {fmt}: {exc}") from exc
    return buffer.getvalue()


def _default_file_mode() -> int:
    """Mode a plain ``open(path, "wb")`` would give under the current umask."""

    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def save_image(image: Image.Image, path: str | os.PathLike[str]) -> Path:
    """Encode ``image`` and swap it into ``path`` in one step.

    The file is only replaced once the encoded bytes are fully on disk, so a
    failed save leaves any existing file untouched and creates nothing new.
    """

    target = Path(path)
    data = encode_image(image, format_for_path(target))

    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(data)
        os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, target)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise err_write(f"Could not write {target}: {exc}") from exc

    logger.debug("image saved", extra={"path": str(target), "bytes": len(data)})
    return target
