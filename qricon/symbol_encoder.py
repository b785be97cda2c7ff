"""QR symbol encoder backed by the ``qrcode`` library."""
from __future__ import annotations

import logging

import qrcode
from qrcode.exceptions import DataOverflowError

from .models import ModuleMatrix
from .services.errors import err_encoding

logger = logging.getLogger("qricon.encoder")

ERROR_CORRECTION = qrcode.constants.ERROR_CORRECT_M


def encode_payload(payload: str) -> ModuleMatrix:
    """Encode ``payload`` into a module matrix without a quiet zone."""

    qr = qrcode.QRCode(version=None, error_correction=ERROR_CORRECTION, border=0)
    qr.add_data(payload)
    try:
        qr.make(fit=True)
    except DataOverflowError as exc:
        raise err_encoding(f"Payload of {len(payload)} characters exceeds QR capacity") from exc
    except ValueError as exc:
        raise err_encoding(str(exc)) from exc

    matrix = ModuleMatrix.from_rows(qr.get_matrix())
    logger.debug("payload encoded", extra={"version": qr.version, "modules": matrix.size})
    return matrix
