"""Shared service error definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ServiceError(Exception):
    code: str
    message: str
    exit_code: int = 1

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


def err_invalid_arguments(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_INVALID_ARGUMENTS", message=message or "Invalid command-line arguments")


def err_file_not_found(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_FILE_NOT_FOUND", message=message or "File not found")


def err_icon_load(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_ICON_LOAD", message=message or "Icon could not be decoded")


def err_encoding(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_ENCODING", message=message or "Payload cannot be encoded as a QR symbol")


def err_invalid_dimension(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_INVALID_DIMENSION", message=message or "Invalid image dimension")


def err_icon_too_large(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_ICON_TOO_LARGE", message=message or "Icon does not fit on the canvas")


def err_write(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_WRITE", message=message or "Output image could not be written")
