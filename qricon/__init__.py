"""Render QR codes with a centred icon."""

__version__ = "0.1.0"
