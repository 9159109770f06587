"""Pydantic model support for bitfilament."""

from __future__ import annotations

from .base import FilamentModel, decode_model

__all__ = [
    "FilamentModel",
    "decode_model",
]
