"""Shared utility helpers."""

from __future__ import annotations

from .collation import collation_key

__all__ = ["collation_key"]
