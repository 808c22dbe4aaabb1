"""HTTP surface for the skills index."""

from .app import create_app

__all__ = ["create_app"]
