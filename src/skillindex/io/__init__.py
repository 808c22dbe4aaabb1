"""Index serialization and persistence."""

from .json_io import render_index_json, write_index_atomic

__all__ = ["render_index_json", "write_index_atomic"]
