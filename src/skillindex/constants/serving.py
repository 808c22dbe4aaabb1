"""Constants for the HTTP surface."""

from __future__ import annotations

INDEX_ROUTE: str = "/.well-known/skills/index.json"
APP_TITLE: str = "Skills Discovery Index"
INDEX_FAILURE_DETAIL: str = "Failed to build skills index"
