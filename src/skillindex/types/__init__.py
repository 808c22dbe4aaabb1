"""Shared type aliases for skillindex."""

from .common import JsonObject, JsonScalar, JsonValue, WarningSink

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "WarningSink",
]
