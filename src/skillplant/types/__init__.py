"""Shared type aliases for skillplant."""

from .common import AgentType, JsonObject, JsonScalar, JsonValue, StrPath

__all__ = [
    "AgentType",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "StrPath",
]
