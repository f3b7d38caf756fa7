"""Shared exception hierarchy for skillplant."""

from __future__ import annotations

from .base import SkillplantError
from .config import ConfigError
from .installer import PathTraversalError, SkillSourceError, UnknownAgentError

__all__ = [
    "ConfigError",
    "PathTraversalError",
    "SkillSourceError",
    "SkillplantError",
    "UnknownAgentError",
]
