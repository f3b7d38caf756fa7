"""Configuration-related exceptions."""

from __future__ import annotations

from skillplant.exceptions.base import SkillplantError


class ConfigError(SkillplantError, ValueError):
    """Raised when skillplant configuration is invalid."""
