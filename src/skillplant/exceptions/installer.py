"""Installation-related exceptions."""

from __future__ import annotations

from skillplant.exceptions.base import SkillplantError


class PathTraversalError(SkillplantError, ValueError):
    """Raised when a composed install path escapes its base directory."""


class UnknownAgentError(SkillplantError, KeyError):
    """Raised when an agent type is not present in the registry."""

    def __init__(self, agent_type: str) -> None:
        super().__init__(agent_type)
        self.agent_type = agent_type

    def __str__(self) -> str:
        return f"Unknown agent type: {self.agent_type}"


class SkillSourceError(SkillplantError, ValueError):
    """Raised when a skill source path is not a usable directory."""
