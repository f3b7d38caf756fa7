"""Core data models for skillplant."""

from .entities import AgentConfig, InstallResult, Skill

__all__ = [
    "AgentConfig",
    "InstallResult",
    "Skill",
]
