"""Config data model for skillplant."""

from __future__ import annotations

from dataclasses import dataclass

from skillplant.agents import AgentRegistry, default_registry
from skillplant.model import AgentConfig


@dataclass(frozen=True)
class SkillplantConfig:
    """Resolved installer config."""

    agents: tuple[AgentConfig, ...] = ()

    def registry(self) -> AgentRegistry:
        """Built-in agents with configured agents added or replacing them."""
        return default_registry().with_overrides(self.agents)
