"""Registry mapping agent types to their skill directories."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from functools import cache
from pathlib import Path

from skillplant.constants.agents import BUILTIN_AGENTS
from skillplant.exceptions import UnknownAgentError
from skillplant.model import AgentConfig
from skillplant.types import AgentType


class AgentRegistry:
    """Read-only lookup of :class:`AgentConfig` by agent type."""

    def __init__(self, agents: Iterable[AgentConfig] = ()) -> None:
        self._agents: dict[AgentType, AgentConfig] = {agent.name: agent for agent in agents}

    def get(self, agent_type: AgentType) -> AgentConfig:
        """Return the config for *agent_type* or raise :class:`UnknownAgentError`."""
        try:
            return self._agents[agent_type]
        except KeyError:
            raise UnknownAgentError(agent_type) from None

    def names(self) -> tuple[AgentType, ...]:
        return tuple(sorted(self._agents))

    def with_overrides(self, agents: Mapping[AgentType, AgentConfig] | Iterable[AgentConfig]) -> AgentRegistry:
        """Return a new registry where *agents* add to or replace existing entries."""
        extra = agents.values() if isinstance(agents, Mapping) else agents
        return AgentRegistry((*self._agents.values(), *extra))

    def __contains__(self, agent_type: object) -> bool:
        return agent_type in self._agents

    def __iter__(self) -> Iterator[AgentConfig]:
        return (self._agents[name] for name in self.names())

    def __len__(self) -> int:
        return len(self._agents)


@cache
def default_registry() -> AgentRegistry:
    """Return the built-in agent registry."""
    return AgentRegistry(
        AgentConfig(
            name=name,
            display_name=display_name,
            skills_dir=Path(skills_dir),
            global_skills_dir=Path(global_skills_dir),
        )
        for name, display_name, skills_dir, global_skills_dir in BUILTIN_AGENTS
    )
