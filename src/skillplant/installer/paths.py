"""Resolution of install base and target directories."""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

from skillplant.agents import AgentRegistry, default_registry
from skillplant.types import AgentType, StrPath
from skillplant.utils import sanitize_name


class InstallTarget(NamedTuple):
    """Base directory for an agent and the skill directory composed under it."""

    base: Path
    target: Path


def resolve_install_target(
    skill_name: str,
    agent_type: AgentType,
    *,
    global_install: bool = False,
    cwd: StrPath | None = None,
    registry: AgentRegistry | None = None,
) -> InstallTarget:
    """Sanitize *skill_name* and join it onto the agent's skills directory.

    The returned target has not been checked for containment. Raises
    :class:`UnknownAgentError` when *agent_type* is not registered.
    """
    agent = (registry or default_registry()).get(agent_type)
    if global_install:
        base = agent.resolved_global_skills_dir
    else:
        base = Path(cwd or Path.cwd()) / agent.skills_dir
    return InstallTarget(base=base, target=base / sanitize_name(skill_name))
