"""Install, probe and locate skills for a given agent.

Every operation sanitizes the skill name and then re-checks the composed
directory against its base before using it. ``install_skill_for_agent`` and
``is_skill_installed`` never raise; ``get_install_path`` raises
:class:`PathTraversalError` because it has no result object to carry a
failure.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from skillplant.agents import AgentRegistry
from skillplant.constants.installer import PATH_TRAVERSAL_MESSAGE, UNKNOWN_ERROR_MESSAGE
from skillplant.exceptions import PathTraversalError, UnknownAgentError
from skillplant.installer.copy import copy_skill_tree
from skillplant.installer.paths import resolve_install_target
from skillplant.model import InstallResult, Skill
from skillplant.types import AgentType, StrPath
from skillplant.utils import is_path_safe

logger = logging.getLogger(__name__)


async def install_skill_for_agent(
    skill: Skill,
    agent_type: AgentType,
    *,
    global_install: bool = False,
    cwd: StrPath | None = None,
    registry: AgentRegistry | None = None,
) -> InstallResult:
    """Copy *skill* into the skills directory of *agent_type*.

    The skill is installed under its sanitized name, falling back to the
    source directory name when ``skill.name`` is empty. All failures are
    returned as an unsuccessful :class:`InstallResult`.
    """
    raw_name = skill.name or Path(skill.path).name
    try:
        base, target_dir = resolve_install_target(
            raw_name,
            agent_type,
            global_install=global_install,
            cwd=cwd,
            registry=registry,
        )
    except UnknownAgentError as exc:
        logger.warning("Install of %r skipped: %s", raw_name, exc)
        return InstallResult(success=False, path=Path(), error=str(exc))

    if not is_path_safe(base, target_dir):
        logger.warning("Rejected install path %s outside %s", target_dir, base)
        return InstallResult(success=False, path=target_dir, error=PATH_TRAVERSAL_MESSAGE)

    try:
        await asyncio.to_thread(target_dir.mkdir, parents=True, exist_ok=True)
        await copy_skill_tree(Path(skill.path), target_dir)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to install %s into %s: %s", skill.path, target_dir, exc)
        return InstallResult(success=False, path=target_dir, error=str(exc) or UNKNOWN_ERROR_MESSAGE)

    logger.info("Installed skill %s for %s at %s", target_dir.name, agent_type, target_dir)
    return InstallResult(success=True, path=target_dir)


async def is_skill_installed(
    skill_name: str,
    agent_type: AgentType,
    *,
    global_install: bool = False,
    cwd: StrPath | None = None,
    registry: AgentRegistry | None = None,
) -> bool:
    """Return whether a skill directory exists for *agent_type*.

    Unsafe names, unknown agents and filesystem errors all report ``False``.
    """
    try:
        base, skill_dir = resolve_install_target(
            skill_name,
            agent_type,
            global_install=global_install,
            cwd=cwd,
            registry=registry,
        )
    except UnknownAgentError:
        return False

    if not is_path_safe(base, skill_dir):
        return False

    try:
        return await asyncio.to_thread(skill_dir.exists)
    except (OSError, ValueError):
        return False


def get_install_path(
    skill_name: str,
    agent_type: AgentType,
    *,
    global_install: bool = False,
    cwd: StrPath | None = None,
    registry: AgentRegistry | None = None,
) -> Path:
    """Return the directory *skill_name* would be installed into.

    Does not touch the filesystem. Raises :class:`PathTraversalError` if the
    composed path escapes the agent's skills directory and
    :class:`UnknownAgentError` for unregistered agents.
    """
    base, install_path = resolve_install_target(
        skill_name,
        agent_type,
        global_install=global_install,
        cwd=cwd,
        registry=registry,
    )
    if not is_path_safe(base, install_path):
        raise PathTraversalError(PATH_TRAVERSAL_MESSAGE)
    return install_path
