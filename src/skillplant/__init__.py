"""Path-safe installer for agent skills."""

from __future__ import annotations

from skillplant.installer import get_install_path, install_skill_for_agent, is_skill_installed
from skillplant.model import AgentConfig, InstallResult, Skill
from skillplant.utils import is_path_safe, sanitize_name

__version__ = "0.1.0"

__all__ = [
    "AgentConfig",
    "InstallResult",
    "Skill",
    "__version__",
    "get_install_path",
    "install_skill_for_agent",
    "is_path_safe",
    "is_skill_installed",
    "sanitize_name",
]
