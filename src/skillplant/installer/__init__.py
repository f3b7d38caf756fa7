"""Install skills into agent skill directories."""

from .core import get_install_path, install_skill_for_agent, is_skill_installed

__all__ = ["get_install_path", "install_skill_for_agent", "is_skill_installed"]
