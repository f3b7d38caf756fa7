"""Configuration loading for skillplant.

Re-exports the public names so callers can ``from skillplant.config import ...``.
"""

from __future__ import annotations

from skillplant.config.loader import load_config
from skillplant.config.model import SkillplantConfig

__all__ = ["SkillplantConfig", "load_config"]
