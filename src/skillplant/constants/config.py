"""Configuration filenames and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "skillplant.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"agents"})
ALLOWED_AGENT_KEYS: frozenset[str] = frozenset({"display_name", "skills_dir", "global_skills_dir"})
REQUIRED_AGENT_KEYS: tuple[str, ...] = ("skills_dir", "global_skills_dir")
