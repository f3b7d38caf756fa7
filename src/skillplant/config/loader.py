"""Config loading and normalization for skillplant."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillplant.config.model import SkillplantConfig
from skillplant.constants.config import (
    ALLOWED_AGENT_KEYS,
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    REQUIRED_AGENT_KEYS,
)
from skillplant.exceptions import ConfigError
from skillplant.model import AgentConfig


def load_config(root: Path, config_path: Path | None = None) -> SkillplantConfig:
    """Load and validate config from ``skillplant.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillplantConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(set(raw) - ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(map(str, unknown))}")

    agents_raw = raw.get("agents", {})
    if agents_raw is None:
        agents_raw = {}
    if not isinstance(agents_raw, dict):
        raise ConfigError("agents must be a mapping")

    return SkillplantConfig(
        agents=tuple(_build_agent(name, value) for name, value in sorted(agents_raw.items(), key=lambda i: str(i[0])))
    )


def _build_agent(name: Any, raw: Any) -> AgentConfig:
    """Build an AgentConfig from one entry of the ``agents`` mapping."""
    if not isinstance(name, str) or not name.strip():
        raise ConfigError(f"agent names must be non-empty strings, got {name!r}")
    if not isinstance(raw, dict):
        raise ConfigError(f"agents.{name} must be a mapping")

    unknown = sorted(set(raw) - ALLOWED_AGENT_KEYS)
    if unknown:
        raise ConfigError(f"agents.{name} has unknown key(s): {', '.join(map(str, unknown))}")

    for key in REQUIRED_AGENT_KEYS:
        if key not in raw:
            raise ConfigError(f"agents.{name}.{key} is required")

    return AgentConfig(
        name=name,
        display_name=_ensure_string(raw.get("display_name", name), f"agents.{name}.display_name"),
        skills_dir=Path(_ensure_string(raw["skills_dir"], f"agents.{name}.skills_dir")),
        global_skills_dir=Path(_ensure_string(raw["global_skills_dir"], f"agents.{name}.global_skills_dir")),
    )


def _ensure_string(value: Any, key_name: str) -> str:
    """Return *value* if it is a non-empty string, raising ConfigError otherwise."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()
