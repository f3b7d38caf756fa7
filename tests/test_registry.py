"""Tests for the agent registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillplant.agents import AgentRegistry, default_registry
from skillplant.constants.agents import BUILTIN_AGENTS
from skillplant.exceptions import UnknownAgentError
from skillplant.model import AgentConfig


def test_default_registry_contains_builtin_agents() -> None:
    registry = default_registry()

    assert len(registry) == len(BUILTIN_AGENTS)
    assert "claude-code" in registry
    claude = registry.get("claude-code")
    assert claude.skills_dir == Path(".claude/skills")
    assert claude.resolved_global_skills_dir == Path.home() / ".claude" / "skills"


def test_registry_names_are_sorted() -> None:
    names = default_registry().names()

    assert list(names) == sorted(names)
    assert [agent.name for agent in default_registry()] == list(names)


def test_registry_get_unknown_agent_raises() -> None:
    with pytest.raises(UnknownAgentError) as exc_info:
        default_registry().get("vim")

    assert exc_info.value.agent_type == "vim"
    assert str(exc_info.value) == "Unknown agent type: vim"
    assert isinstance(exc_info.value, KeyError)


def test_with_overrides_adds_and_replaces_without_mutating() -> None:
    base = default_registry()
    custom = AgentConfig(
        name="claude-code",
        display_name="Custom Claude",
        skills_dir=Path("custom/skills"),
        global_skills_dir=Path("/opt/skills"),
    )
    extra = AgentConfig(
        name="my-agent",
        display_name="Mine",
        skills_dir=Path(".mine"),
        global_skills_dir=Path("/opt/mine"),
    )

    merged = base.with_overrides([custom, extra])

    assert merged.get("claude-code").display_name == "Custom Claude"
    assert "my-agent" in merged
    assert "my-agent" not in base
    assert base.get("claude-code").display_name == "Claude Code"


def test_with_overrides_accepts_mapping() -> None:
    agent = AgentConfig(name="x", display_name="X", skills_dir=Path("x"), global_skills_dir=Path("/x"))

    merged = AgentRegistry().with_overrides({"x": agent})

    assert merged.names() == ("x",)
