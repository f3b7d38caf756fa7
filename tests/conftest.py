"""Shared pytest fixtures for installer tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillplant.agents import AgentRegistry
from skillplant.model import AgentConfig


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return an empty project directory used as the install cwd."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def global_root(tmp_path: Path) -> Path:
    """Return the directory standing in for the user's global skills folder."""
    return tmp_path / "home" / ".test-agent" / "skills"


@pytest.fixture
def registry(global_root: Path) -> AgentRegistry:
    """Return a registry with a single agent rooted in temporary directories."""
    return AgentRegistry(
        [
            AgentConfig(
                name="test-agent",
                display_name="Test Agent",
                skills_dir=Path(".test-agent/skills"),
                global_skills_dir=global_root,
            )
        ]
    )


@pytest.fixture
def skill_source(tmp_path: Path) -> Path:
    """Return a skill directory mixing installable and excluded entries."""
    source = tmp_path / "sources" / "notes"
    (source / "sub" / "_draft").mkdir(parents=True)
    (source / "scripts").mkdir()
    (source / "SKILL.md").write_text("---\nname: notes\ndescription: Take notes\n---\n# Notes\n", encoding="utf-8")
    (source / "README.md").write_text("readme", encoding="utf-8")
    (source / "metadata.json").write_text("{}", encoding="utf-8")
    (source / "_template.md").write_text("template", encoding="utf-8")
    (source / "main.py").write_text("print('hi')\n", encoding="utf-8")
    (source / "scripts" / "run.sh").write_text("#!/bin/sh\n", encoding="utf-8")
    (source / "sub" / "README.md").write_text("nested readme", encoding="utf-8")
    (source / "sub" / "keep.txt").write_text("keep", encoding="utf-8")
    (source / "sub" / "_draft" / "x.txt").write_text("draft", encoding="utf-8")
    return source
