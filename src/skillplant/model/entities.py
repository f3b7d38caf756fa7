"""Skill, agent and install-result records."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillplant.types import JsonObject


@dataclass(frozen=True)
class Skill:
    """A directory bundle of files to install into an agent's skills folder."""

    path: Path
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class AgentConfig:
    """Where one agent keeps its project-local and global skills."""

    name: str
    display_name: str
    skills_dir: Path
    global_skills_dir: Path

    @property
    def resolved_global_skills_dir(self) -> Path:
        """Global skills directory with ``~`` expanded."""
        return self.global_skills_dir.expanduser()


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a single install; failures are reported here, not raised."""

    success: bool
    path: Path
    error: str | None = None

    def to_dict(self) -> JsonObject:
        payload: JsonObject = {"success": self.success, "path": str(self.path)}
        if self.error is not None:
            payload["error"] = self.error
        return payload
