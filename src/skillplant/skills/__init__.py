"""Skill source directory helpers."""

from .loader import load_skill, read_skill_frontmatter

__all__ = ["load_skill", "read_skill_frontmatter"]
