"""Constants for reading skill source directories."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
FRONTMATTER_DELIMITER: str = "---"
FRONTMATTER_ALT_DELIMITER: str = "..."
