"""Patterns and limits for skill directory names."""

from __future__ import annotations

import re

UNSAFE_NAME_CHARS_PATTERN: re.Pattern[str] = re.compile(r"[/\\:\x00]")
EDGE_DOTS_AND_SPACE_PATTERN: re.Pattern[str] = re.compile(r"^[.\s\ufeff]+|[.\s\ufeff]+$")
LEADING_DOTS_PATTERN: re.Pattern[str] = re.compile(r"^\.+")

SKILL_NAME_FALLBACK: str = "unnamed-skill"
MAX_SKILL_NAME_LENGTH: int = 255
