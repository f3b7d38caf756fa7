"""Skill name sanitization."""

from __future__ import annotations

from skillplant.constants.naming import (
    EDGE_DOTS_AND_SPACE_PATTERN,
    LEADING_DOTS_PATTERN,
    MAX_SKILL_NAME_LENGTH,
    SKILL_NAME_FALLBACK,
    UNSAFE_NAME_CHARS_PATTERN,
)


def sanitize_name(name: str) -> str:
    """Reduce an untrusted skill name to a single safe path segment.

    Separators, drive colons and NUL bytes are removed, then leading and
    trailing dots and whitespace, then any dots still leading the name.
    The result is never empty, never starts with ``.`` and is at most
    ``MAX_SKILL_NAME_LENGTH`` characters long.

    This only shapes the segment. Callers must still check the joined
    path with :func:`skillplant.utils.paths.is_path_safe`.
    """
    sanitized = UNSAFE_NAME_CHARS_PATTERN.sub("", name)
    sanitized = EDGE_DOTS_AND_SPACE_PATTERN.sub("", sanitized)
    sanitized = LEADING_DOTS_PATTERN.sub("", sanitized)
    if not sanitized:
        sanitized = SKILL_NAME_FALLBACK
    return sanitized[:MAX_SKILL_NAME_LENGTH]
