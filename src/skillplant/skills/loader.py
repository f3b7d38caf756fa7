"""Build :class:`Skill` records from source directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from skillplant.constants.discovery import (
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
    SKILL_MARKDOWN_FILENAME,
)
from skillplant.exceptions import SkillSourceError
from skillplant.model import Skill
from skillplant.types import StrPath

logger = logging.getLogger(__name__)


def load_skill(path: StrPath, *, name: str | None = None) -> Skill:
    """Describe the skill stored in directory *path*.

    An explicit *name* wins over the ``name`` declared in ``SKILL.md``
    frontmatter. With neither, ``Skill.name`` is ``None`` and installers
    fall back to the directory name.
    """
    source = Path(path)
    if not source.is_dir():
        raise SkillSourceError(f"Skill source is not a directory: {source}")

    frontmatter = read_skill_frontmatter(source / SKILL_MARKDOWN_FILENAME)
    declared_name = _string_field(frontmatter, "name")
    return Skill(
        path=source,
        name=name or declared_name,
        description=_string_field(frontmatter, "description"),
    )


def read_skill_frontmatter(path: Path) -> dict[str, Any]:
    """Return the YAML frontmatter mapping of a SKILL.md file.

    Returns an empty mapping when the file is missing, has no frontmatter,
    or cannot be read or parsed; the latter two log a warning.
    """
    if not path.is_file():
        return {}

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return {}

    lines = text.lstrip("\ufeff").splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return {}

    end = next(
        (
            index
            for index, line in enumerate(lines[1:], start=1)
            if line.strip() in (FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER)
        ),
        None,
    )
    if end is None:
        logger.warning("Unterminated frontmatter block in %s", path)
        return {}

    try:
        payload = yaml.safe_load("\n".join(lines[1:end]))
    except yaml.YAMLError as exc:
        logger.warning("Malformed YAML frontmatter in %s: %s", path, exc)
        return {}

    if not isinstance(payload, dict):
        return {}
    return payload


def _string_field(frontmatter: dict[str, Any], key: str) -> str | None:
    value = frontmatter.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
