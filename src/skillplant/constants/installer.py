"""Constants for copying skill directories into agent skill folders."""

from __future__ import annotations

EXCLUDED_FILENAMES: frozenset[str] = frozenset({"README.md", "metadata.json"})
# Templates and section definitions.
EXCLUDED_NAME_PREFIX: str = "_"

PATH_TRAVERSAL_MESSAGE: str = "Invalid skill name: potential path traversal detected"
UNKNOWN_ERROR_MESSAGE: str = "Unknown error"
