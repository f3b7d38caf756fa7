"""Root exception type."""

from __future__ import annotations


class SkillplantError(Exception):
    """Base class for all skillplant errors."""
