"""Name and path helpers."""

from .naming import sanitize_name
from .paths import is_path_safe

__all__ = ["is_path_safe", "sanitize_name"]
