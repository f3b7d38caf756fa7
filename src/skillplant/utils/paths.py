"""Containment checks for composed filesystem paths."""

from __future__ import annotations

import os
from pathlib import PurePath

from skillplant.types import StrPath


def is_path_safe(base_path: StrPath, target_path: StrPath) -> bool:
    """Return True if *target_path* is *base_path* or lies inside it.

    Both sides are canonicalized lexically first (made absolute, ``.``/``..``
    and repeated separators collapsed) so a target assembled by joining onto
    the base is judged by the path it spells out. Symlinks are not followed.
    """
    base = PurePath(os.path.normpath(os.path.abspath(base_path)))
    target = PurePath(os.path.normpath(os.path.abspath(target_path)))
    return target == base or target.is_relative_to(base)
