"""Filtered copy of a skill source tree."""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from pathlib import Path

from skillplant.constants.installer import EXCLUDED_FILENAMES, EXCLUDED_NAME_PREFIX

logger = logging.getLogger(__name__)


def is_excluded(name: str) -> bool:
    """Return True for entries that never get installed."""
    return name in EXCLUDED_FILENAMES or name.startswith(EXCLUDED_NAME_PREFIX)


async def copy_skill_tree(src: Path, dest: Path) -> None:
    """Copy *src* into *dest*, skipping excluded names at every depth.

    Directories are walked with an explicit stack, so tree depth is bounded
    only by the filesystem. Regular files overwrite existing copies.
    Symlinks and other special entries are skipped with a warning.
    """
    pending: list[tuple[Path, Path]] = [(src, dest)]
    while pending:
        src_dir, dest_dir = pending.pop()
        await asyncio.to_thread(dest_dir.mkdir, parents=True, exist_ok=True)
        entries = await asyncio.to_thread(_list_entries, src_dir)

        subdirs: list[tuple[Path, Path]] = []
        for entry in entries:
            if is_excluded(entry.name):
                logger.debug("Excluded from install: %s", entry.path)
                continue

            src_path = src_dir / entry.name
            dest_path = dest_dir / entry.name

            if entry.is_dir(follow_symlinks=False):
                subdirs.append((src_path, dest_path))
            elif entry.is_file(follow_symlinks=False):
                await asyncio.to_thread(shutil.copy2, src_path, dest_path)
            else:
                logger.warning("Skipping non-regular file in skill source: %s", src_path)

        pending.extend(reversed(subdirs))


def _list_entries(path: Path) -> list[os.DirEntry[str]]:
    with os.scandir(path) as iterator:
        return sorted(iterator, key=lambda entry: entry.name)
