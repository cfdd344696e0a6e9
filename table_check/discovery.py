"""Locate component files under a root directory.

Usage:
    found = find_files("/workspace")                 # Discovery(files, skipped)
    found = find_files(root, extensions=(".vue",), exclude_dirs={"dist"})
"""

import os
from dataclasses import dataclass, field

DEFAULT_EXTENSIONS   = (".vue",)
DEFAULT_EXCLUDE_DIRS = ("node_modules", ".git", ".idea", "dist")


@dataclass
class Discovery:
    files: list[str] = field(default_factory=list)
    # Directories that could not be listed; they are skipped, not fatal.
    skipped: list[str] = field(default_factory=list)


def find_files(
    root: str,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    exclude_dirs: tuple[str, ...] | set[str] = DEFAULT_EXCLUDE_DIRS,
) -> Discovery:
    """Recursively collect files ending in one of *extensions*.

    Entries are visited in sorted order within each directory so repeated runs
    on the same tree list files identically.
    """
    found = Discovery()
    _walk(root, tuple(extensions), set(exclude_dirs), found)
    return found


def _walk(directory: str, extensions: tuple[str, ...], exclude: set[str], found: Discovery) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        found.skipped.append(directory)
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir()
        except OSError:
            found.skipped.append(entry.path)
            continue
        if is_dir:
            if entry.name not in exclude:
                _walk(entry.path, extensions, exclude, found)
        elif entry.name.endswith(extensions):
            found.files.append(entry.path)
