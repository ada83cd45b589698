"""Directory size calculation and formatting"""

import os
from pathlib import Path
from typing import Union


def folder_size(path: Union[str, Path]) -> int:
    """Sum the sizes in bytes of all regular files under `path`.

    Symlinks are not followed and special files are ignored. The tree is
    walked with an explicit stack of pending directories, so memory use grows
    with the tree's width rather than its total size.
    """
    path = os.fspath(path)
    if os.path.isfile(path) and not os.path.islink(path):
        return os.stat(path).st_size

    total = 0
    pending = [path]
    while pending:
        current = pending.pop()
        with os.scandir(current) as it:
            for entry in it:
                if entry.is_symlink():
                    continue
                if entry.is_dir(follow_symlinks=False):
                    pending.append(entry.path)
                elif entry.is_file(follow_symlinks=False):
                    total += entry.stat(follow_symlinks=False).st_size

    return total


def format_size(size: int) -> str:
    """Format a byte count as megabytes (1 MB = 1,000,000 bytes)."""
    return f"{size / 1000 / 1000:.2f} MB"
