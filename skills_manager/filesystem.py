"""Thin filesystem queries used by the inventory and link operations."""

import os
import shutil
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    MISSING = "missing"
    SYMLINK = "symlink"
    DIRECTORY = "directory"
    OTHER = "other"


def entry_kind(path: Path) -> EntryKind:
    """Classify ``path`` without following a final symlink component."""
    try:
        if path.is_symlink():
            return EntryKind.SYMLINK
        if not os.path.lexists(path):
            return EntryKind.MISSING
    except OSError:
        return EntryKind.MISSING
    if path.is_dir():
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def path_exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def read_link_target(path: Path) -> str:
    return os.readlink(path)


def list_visible_entries(root: Path) -> list[Path]:
    """Immediate children of ``root`` whose names do not start with a dot.

    A missing or unreadable ``root`` yields an empty list.
    """
    try:
        children = list(root.iterdir())
    except OSError:
        return []
    return [child for child in children if not child.name.startswith(".")]


def list_visible_dirs(root: Path) -> list[Path]:
    return [
        child
        for child in list_visible_entries(root)
        if entry_kind(child) == EntryKind.DIRECTORY
    ]


def copy_tree(source: Path, target: Path) -> None:
    shutil.copytree(source, target, symlinks=False)


def remove_tree(path: Path) -> None:
    shutil.rmtree(path)
