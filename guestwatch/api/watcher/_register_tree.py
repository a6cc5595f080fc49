"""Register every eligible directory below a watch root."""

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from ...constants import HIDDEN_PREFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _DirectoryEntry:
    """A candidate subdirectory found while walking the tree."""

    name: str
    parent: str
    is_symlink: bool

    @property
    def path(self) -> str:
        return os.path.join(self.parent, self.name)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(HIDDEN_PREFIX)


def _list_subdirectories(current: str) -> list[_DirectoryEntry]:
    """Subdirectories of current (symlinks to directories included), sorted by name."""
    entries: list[_DirectoryEntry] = []
    with os.scandir(current) as it:
        for child in it:
            try:
                if not child.is_dir():
                    continue
                is_symlink = child.is_symlink()
            except OSError:
                continue
            entries.append(_DirectoryEntry(name=child.name, parent=current, is_symlink=is_symlink))
    entries.sort(key=lambda e: e.name)
    return entries


def _register_tree(register: Callable[[str], None], root: str) -> int:
    """Register root and its non-hidden, non-symlinked descendants.

    The root is always registered. Listing and registration failures are
    logged and skipped. Hidden and symlinked directories are neither
    registered nor descended into.

    Returns:
        Number of directories registered
    """
    registered = 0
    pending = [root]
    while pending:
        current = pending.pop()

        try:
            register(current)
        except OSError as exc:
            logger.error("error adding %r to watch directories: %s", current, exc)
        else:
            registered += 1
            logger.debug("added %s to watch directories", current)

        try:
            children = _list_subdirectories(current)
        except OSError as exc:
            logger.error("error retrieving dirlist for %r: %s", current, exc)
            continue

        # reversed so the stack pops siblings in name order
        for child in reversed(children):
            if child.is_hidden:
                logger.debug("skipping hidden child directory %r of %r", child.name, current)
                continue
            if child.is_symlink:
                logger.debug("skipping symlink directory %r of %r", child.name, current)
                continue
            pending.append(child.path)

    return registered
