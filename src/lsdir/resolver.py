from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from .constants import HIDDEN_PREFIX, PSEUDO_ENTRIES
from .exceptions import DirectoryReadError
from .sorting import sort_names
from .types import DirEntry, ListingOptions

logger = logging.getLogger(__name__)


def _os_reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def display_name(name: str) -> str:
    """
    Make a filesystem name safe to print.

    Undecodable bytes become U+FFFD; the real name stays in the entry path.
    """
    return os.fsencode(name).decode("utf-8", errors="replace")


def list_directory(path: str, options: ListingOptions) -> list[str]:
    """
    Collect the names to show for a directory, unsorted.

    Applies the hidden-name rule and adds "." and ".." when hidden entries
    are shown. Raises DirectoryReadError if the directory cannot be opened.
    """
    names: list[str] = list(PSEUDO_ENTRIES) if options.show_hidden else []
    try:
        iterator = os.scandir(path)
    except OSError as exc:
        raise DirectoryReadError(path, _os_reason(exc)) from exc

    with iterator:
        while True:
            try:
                child = next(iterator)
            except StopIteration:
                break
            except OSError as exc:
                # A failed read closes the iterator, so the next call stops.
                logger.debug("Skipping unreadable entry in %s: %s", path, exc)
                continue
            if not options.show_hidden and child.name.startswith(HIDDEN_PREFIX):
                continue
            names.append(child.name)
    return names


def resolve_entries(
    path: str,
    options: ListingOptions,
    *,
    stderr: TextIO | None = None,
) -> list[DirEntry]:
    """
    Turn one requested path into the entries to render, in display order.

    Directories are enumerated and sorted; anything else, including a path
    that does not exist, becomes a single entry named by the path as given.
    An unreadable directory is reported to stderr and yields no entries.
    """
    if not os.path.isdir(path):
        return [DirEntry(path=path, display_name=display_name(path))]

    try:
        names = list_directory(path, options)
    except DirectoryReadError as exc:
        logger.warning("Cannot list %s: %s", exc.path, exc.reason)
        print(exc, file=stderr or sys.stderr)
        return []

    entries: list[DirEntry] = []
    for name in sort_names(names):
        entry_path = path if name in PSEUDO_ENTRIES else os.path.join(path, name)
        entries.append(DirEntry(path=entry_path, display_name=display_name(name)))
    logger.debug("Resolved %d entries in %s", len(entries), path)
    return entries
