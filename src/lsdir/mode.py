from __future__ import annotations

from .types import EntryKind

_TYPE_MASK = 0o170000
_DIRECTORY_TYPE = 0o040000

_PERMISSION_BITS = (
    (0o400, "r"),
    (0o200, "w"),
    (0o100, "x"),
    (0o040, "r"),
    (0o020, "w"),
    (0o010, "x"),
    (0o004, "r"),
    (0o002, "w"),
    (0o001, "x"),
)


def entry_kind(bits: int) -> EntryKind:
    """
    Classify mode bits as a directory or anything else.

    Symlinks, devices and fifos all land in OTHER.
    """
    if bits & _TYPE_MASK == _DIRECTORY_TYPE:
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def format_mode(bits: int) -> str:
    """
    Render mode bits as a 10-character string like "drwxr-xr-x".

    Setuid, setgid and sticky bits are not shown.
    """
    type_char = "d" if entry_kind(bits) is EntryKind.DIRECTORY else "-"
    perms = "".join(char if bits & mask else "-" for mask, char in _PERMISSION_BITS)
    return type_char + perms
