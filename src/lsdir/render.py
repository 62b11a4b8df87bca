from __future__ import annotations

from .constants import MODE_PLACEHOLDER, SIZE_PLACEHOLDER, SIZE_WIDTH
from .metadata import fetch_metadata
from .mode import format_mode
from .types import DirEntry, ListingOptions, MetadataUnavailable


def human_size(value: int) -> str:
    """
    Format byte size as a human-readable string.

    Uses binary units with one decimal for non-bytes and keeps bytes as integers.
    """
    units = ["B", "K", "M", "G", "T"]
    size = float(value)
    unit = 0
    while size >= 1024 and unit < len(units) - 1:
        size /= 1024
        unit += 1
    return f"{size:.1f}{units[unit]}" if unit else f"{int(size)}B"


def format_size(size: int, options: ListingOptions) -> str:
    if options.human_readable:
        return human_size(size)
    return str(size)


def render_line(entry: DirEntry, options: ListingOptions) -> str:
    """
    Render one output line for an entry.

    Long format prefixes the mode string and a width-8 size column; when the
    entry cannot be stat'ed both columns are filled with "?" instead.
    Modification time is looked up but not shown.
    """
    if not options.long_format:
        return entry.display_name

    result = fetch_metadata(entry.path)
    if isinstance(result, MetadataUnavailable):
        return f"{MODE_PLACEHOLDER} {SIZE_PLACEHOLDER} {entry.display_name}"
    size = format_size(result.size_bytes, options)
    return f"{format_mode(result.mode_bits)} {size:>{SIZE_WIDTH}} {entry.display_name}"
