from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from lsdir.metadata import fetch_metadata
from lsdir.render import human_size, render_line
from lsdir.types import DirEntry, EntryKind, EntryMetadata, ListingOptions, MetadataUnavailable


def _entry(path: Path, name: str | None = None) -> DirEntry:
    return DirEntry(path=str(path), display_name=name or path.name)


def test_short_format_is_the_bare_name(tmp_path: Path) -> None:
    """
    Ensure the default rendering never touches metadata.

    A missing path still renders because nothing is stat'ed.
    """
    entry = _entry(tmp_path / "missing", "missing")
    assert render_line(entry, ListingOptions()) == "missing"


def test_long_format_regular_file(tmp_path: Path) -> None:
    """
    Ensure a 42-byte rw-r--r-- file renders mode, padded size and name.
    """
    target = tmp_path / "data.bin"
    target.write_bytes(b"x" * 42)
    os.chmod(target, 0o644)
    line = render_line(_entry(target), ListingOptions(long_format=True))
    assert line == "-rw-r--r--       42 data.bin"


def test_long_format_directory(tmp_path: Path) -> None:
    """
    Ensure directories get the "d" type character.
    """
    sub = tmp_path / "sub"
    sub.mkdir()
    os.chmod(sub, 0o755)
    line = render_line(_entry(sub), ListingOptions(long_format=True))
    assert line.startswith("drwxr-xr-x ")
    assert line.endswith(" sub")
    assert len(line.split(" ", 1)[0]) == 10


def test_long_format_placeholder_for_broken_symlink(tmp_path: Path) -> None:
    """
    Ensure a failed lookup degrades to question marks in the same columns.
    """
    link = tmp_path / "dangling"
    link.symlink_to(tmp_path / "gone")
    line = render_line(_entry(link), ListingOptions(long_format=True))
    assert line == "?????????? ???????? dangling"


def test_human_readable_is_ignored_without_long_format(tmp_path: Path) -> None:
    """
    Ensure the human-readable flag alone keeps the bare name output.
    """
    target = tmp_path / "big"
    target.write_bytes(b"x" * 2048)
    assert render_line(_entry(target), ListingOptions(human_readable=True)) == "big"


def test_human_readable_scales_size(tmp_path: Path) -> None:
    """
    Ensure sizes are scaled only when the flag is set.
    """
    target = tmp_path / "big"
    target.write_bytes(b"x" * 1536)
    os.chmod(target, 0o600)
    plain = render_line(_entry(target), ListingOptions(long_format=True))
    scaled = render_line(
        _entry(target),
        ListingOptions(long_format=True, human_readable=True),
    )
    assert plain == "-rw-------     1536 big"
    assert scaled == "-rw-------     1.5K big"


def test_human_size_formats_units() -> None:
    """
    Check byte counts and binary unit boundaries.
    """
    assert human_size(0) == "0B"
    assert human_size(512) == "512B"
    assert human_size(1024) == "1.0K"
    assert human_size(1536) == "1.5K"
    assert human_size(234 * 1024 * 1024) == "234.0M"
    assert human_size(2 * 1024**3) == "2.0G"


def test_fetch_metadata_success(tmp_path: Path) -> None:
    """
    Ensure a readable file yields its size, kind and modification time.
    """
    target = tmp_path / "file.txt"
    target.write_text("hello", encoding="utf-8")
    result = fetch_metadata(str(target))
    assert isinstance(result, EntryMetadata)
    assert result.size_bytes == 5
    assert result.kind is EntryKind.OTHER
    assert isinstance(result.modified_time, datetime)
    assert fetch_metadata(str(tmp_path)).kind is EntryKind.DIRECTORY


def test_fetch_metadata_failure_is_a_value(tmp_path: Path) -> None:
    """
    Ensure missing paths and invalid names return a marker instead of raising.
    """
    missing = fetch_metadata(str(tmp_path / "absent"))
    assert isinstance(missing, MetadataUnavailable)
    assert missing.path == str(tmp_path / "absent")
    assert missing.reason

    invalid = fetch_metadata("bad\x00name")
    assert isinstance(invalid, MetadataUnavailable)
