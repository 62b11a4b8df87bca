from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

from .mode import entry_kind
from .types import EntryMetadata, MetadataResult, MetadataUnavailable

logger = logging.getLogger(__name__)


def fetch_metadata(path: str) -> MetadataResult:
    """
    Stat a path without raising.

    Returns EntryMetadata on success and MetadataUnavailable otherwise
    (broken symlink, permission denied, invalid path).
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        logger.debug("Metadata unavailable for %s: %s", path, reason)
        return MetadataUnavailable(path=path, reason=reason)
    return EntryMetadata(
        mode_bits=st.st_mode,
        size_bytes=st.st_size,
        modified_time=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        kind=entry_kind(st.st_mode),
    )
