"""
Directory listing with optional permission and size columns.

Exports the listing pipeline pieces for programmatic use.
"""

from __future__ import annotations

__version__ = "0.1.0"

from . import exceptions, types
from .listing import run_listing
from .mode import format_mode
from .render import render_line
from .resolver import resolve_entries
from .sorting import sort_names

__all__ = [
    "__version__",
    "exceptions",
    "format_mode",
    "render_line",
    "resolve_entries",
    "run_listing",
    "sort_names",
    "types",
]
