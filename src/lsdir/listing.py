from __future__ import annotations

import logging
import sys
from typing import TextIO

from .render import render_line
from .resolver import display_name, resolve_entries
from .types import ListingRequest

logger = logging.getLogger(__name__)


def run_listing(
    request: ListingRequest,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """
    Print the listing for every requested path in input order.

    Multiple targets get a "<path>:" header each and are separated by one
    blank line. Per-target failures are reported and never stop the run.
    """
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    options = request.options
    multiple = len(request.paths) > 1
    last_index = len(request.paths) - 1

    for index, path in enumerate(request.paths):
        if multiple:
            print(f"{display_name(path)}:", file=out)

        entries = resolve_entries(path, options, stderr=err)
        for entry in entries:
            print(render_line(entry, options), file=out)
        logger.info("Listed %d entries for %s", len(entries), path)

        if index < last_index:
            print(file=out)
