from __future__ import annotations

from collections.abc import Iterable


def sort_names(names: Iterable[str]) -> list[str]:
    """
    Order names case-insensitively.

    Names equal after lowercasing keep their input order.
    """
    return sorted(names, key=str.lower)
