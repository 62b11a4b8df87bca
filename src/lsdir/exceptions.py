from __future__ import annotations


class ListingError(Exception):
    """
    Base error for listing failures.

    Raised by the lower-level helpers; the pipeline itself degrades instead.
    """


class DirectoryReadError(ListingError):
    """
    Raised when a directory cannot be opened for enumeration.

    The string form is the diagnostic line written to stderr.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
