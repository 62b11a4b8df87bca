from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_PATH


class StrEnum(str, Enum):
    """
    Enum that serializes to its value.

    Keeps enum members printable and comparable to plain strings.
    """

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class EntryKind(StrEnum):
    DIRECTORY = "directory"
    OTHER = "other"


class ListingOptions(BaseModel):
    """
    Flags that shape a listing run.

    human_readable only changes output together with long_format.
    """

    model_config = ConfigDict(frozen=True)

    show_hidden: bool = False
    long_format: bool = False
    human_readable: bool = False


class ListingRequest(BaseModel):
    """
    Resolved target paths plus listing options.

    Paths keep the order and spelling given on the command line.
    """

    model_config = ConfigDict(frozen=True)

    paths: tuple[str, ...]
    options: ListingOptions = Field(default_factory=ListingOptions)

    @field_validator("paths")
    @classmethod
    def _require_paths(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one path is required")
        return value

    @classmethod
    def from_paths(
        cls,
        paths: Sequence[str] | None,
        options: ListingOptions | None = None,
    ) -> "ListingRequest":
        """
        Build a request, defaulting to the current directory.

        An empty or missing path list becomes a single ".".
        """
        resolved = tuple(paths) if paths else (DEFAULT_PATH,)
        return cls(paths=resolved, options=options or ListingOptions())


class DirEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    display_name: str


class EntryMetadata(BaseModel):
    """
    Successful metadata lookup for one entry.

    modified_time is collected but not rendered yet.
    """

    model_config = ConfigDict(frozen=True)

    mode_bits: int
    size_bytes: int
    modified_time: datetime
    kind: EntryKind


class MetadataUnavailable(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    reason: str


MetadataResult = Union[EntryMetadata, MetadataUnavailable]

