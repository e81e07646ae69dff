"""Listing snapshots and operation results for the sandbox."""

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, NamedTuple, final


@final
class OperationStatus(enum.IntEnum):
    """Outcome of a mutation operation.

    ``ALREADY_EXISTS`` is only produced by note creation.
    """

    FAILURE = -1
    ALREADY_EXISTS = 0
    SUCCESS = 1


@final
@dataclass(frozen=True, slots=True)
class FileEntry:
    """Snapshot of one filesystem entry at listing time."""

    name: str
    size_bytes: int
    is_directory: bool
    modified_at: datetime


@final
@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """Snapshot of one sub-directory at listing time.

    ``child_count`` counts immediate children only and goes stale as soon
    as the directory is mutated.
    """

    is_directory: ClassVar[bool] = True

    name: str
    child_count: int


class DirectoryListing(NamedTuple):
    """Result of listing one sandbox directory."""

    files: list[FileEntry]
    directories: list[DirectoryEntry]


@final
@dataclass(frozen=True, slots=True)
class PendingTransfer:
    """Source and destination of a move or copy awaiting execution.

    Both paths are relative to the sandbox root.
    """

    source_path: str
    destination_path: str


@final
@dataclass(frozen=True, slots=True)
class NoteCreation:
    """Result of creating an empty note.

    ``path`` is the absolute path of the new note and is only set
    when ``status`` is ``SUCCESS``.
    """

    status: OperationStatus
    path: str = ''
