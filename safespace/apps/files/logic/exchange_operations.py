"""Business logic for importing into and exporting out of the sandbox.

Both directions talk to collaborators through small protocols:
``ContentSource`` for picked external content and ``ExportTarget`` for
a shared storage area. The filesystem implementations below cover
local use; platform integrations provide their own.
"""

import logging
import os
from collections.abc import Iterable
from typing import BinaryIO, Protocol, final

from django.conf import settings
from django.core.files.storage import FileSystemStorage

from safespace.apps.files.entries import (
    DirectoryEntry,
    FileEntry,
    OperationStatus,
)
from safespace.apps.files.exceptions import NameResolutionError
from safespace.apps.files.infrastructure.metadata import (
    extract_filename,
    to_storage_name,
    validate_entry_name,
)
from safespace.apps.files.infrastructure.storage import copy_stream
from safespace.apps.files.logic.session import FileManagerSession

logger = logging.getLogger(__name__)


class ContentSource(Protocol):
    """External content that can be imported into the sandbox."""

    def display_name(self) -> str | None:
        """Name the content should be stored under, if known."""

    def open(self) -> BinaryIO | None:
        """Open the content for reading, None if it is unavailable."""


class ExportTarget(Protocol):
    """Shared storage area that sandbox files are exported to."""

    def open_destination(
        self,
        display_name: str,
        mime_type: str,
        category: str,
    ) -> BinaryIO | None:
        """Open a writable destination, None if it cannot be created."""


@final
class LocalContentSource:
    """Content source backed by a file on the local filesystem."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Initialize source.

        Args:
            path: Path of the file to import.
        """
        self._path = os.fspath(path)

    def display_name(self) -> str | None:
        """Get the filename of the source file."""
        return extract_filename(self._path) or None

    def open(self) -> BinaryIO | None:
        """Open the source file for reading."""
        return open(self._path, 'rb')


@final
class DirectoryExportTarget:
    """Export target writing into ``<location>/<category>/<name>``.

    A local directory has no content types, so the MIME type is only
    logged.
    """

    def __init__(self, location: str | os.PathLike[str] | None = None) -> None:
        """Initialize target.

        Args:
            location: Shared directory, defaults to SANDBOX_EXPORT_DIR.
        """
        self._storage = FileSystemStorage(
            location=location or settings.SANDBOX_EXPORT_DIR,
        )

    def open_destination(
        self,
        display_name: str,
        mime_type: str,
        category: str,
    ) -> BinaryIO | None:
        """Open ``<category>/<display_name>`` for writing, replacing it."""
        category_path = self._storage.path(category)
        os.makedirs(category_path, exist_ok=True)
        logger.debug(
            'Exporting %s as %s into %s',
            display_name,
            mime_type,
            category,
        )
        destination = self._storage.path(to_storage_name(category, display_name))
        return open(destination, 'wb')


def _resolve_display_name(source: ContentSource) -> str:
    display_name = source.display_name()
    if not display_name:
        raise NameResolutionError('External content has no display name')
    validate_entry_name(display_name)
    return display_name


def import_external(
    session: FileManagerSession,
    source: ContentSource,
    destination_path: str,
) -> OperationStatus:
    """Copy external content into a sandbox directory.

    The content is stored under its display name; content without a
    display name is refused rather than stored under an empty name.

    Args:
        session: Session owning the sandbox storage.
        source: External content to import.
        destination_path: Target directory relative to the sandbox root.

    Returns:
        SUCCESS or FAILURE.
    """
    try:
        display_name = _resolve_display_name(source)
        storage_name = to_storage_name(destination_path, display_name)

        source_stream = source.open()
        if source_stream is None:
            logger.error('Cannot open external content: %s', display_name)
            return OperationStatus.FAILURE

        with source_stream:
            written = session.storage.write_stream(storage_name, source_stream)
    except Exception:
        logger.exception('Failed to import into: %s', destination_path)
        return OperationStatus.FAILURE

    logger.info('Imported %d bytes into: %s', written, storage_name)
    return OperationStatus.SUCCESS


def export_batch(
    session: FileManagerSession,
    entries: Iterable[FileEntry | DirectoryEntry],
    source_path: str,
    target: ExportTarget | None = None,
) -> OperationStatus:
    """Export sandbox files to a shared storage area.

    Every entry is written under its own name with the configured
    wildcard MIME type. A failed entry does not stop the others.

    Args:
        session: Session owning the sandbox storage.
        entries: Listed entries to export.
        source_path: Directory holding the entries, relative to the
            sandbox root.
        target: Shared storage area, defaults to DirectoryExportTarget.

    Returns:
        SUCCESS if every entry was exported, FAILURE otherwise.
    """
    export_target = target or DirectoryExportTarget()
    mime_type = settings.SANDBOX_EXPORT_MIME_TYPE
    category = settings.SANDBOX_EXPORT_CATEGORY

    status = OperationStatus.SUCCESS
    for entry in entries:
        storage_name = to_storage_name(source_path, entry.name)
        try:
            _export_entry(
                session,
                export_target,
                storage_name,
                entry.name,
                mime_type,
                category,
            )
        except Exception:
            logger.exception('Failed to export: %s', storage_name)
            status = OperationStatus.FAILURE
    return status


def _export_entry(  # noqa: WPS211
    session: FileManagerSession,
    target: ExportTarget,
    storage_name: str,
    display_name: str,
    mime_type: str,
    category: str,
) -> None:
    with session.storage.open(storage_name, 'rb') as source_stream:
        destination = target.open_destination(display_name, mime_type, category)
        if destination is None:
            raise OSError(f'Export target refused: {display_name}')
        with destination:
            written = copy_stream(source_stream, destination)
    logger.info('Exported %d bytes: %s', written, storage_name)
