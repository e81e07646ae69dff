"""Business logic for listing and mutating sandbox entries.

Mutation operations never raise: every failure is logged and turned
into ``OperationStatus.FAILURE``. The filesystem is left in whatever
state the failure occurred in, nothing is rolled back.
"""

import logging

from safespace.apps.files.entries import (
    DirectoryEntry,
    DirectoryListing,
    FileEntry,
    NoteCreation,
    OperationStatus,
)
from safespace.apps.files.exceptions import DirectoryNotFoundError
from safespace.apps.files.infrastructure.metadata import (
    apply_extension,
    join_path,
    to_storage_name,
    validate_entry_name,
)
from safespace.apps.files.infrastructure.storage import SandboxStorage
from safespace.apps.files.logic.session import FileManagerSession

logger = logging.getLogger(__name__)


def ensure_root(session: FileManagerSession) -> OperationStatus:
    """Create the sandbox root if it does not exist yet.

    Must run before any listing or mutation that assumes the root.

    Args:
        session: Session owning the sandbox storage.

    Returns:
        SUCCESS if the root exists afterwards, FAILURE otherwise.
    """
    try:
        session.storage.ensure_location()
    except Exception:
        logger.exception('Failed to create sandbox root: %s', session.root_path)
        return OperationStatus.FAILURE
    return OperationStatus.SUCCESS


def list_directory(
    session: FileManagerSession,
    relative_path: str = '',
) -> DirectoryListing:
    """List the immediate children of a sandbox directory.

    Sub-directories are collected separately with a shallow child
    count, in enumeration order. Files carry size and modification
    time (size 0 for dangling links) and are sorted directories-first,
    then by name in code point order (case-sensitive).

    Args:
        session: Session owning the sandbox storage.
        relative_path: Directory relative to the sandbox root,
            '' for the root itself.

    Returns:
        DirectoryListing with files and directories.

    Raises:
        DirectoryNotFoundError: If the path is missing or not a directory.
    """
    storage = session.storage
    name = to_storage_name(relative_path)

    if not storage.is_directory(name):
        raise DirectoryNotFoundError(relative_path)

    logger.debug('Listing directory: %s', name or '<root>')
    directory_names, file_names = storage.listdir(name)

    directories = [
        DirectoryEntry(
            name=directory_name,
            child_count=storage.count_children(
                to_storage_name(name, directory_name),
            ),
        )
        for directory_name in directory_names
    ]

    files: list[FileEntry] = []
    for file_name in file_names:
        size_bytes, modified_at = storage.entry_metadata(
            to_storage_name(name, file_name),
        )
        files.append(FileEntry(
            name=file_name,
            size_bytes=size_bytes,
            is_directory=False,
            modified_at=modified_at,
        ))
    files.sort(key=lambda entry: (not entry.is_directory, entry.name))

    return DirectoryListing(files=files, directories=directories)


def walk_files(session: FileManagerSession, relative_path: str = '') -> list[str]:
    """Collect every file below a sandbox directory, depth-first.

    Args:
        session: Session owning the sandbox storage.
        relative_path: Directory to start from, '' for the root.

    Returns:
        Sandbox-relative paths of all files, in enumeration order.

    Raises:
        DirectoryNotFoundError: If the path is missing or not a directory.
    """
    storage = session.storage
    name = to_storage_name(relative_path)

    if not storage.is_directory(name):
        raise DirectoryNotFoundError(relative_path)

    collected: list[str] = []
    for child_name, is_directory in storage.iter_children(name):
        child_path = to_storage_name(name, child_name)
        if is_directory:
            collected.extend(walk_files(session, child_path))
        else:
            collected.append(child_path)
    return collected


def create_directory(
    session: FileManagerSession,
    path: str,
    name: str,
) -> OperationStatus:
    """Create a directory, including missing parents.

    An existing directory is left alone and still counts as success.

    Args:
        session: Session owning the sandbox storage.
        path: Parent directory relative to the sandbox root.
        name: Name of the new directory.

    Returns:
        SUCCESS or FAILURE.
    """
    storage_name = to_storage_name(path, name)
    try:
        validate_entry_name(name)
        session.storage.make_directory(storage_name)
    except Exception:
        logger.exception('Failed to create directory: %s', storage_name)
        return OperationStatus.FAILURE

    logger.info('Directory ready: %s', storage_name)
    return OperationStatus.SUCCESS


def create_note(session: FileManagerSession, path: str, name: str) -> NoteCreation:
    """Create an empty note file.

    Args:
        session: Session owning the sandbox storage.
        path: Directory relative to the sandbox root.
        name: Filename of the note.

    Returns:
        NoteCreation with SUCCESS and the absolute path of the note,
        ALREADY_EXISTS if the name is taken, or FAILURE.
    """
    storage_name = to_storage_name(path, name)
    try:
        validate_entry_name(name)
        created = session.storage.create_empty(storage_name)
    except Exception:
        logger.exception('Failed to create note: %s', storage_name)
        return NoteCreation(status=OperationStatus.FAILURE)

    if not created:
        logger.info('Note already exists: %s', storage_name)
        return NoteCreation(status=OperationStatus.ALREADY_EXISTS)

    logger.info('Note created: %s', storage_name)
    return NoteCreation(
        status=OperationStatus.SUCCESS,
        path=join_path(session.root_path, path, name),
    )


def rename_entry(
    session: FileManagerSession,
    entry: FileEntry | DirectoryEntry,
    path: str,
    new_name: str,
) -> OperationStatus:
    """Rename an entry, keeping its extension.

    The extension is whatever follows the last dot of the old name;
    names without a dot are replaced as given.

    Args:
        session: Session owning the sandbox storage.
        entry: Listed entry to rename.
        path: Directory holding the entry, relative to the sandbox root.
        new_name: New name without extension.

    Returns:
        SUCCESS, or FAILURE if the target exists or the rename fails.
    """
    final_name = apply_extension(entry.name, new_name)
    source = to_storage_name(path, entry.name)
    destination = to_storage_name(path, final_name)
    try:
        validate_entry_name(final_name)
        session.storage.rename_object(source, destination)
    except Exception:
        logger.exception('Failed to rename %s to %s', source, final_name)
        return OperationStatus.FAILURE
    return OperationStatus.SUCCESS


def delete_entry(
    session: FileManagerSession,
    entry: FileEntry | DirectoryEntry,
    path: str,
) -> OperationStatus:
    """Delete a file, or a directory with everything below it.

    Directories are emptied depth-first before being removed. The
    removal is not atomic: a failure midway leaves a partial tree.

    Args:
        session: Session owning the sandbox storage.
        entry: Listed entry to delete.
        path: Directory holding the entry, relative to the sandbox root.

    Returns:
        SUCCESS (also when the entry is already gone) or FAILURE.
    """
    storage = session.storage
    storage_name = to_storage_name(path, entry.name)
    try:
        if not storage.exists(storage_name) and not storage.is_link(storage_name):
            logger.debug('Nothing to delete: %s', storage_name)
            return OperationStatus.SUCCESS

        if entry.is_directory and not storage.is_link(storage_name):
            _delete_tree(storage, storage_name)
        else:
            storage.delete(storage_name)
    except Exception:
        logger.exception('Failed to delete: %s', storage_name)
        return OperationStatus.FAILURE

    logger.info('Deleted: %s', storage_name)
    return OperationStatus.SUCCESS


def _delete_tree(storage: SandboxStorage, name: str) -> None:
    directory_names, other_names = storage.scan(name)
    for other_name in other_names:
        storage.delete(to_storage_name(name, other_name))
    for directory_name in directory_names:
        _delete_tree(storage, to_storage_name(name, directory_name))
    storage.delete(name)
