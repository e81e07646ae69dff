"""Local storage backend for the sandbox root."""

import errno
import logging
import os
import shutil
from collections.abc import Iterator
from datetime import datetime
from typing import BinaryIO, Final, final, override

from django.core.files.storage import FileSystemStorage

logger = logging.getLogger(__name__)

_CHUNK_SIZE: Final = 64 * 1024  # 64KB chunks for streaming copies


@final
class SandboxStorage(FileSystemStorage):
    """Filesystem storage confined to the sandbox root.

    Extends Django's FileSystemStorage with:
    - Logging around destructive calls
    - Directory creation, rename and move primitives
    - Streaming writes that overwrite existing files

    Every name is relative to ``location``; ``path()`` goes through
    Django's ``safe_join`` and refuses names that leave the sandbox.
    """

    @override
    def delete(self, name: str) -> None:
        """Delete a file or an empty directory with logging.

        Missing names are ignored, as in FileSystemStorage.

        Args:
            name: Storage name of the file or empty directory.

        Raises:
            OSError: If the filesystem refuses the removal.
        """
        try:
            logger.debug('Deleting from sandbox: %s', name)
            if self.is_link(name):
                os.remove(self.path(name))
            else:
                super().delete(name)
        except Exception:
            logger.exception('Failed to delete from sandbox: %s', name)
            raise

    def ensure_location(self) -> None:
        """Create the sandbox root and its parents if absent."""
        os.makedirs(self.location, exist_ok=True)

    def is_directory(self, name: str) -> bool:
        """Check whether a name refers to an existing directory.

        Args:
            name: Storage name.

        Returns:
            True if the name is an existing directory.
        """
        return os.path.isdir(self.path(name))

    def is_link(self, name: str) -> bool:
        """Check whether a name is a symbolic link.

        Args:
            name: Storage name.

        Returns:
            True if the name is a symbolic link, dangling or not.
        """
        return os.path.islink(self.path(name))

    def scan(self, name: str) -> tuple[list[str], list[str]]:
        """List a directory without following symbolic links.

        Unlike ``listdir``, a link to a directory is reported as a
        file so that recursive removal never walks out through it.

        Args:
            name: Storage name of the directory.

        Returns:
            Tuple of (directory names, other entry names).
        """
        directories: list[str] = []
        others: list[str] = []
        for child_name, is_directory in self.iter_children(name):
            if is_directory:
                directories.append(child_name)
            else:
                others.append(child_name)
        return directories, others

    def iter_children(self, name: str) -> Iterator[tuple[str, bool]]:
        """Yield the children of a directory in enumeration order.

        Symbolic links are never reported as directories.

        Args:
            name: Storage name of the directory.

        Yields:
            Tuples of (child name, whether it is a real directory).
        """
        with os.scandir(self.path(name)) as entries:
            for entry in entries:
                yield entry.name, entry.is_dir(follow_symlinks=False)

    def entry_metadata(self, name: str) -> tuple[int, datetime]:
        """Read size and modification time of a listed file.

        Dangling links and files removed since listing report size 0
        and the time of the link itself, or the epoch if even that is
        gone.

        Args:
            name: Storage name of the file.

        Returns:
            Tuple of (size in bytes, modification time).
        """
        try:
            return self.size(name), self.get_modified_time(name)
        except OSError:
            logger.debug('Cannot stat %s, using link metadata', name)

        try:
            timestamp = os.lstat(self.path(name)).st_mtime
        except OSError:
            timestamp = 0
        return 0, self._datetime_from_timestamp(timestamp)

    def make_directory(self, name: str) -> None:
        """Create a directory and its parents, existing ones are kept.

        Args:
            name: Storage name of the directory.
        """
        os.makedirs(self.path(name), exist_ok=True)

    def create_empty(self, name: str) -> bool:
        """Create an empty file unless the name is taken.

        Args:
            name: Storage name of the new file.

        Returns:
            True if the file was created, False if it already existed.
        """
        try:
            with open(self.path(name), 'xb'):
                logger.debug('Created empty file: %s', name)
        except FileExistsError:
            return False
        return True

    def count_children(self, name: str) -> int:
        """Count immediate children of a directory.

        Args:
            name: Storage name of the directory.

        Returns:
            Number of entries directly inside, 0 if it cannot be read.
        """
        try:
            return len(os.listdir(self.path(name)))
        except OSError:
            return 0

    def rename_object(self, source: str, destination: str) -> None:
        """Rename an entry without replacing an existing one.

        Args:
            source: Current storage name.
            destination: New storage name.

        Raises:
            FileExistsError: If the destination already exists.
            OSError: If the rename fails.
        """
        target = self.path(destination)
        if os.path.lexists(target):
            raise FileExistsError(errno.EEXIST, 'Rename target exists', target)
        os.rename(self.path(source), target)
        logger.info('Renamed: %s -> %s', source, destination)

    def move_object(self, source: str, destination: str) -> None:
        """Move an entry, replacing the destination if present.

        ``os.replace`` is atomic on a single filesystem. When the
        destination lives on another device the entry is copied and
        the source removed afterwards; that fallback is not atomic and
        a failure between the two steps leaves both copies in place.

        Args:
            source: Source storage name.
            destination: Destination storage name.

        Raises:
            OSError: If the move or its fallback fails.
        """
        source_path = self.path(source)
        destination_path = self.path(destination)
        try:
            os.replace(source_path, destination_path)
        except OSError as error:
            if error.errno != errno.EXDEV:
                raise
            logger.warning(
                'Cross-device move, copying instead: %s -> %s',
                source,
                destination,
            )
            self._copy_across_devices(source_path, destination_path)
        logger.info('Moved: %s -> %s', source, destination)

    def copy_object(self, source: str, destination: str) -> int:
        """Stream a file's bytes to another name, overwriting it.

        Args:
            source: Source storage name.
            destination: Destination storage name.

        Returns:
            Number of bytes copied.

        Raises:
            shutil.SameFileError: If both names refer to the same file.
            OSError: If either side cannot be opened or written.
        """
        source_path = self.path(source)
        destination_path = self.path(destination)
        if os.path.exists(destination_path) and os.path.samefile(
            source_path,
            destination_path,
        ):
            raise shutil.SameFileError(source_path, destination_path)

        with open(source_path, 'rb') as source_stream:
            copied = self.write_stream(destination, source_stream)
        logger.info('Copied %d bytes: %s -> %s', copied, source, destination)
        return copied

    def write_stream(self, name: str, stream: BinaryIO) -> int:
        """Write a byte stream to a file, replacing existing content.

        Args:
            name: Storage name of the target file.
            stream: Readable binary stream.

        Returns:
            Number of bytes written.
        """
        with open(self.path(name), 'wb') as target:
            return copy_stream(stream, target)

    def _copy_across_devices(self, source_path: str, destination_path: str) -> None:
        if os.path.isdir(source_path):
            shutil.copytree(source_path, destination_path, dirs_exist_ok=True)
            shutil.rmtree(source_path)
            return

        with open(source_path, 'rb') as source_stream:
            with open(destination_path, 'wb') as target:
                copy_stream(source_stream, target)
        os.remove(source_path)


def copy_stream(source: BinaryIO, target: BinaryIO) -> int:
    """Copy a binary stream in chunks.

    Args:
        source: Readable binary stream.
        target: Writable binary stream.

    Returns:
        Number of bytes copied.
    """
    copied = 0
    for chunk in iter(lambda: source.read(_CHUNK_SIZE), b''):
        target.write(chunk)
        copied += len(chunk)
    return copied
