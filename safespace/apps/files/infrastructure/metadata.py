"""Path and name helpers for sandbox entries."""

import os
from pathlib import Path
from typing import Final

from django.core.exceptions import ValidationError

_EXTENSION_SEPARATOR: Final = '.'
_RESERVED_NAMES: Final = frozenset(('.', '..'))


def join_path(*parts: str) -> str:
    """Join path parts with the platform separator.

    Only a single pass collapses doubled separators, this is not a
    general canonicalization.

    Args:
        parts: Path components (e.g., '/data/root', 'docs', 'a.txt').

    Returns:
        Joined path (e.g., '/data/root/docs/a.txt').
    """
    doubled = os.sep * 2
    return os.sep.join(parts).replace(doubled, os.sep)


def to_storage_name(*parts: str) -> str:
    """Build a storage name relative to the sandbox root.

    Empty components are skipped so the root itself maps to ''.

    Args:
        parts: Sandbox-relative components (e.g., '', 'docs', 'a.txt').

    Returns:
        Relative storage name (e.g., 'docs/a.txt').
    """
    return join_path(*(part for part in parts if part)).strip(os.sep)


def extract_filename(path: str) -> str:
    """Extract filename from a path.

    Args:
        path: Full path (e.g., '/tmp/docs/file.pdf').

    Returns:
        Filename (e.g., 'file.pdf').
    """
    return Path(path).name


def get_file_extension(filename: str) -> str:
    """Get the extension of a filename.

    Everything after the last dot counts, so ``archive.tar.gz`` gives
    ``gz`` and ``.profile`` gives ``profile``.

    Args:
        filename: Filename (e.g., 'document.pdf').

    Returns:
        Extension without dot, case preserved (e.g., 'pdf').
        Returns empty string if the name has no dot.
    """
    if _EXTENSION_SEPARATOR not in filename:
        return ''
    return filename.rsplit(_EXTENSION_SEPARATOR, 1)[1]


def apply_extension(old_name: str, new_name: str) -> str:
    """Carry the extension of ``old_name`` over to ``new_name``.

    Args:
        old_name: Current entry name (e.g., 'notes.txt').
        new_name: Requested name without extension (e.g., 'todo').

    Returns:
        Final name (e.g., 'todo.txt'), or ``new_name`` unchanged when
        ``old_name`` has no dot.
    """
    if _EXTENSION_SEPARATOR not in old_name:
        return new_name
    extension = get_file_extension(old_name)
    return f'{new_name}{_EXTENSION_SEPARATOR}{extension}'


def validate_entry_name(name: str) -> None:
    """Validate a single file or directory name.

    Args:
        name: Proposed name of an entry inside one sandbox directory.

    Raises:
        ValidationError: If the name is empty, reserved, or would
            address anything other than a direct child.
    """
    if not name:
        raise ValidationError('Entry name cannot be empty')

    if name in _RESERVED_NAMES:
        raise ValidationError(f'Entry name is reserved: {name!r}')

    if os.sep in name or (os.altsep and os.altsep in name):
        raise ValidationError(f'Entry name cannot contain a separator: {name!r}')

    if '\x00' in name:
        raise ValidationError('Entry name cannot contain null bytes')
