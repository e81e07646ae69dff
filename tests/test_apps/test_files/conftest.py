"""Shared fixtures for files app tests."""

from pathlib import Path

import pytest

from safespace.apps.files.infrastructure.storage import SandboxStorage
from safespace.apps.files.logic.session import FileManagerSession


@pytest.fixture
def sandbox_storage(tmp_path):
    """Sandbox storage rooted in a temporary directory.

    Returns:
        SandboxStorage whose root already exists.
    """
    storage = SandboxStorage(location=tmp_path / 'files' / 'root')
    storage.ensure_location()
    return storage


@pytest.fixture
def sandbox_root(sandbox_storage) -> Path:
    """Absolute path of the sandbox root.

    Returns:
        Path of the temporary sandbox root.
    """
    return Path(sandbox_storage.location)


@pytest.fixture
def session(sandbox_storage):
    """File manager session on the temporary sandbox.

    Returns:
        FileManagerSession positioned at the root.
    """
    return FileManagerSession(storage=sandbox_storage)


@pytest.fixture
def sample_tree(sandbox_root):
    """Populate the sandbox with a small tree.

    Layout::

        notes.txt
        docs/
            report.pdf
            drafts/
                draft.md

    Returns:
        The sandbox root path.
    """
    (sandbox_root / 'notes.txt').write_bytes(b'remember the milk')
    drafts = sandbox_root / 'docs' / 'drafts'
    drafts.mkdir(parents=True)
    (sandbox_root / 'docs' / 'report.pdf').write_bytes(b'%PDF-1.7')
    (drafts / 'draft.md').write_bytes(b'# Draft')
    return sandbox_root
