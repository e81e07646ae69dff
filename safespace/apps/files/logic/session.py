"""Per-caller navigation and transfer state.

A session replaces module-level mutable state: the caller owns it and
passes it to every operation. Sessions are not thread-safe, they are
meant to be driven by a single UI thread.
"""

import logging
from typing import final

from django.core.files.storage import storages

from safespace.apps.files.entries import PendingTransfer
from safespace.apps.files.infrastructure.storage import SandboxStorage
from safespace.apps.files.logic.navigation import PathStack

logger = logging.getLogger(__name__)


def get_sandbox_storage() -> SandboxStorage:
    """Get the configured sandbox storage backend.

    Returns:
        SandboxStorage instance from the ``sandbox`` STORAGES alias.
    """
    return storages['sandbox']  # type: ignore[return-value]


@final
class FileManagerSession:
    """Navigation stack and pending transfer of one file manager user."""

    def __init__(self, storage: SandboxStorage | None = None) -> None:
        """Initialize session at the sandbox root.

        Args:
            storage: Storage to operate on, defaults to the configured
                sandbox storage.
        """
        self.storage = storage or get_sandbox_storage()
        self.path_stack = PathStack()
        self.pending_transfer: PendingTransfer | None = None

    @property
    def root_path(self) -> str:
        """Get the absolute path of the sandbox root."""
        return self.storage.location

    def current_path(self) -> str:
        """Get the current directory relative to the sandbox root."""
        return self.path_stack.current_path()

    def go_up(self) -> str | None:
        """Leave the current directory unless already at the root.

        Returns:
            The directory name that was left, or None at the root.
        """
        if self.path_stack.is_at_root():
            logger.debug('Ignoring go up at sandbox root')
            return None
        return self.path_stack.leave()

    def initiate_transfer(
        self,
        source_path: str,
        destination_path: str,
    ) -> PendingTransfer:
        """Remember a move or copy to execute later.

        A transfer that is still pending is replaced without warning.

        Args:
            source_path: Sandbox-relative path of the entry to transfer.
            destination_path: Sandbox-relative target path.

        Returns:
            The pending transfer now held by the session.
        """
        if self.pending_transfer is not None:
            logger.warning(
                'Replacing pending transfer: %s -> %s',
                self.pending_transfer.source_path,
                self.pending_transfer.destination_path,
            )
        self.pending_transfer = PendingTransfer(
            source_path=source_path,
            destination_path=destination_path,
        )
        return self.pending_transfer

    def take_pending_transfer(self) -> PendingTransfer | None:
        """Hand out the pending transfer and clear it.

        Returns:
            The pending transfer, or None if nothing was initiated.
        """
        transfer = self.pending_transfer
        self.pending_transfer = None
        return transfer
