"""Business logic for executing pending move and copy transfers.

A transfer is initiated on the session and executed here. Execution
always clears the pending transfer, whatever the outcome, so a failed
transfer has to be initiated again to be retried.
"""

import logging

from safespace.apps.files.entries import OperationStatus, PendingTransfer
from safespace.apps.files.exceptions import NoPendingTransferError
from safespace.apps.files.infrastructure.metadata import to_storage_name
from safespace.apps.files.logic.session import FileManagerSession

logger = logging.getLogger(__name__)


def _take_transfer(session: FileManagerSession) -> PendingTransfer:
    transfer = session.take_pending_transfer()
    if transfer is None:
        raise NoPendingTransferError('No transfer has been initiated')
    return transfer


def move_pending(session: FileManagerSession) -> OperationStatus:
    """Move the pending transfer's source onto its destination.

    The destination is replaced if present. Moves across filesystem
    boundaries fall back to copy-then-delete-source.

    Args:
        session: Session holding the pending transfer.

    Returns:
        SUCCESS or FAILURE. The pending transfer is cleared either way.
    """
    try:
        transfer = _take_transfer(session)
        session.storage.move_object(
            to_storage_name(transfer.source_path),
            to_storage_name(transfer.destination_path),
        )
    except Exception:
        logger.exception('Failed to move pending transfer')
        return OperationStatus.FAILURE
    return OperationStatus.SUCCESS


def copy_pending(session: FileManagerSession) -> OperationStatus:
    """Copy the pending transfer's source file onto its destination.

    Bytes are streamed; an existing destination is overwritten.

    Args:
        session: Session holding the pending transfer.

    Returns:
        SUCCESS or FAILURE. The pending transfer is cleared either way.
    """
    try:
        transfer = _take_transfer(session)
        session.storage.copy_object(
            to_storage_name(transfer.source_path),
            to_storage_name(transfer.destination_path),
        )
    except Exception:
        logger.exception('Failed to copy pending transfer')
        return OperationStatus.FAILURE
    return OperationStatus.SUCCESS
