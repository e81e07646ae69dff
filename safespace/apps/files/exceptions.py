"""Exceptions for files app."""


class FileManagerError(Exception):
    """Base class for sandbox file manager errors."""


class EmptyStackError(FileManagerError):
    """Raised when leaving a directory while already at the sandbox root."""


class DirectoryNotFoundError(FileManagerError):
    """Raised when a listed path is missing or is not a directory."""

    def __init__(self, path: str) -> None:
        """Initialize DirectoryNotFoundError.

        Args:
            path: Sandbox-relative path that could not be listed.
        """
        self.path = path
        super().__init__(f'Directory not found in sandbox: {path!r}')


class NameResolutionError(FileManagerError):
    """Raised when an external content source has no usable display name."""


class NoPendingTransferError(FileManagerError):
    """Raised when a move or copy runs without an initiated transfer."""
