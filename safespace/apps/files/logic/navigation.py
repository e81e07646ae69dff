"""Navigation depth inside the sandbox root."""

import os
from typing import final

from safespace.apps.files.exceptions import EmptyStackError


@final
class PathStack:
    """Ordered path segments leading from the sandbox root.

    An empty stack is the root. Joining the segments with the
    platform separator gives a path relative to the root.
    """

    def __init__(self) -> None:
        """Initialize an empty stack positioned at the root."""
        self._segments: list[str] = []

    def __len__(self) -> int:
        """Number of segments below the root."""
        return len(self._segments)

    @property
    def segments(self) -> tuple[str, ...]:
        """Get a snapshot of the current segments."""
        return tuple(self._segments)

    def current_path(self) -> str:
        """Get the current path relative to the sandbox root.

        Returns:
            Segments joined with the platform separator, '' at root.
        """
        return os.sep.join(self._segments)

    def enter(self, segment: str) -> None:
        """Descend into a directory.

        Pushing the segment that is already on top is a no-op, which
        absorbs duplicate taps on the same entry.

        Args:
            segment: Name of the directory being entered.
        """
        if self._segments and self._segments[-1] == segment:
            return
        self._segments.append(segment)

    def leave(self) -> str:
        """Go up one level.

        Returns:
            The segment that was removed.

        Raises:
            EmptyStackError: If already at the root.
        """
        if not self._segments:
            raise EmptyStackError('Already at the sandbox root')
        return self._segments.pop()

    def is_at_root(self) -> bool:
        """Check if the stack points at the root.

        Returns:
            True if there are no segments.
        """
        return not self._segments

    def is_one_level_below_root(self) -> bool:
        """Check if going up lands on the root.

        Returns:
            True if there is exactly one segment.
        """
        return len(self._segments) == 1

    def reset(self) -> None:
        """Return to the root."""
        self._segments.clear()
