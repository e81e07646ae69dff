"""Infrastructure layer for files app.

This package contains integrations with the host filesystem:
- The sandbox storage backend (a local ``FileSystemStorage``)
- Path joining and name helpers

Keep infrastructure concerns separate from business logic.
"""
