"""Business logic layer for files app.

This package contains all business logic for the sandbox:
- Directory navigation (path stack and session)
- Directory listing and mutation operations
- Move and copy of pending transfers
- Import from and export to external collaborators

All business logic should be implemented here, separate from
infrastructure (the filesystem storage backend).
"""
