"""Django storage configuration for the sandbox.

The sandbox is a plain local directory, served by ``SandboxStorage``
(a ``FileSystemStorage`` subclass) rooted at
``SANDBOX_FILES_DIR/SANDBOX_ROOT_NAME``.
"""

from pathlib import Path
from typing import Any, Final

from safespace.settings.components.sandbox import (
    SANDBOX_FILES_DIR,
    SANDBOX_ROOT_NAME,
)

STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'sandbox': {
        'BACKEND': 'safespace.apps.files.infrastructure.storage.SandboxStorage',
        'OPTIONS': {
            'location': str(Path(SANDBOX_FILES_DIR) / SANDBOX_ROOT_NAME),
        },
    },
}
