"""Sandbox settings."""

from safespace.settings.components import BASE_DIR, config

# Private storage area of the application
SANDBOX_FILES_DIR = config(
    'SANDBOX_FILES_DIR',
    default=str(BASE_DIR.joinpath('media')),
)

# Every managed file lives below this folder of SANDBOX_FILES_DIR
SANDBOX_ROOT_NAME = config('SANDBOX_ROOT_NAME', default='root')

# Shared location that exported files are written to
SANDBOX_EXPORT_DIR = config(
    'SANDBOX_EXPORT_DIR',
    default=str(BASE_DIR.joinpath('exports')),
)
SANDBOX_EXPORT_CATEGORY = config('SANDBOX_EXPORT_CATEGORY', default='Download')
SANDBOX_EXPORT_MIME_TYPE = config('SANDBOX_EXPORT_MIME_TYPE', default='*/*')
