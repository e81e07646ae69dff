"""Main settings file.

This file is used as an entry point for Django settings.
Components are included in order, later components may rely
on values defined by earlier ones.
"""

from split_settings.tools import include, optional

include(
    'components/common.py',
    'components/logging.py',
    'components/sandbox.py',
    'components/storages.py',
    # Local overrides, never committed:
    optional('components/local.py'),
)
