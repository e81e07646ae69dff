"""Logging configuration."""

from typing import Any, Final

from safespace.settings.components import config

LOGGING: Final[dict[str, Any]] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'console': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'console',
        },
    },
    'loggers': {
        'safespace': {
            'handlers': ['console'],
            'level': config('SAFESPACE_LOG_LEVEL', default='INFO'),
            'propagate': True,
        },
    },
}
