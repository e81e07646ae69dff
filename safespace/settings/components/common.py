"""Django settings shared by every environment."""

from safespace.settings.components import config

SECRET_KEY = config('DJANGO_SECRET_KEY', default='safespace-insecure-key')

DEBUG = config('DJANGO_DEBUG', cast=bool, default=False)

INSTALLED_APPS = [
    'safespace.apps.files',
]

# The sandbox keeps no state outside the filesystem tree.
DATABASES: dict[str, dict[str, str]] = {}

LANGUAGE_CODE = 'en-us'

USE_TZ = True
TIME_ZONE = 'UTC'
