"""Django app configuration for files app."""

from django.apps import AppConfig


class FilesConfig(AppConfig):
    """Configuration for the sandbox files app."""

    name = 'safespace.apps.files'
    verbose_name = 'Sandbox files'
