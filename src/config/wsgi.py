"""WSGI entry point for the Product CRUD API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from modules.core.lifecycle import install_fatal_exception_hooks  # noqa: E402

install_fatal_exception_hooks()
