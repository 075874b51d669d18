"""WSGI entry point for the GatherGuru API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "gatherguru.settings")

application = get_wsgi_application()
