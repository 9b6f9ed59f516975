"""
WSGI config for the bookstore administration backend.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "bookstoreAdmin.settings")

application = get_wsgi_application()
