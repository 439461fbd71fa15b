"""
WSGI entry point for the chat API.

Serves the REST endpoints only. WebSocket subscriptions need the ASGI
application in config/asgi.py, which is what Uvicorn runs.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()
