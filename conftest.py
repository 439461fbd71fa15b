"""
Root pytest configuration for the Django project.

pytest-django loads settings before this module is imported, so settings
overrides for tests live in app/conftest.py (pytest_configure).
App-specific fixtures are defined in each app's tests/conftest.py.
"""

import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
