# =============================================================================
# Django Project Configuration Package
# =============================================================================
# This package contains all Django configuration including settings, URLs,
# and the ASGI/WSGI applications.
#
# The ASGI application serves both HTTP (Django/DRF) and WebSocket
# (Django Channels) traffic; see asgi.py.
# =============================================================================
