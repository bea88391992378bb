"""
Top-level package for the myapp HTTP API.

All functionality lives in submodules under ``app``.  Import the
ASGI application as ``myapp_api.app.main:app``.
"""

__all__ = []
