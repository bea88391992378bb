"""
Application package.

Holds the FastAPI entrypoint (``main``), the router and endpoint
modules (``api``), response schemas (``schemas``) and settings and
logging setup (``core``).
"""

from .main import app  # noqa: F401
