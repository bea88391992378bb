"""
Pydantic schemas for request and response bodies.
"""

from .message import MessageResponse

__all__ = ["MessageResponse"]
