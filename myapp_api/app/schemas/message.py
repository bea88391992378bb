"""
Pydantic schema for the message payload.

Both public endpoints answer with the same two-field object; the
field order here is the key order on the wire.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Fixed greeting returned by ``/`` and ``/ping``."""

    message: str = Field(..., description="Primary message")
    message2: str = Field(..., description="Secondary message")
