"""
Root endpoint.

``GET /`` answers with a fixed welcome message.  The handler ignores
the request entirely; every call yields the same body.
"""

from fastapi import APIRouter

from myapp_api.app.schemas.message import MessageResponse

router = APIRouter()


@router.get("/", response_model=MessageResponse)
async def initial() -> MessageResponse:
    """Return the welcome message."""
    return MessageResponse(message="Initial", message2="Mensaje de Bienvenida")
