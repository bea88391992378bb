"""Ping endpoint used to check that the server is reachable."""

from fastapi import APIRouter

from myapp_api.app.schemas.message import MessageResponse

router = APIRouter()


@router.get("/ping", response_model=MessageResponse)
async def ping() -> MessageResponse:
    return MessageResponse(message="pong", message2="Soy Crack")
