"""
Top-level router.

Aggregates the endpoint routers.  Both handlers declare their full
path, so the sub-routers are included without a prefix; a prefix here
would move ``/ping`` to ``/ping/ping``.
"""

from fastapi import APIRouter

from .endpoints import initial, ping

router = APIRouter()

router.include_router(initial.router, tags=["initial"])
router.include_router(ping.router, tags=["ping"])
