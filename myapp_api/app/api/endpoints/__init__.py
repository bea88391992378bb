"""
Endpoint modules.

Each module defines an ``APIRouter`` holding its handlers.  The
routers are aggregated in ``api/router.py`` and then included in the
main application.
"""
