"""
Main entrypoint for the myapp API.

This module assembles the FastAPI application, sets up logging,
installs the request logger and includes the router.  ``create_app``
builds the app, which is then instantiated at module import time as
``app``, so it can be served directly, e.g.::

    uvicorn myapp_api.app.main:app

``run.py`` at the project root is the normal way to start the server
on port 8080.
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log one line per completed request.

    The line holds the method, path, status code, elapsed time and
    client address.  The response is passed through untouched.
    """
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    client_host = request.client.host if request.client else "-"
    logger.info(
        "%s %s -> %d (%.2f ms) from %s",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
        client_host,
    )
    return response


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.middleware("http")(log_requests)
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
