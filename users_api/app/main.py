"""
Main entrypoint for the Users API.

This module assembles the FastAPI application: it sets up logging,
creates the user store, installs the error handlers and includes the
API router.  ``create_app`` builds a fresh application each time it is
called; ``app`` is instantiated at import time so that ASGI servers can
discover it, e.g.::

    uvicorn users_api.app.main:app --port 4000
"""

import logging
from typing import Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import UnhandledErrorMiddleware, http_exception_handler
from .core.logging_config import setup_logging
from .services.user_store import UserStore


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[UserStore]
        Store to serve.  A new, empty store is created when omitted, so
        every application starts without users.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    # The route table is exactly the users API; no docs or schema routes.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.user_store = store if store is not None else UserStore()

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_middleware(UnhandledErrorMiddleware)

    app.include_router(api_router, prefix="/api")
    logger.debug("Application %s %s created", settings.project_name, settings.api_version)

    return app


app = create_app()
