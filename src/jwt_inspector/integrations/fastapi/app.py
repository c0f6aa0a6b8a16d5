from __future__ import annotations

import logging
import os
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles

from ... import __version__
from ...settings import InspectorSettings
from ..common.inspector_factory import create_inspector_dependencies
from .deps import FastAPIInspector
from .errors import request_validation_exception_handler

logger = logging.getLogger(__name__)


def create_app(settings: Optional[InspectorSettings] = None) -> FastAPI:
    """
    Build the inspector web app:

    - POST /decode-jwt
    - optional static assets served from `settings.static_dir` at `/`
    """
    settings = settings or InspectorSettings()

    application = FastAPI(
        title="JWT Inspector",
        version=__version__,
        description="Decodes JWTs for inspection. Signatures are never verified.",
    )

    fastapi_inspector = FastAPIInspector(
        inspector=create_inspector_dependencies(backend=settings.backend),
        settings=settings,
    )
    application.include_router(fastapi_inspector.router())
    application.add_exception_handler(
        RequestValidationError,
        request_validation_exception_handler,  # type: ignore[arg-type]
    )

    # Mounted last so API routes take precedence over files
    if settings.static_dir:
        if os.path.isdir(settings.static_dir):
            application.mount(
                "/",
                StaticFiles(directory=settings.static_dir, html=True),
                name="static",
            )
        else:
            logger.warning("Static directory %s does not exist; not serving assets", settings.static_dir)

    return application
