from __future__ import annotations

from .app import create_app
from .deps import DECODE_PATH, FastAPIInspector
from ..common.inspector_factory import create_inspector_dependencies, InspectorDependencies
from ...settings import InspectorSettings


def create_fastapi_inspector(
    *,
    settings: InspectorSettings | None = None,
) -> FastAPIInspector:
    """
    High-level helper for FastAPI apps that want the decode route on their
    own application:

        fastapi_inspector = create_fastapi_inspector()
        app.include_router(fastapi_inspector.router())
    """
    settings = settings or InspectorSettings()
    inspector: InspectorDependencies = create_inspector_dependencies(
        backend=settings.backend,
    )
    return FastAPIInspector(inspector=inspector, settings=settings)


__all__ = ["DECODE_PATH", "FastAPIInspector", "create_app", "create_fastapi_inspector"]
