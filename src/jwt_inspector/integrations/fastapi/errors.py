from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError

from .responses import StrictJSONResponse

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    # loc + msg only: "input" may hold token text
    errors = exc.errors()
    if not errors:
        return "Invalid request body."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    if location:
        return f"Invalid request body: {location}: {message}"
    return f"Invalid request body: {message}"


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> StrictJSONResponse:
    """
    Report malformed request bodies with the same 400 `{"error": ...}` shape
    as decode failures instead of FastAPI's default 422.
    """
    error = _describe_validation_error(exc)
    logger.warning("Rejected request to %s: %s", request.url.path, error)
    return StrictJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": error},
    )
