from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from fastapi import APIRouter, Body, status

from ..common.inspector_factory import InspectorDependencies
from ...domain.entities import DecodeFailure
from ...domain.value_objects import TokenPreview
from ...settings import InspectorSettings
from .responses import StrictJSONResponse
from .schemas import DecodeRequest, DecodeResponse, ErrorResponse

logger = logging.getLogger(__name__)

DECODE_PATH = "/decode-jwt"


@dataclass(slots=True)
class FastAPIInspector:
    """
    FastAPI integration for jwt_inspector.

    Built on top of the framework-agnostic InspectorDependencies facade;
    exposes the decode endpoint as an APIRouter.
    """

    inspector: InspectorDependencies
    settings: InspectorSettings = field(default_factory=InspectorSettings)

    # ------------------------------------------------------------------ #
    # Request handling
    # ------------------------------------------------------------------ #

    def handle(
            self,
            token: Optional[str],
            *,
            readable: Optional[bool] = None,
            complete: bool = False,
    ) -> StrictJSONResponse:
        """Decode `token` and render the result as a JSON response."""
        if token and len(token) > self.settings.max_token_length:
            logger.warning(
                "Rejected token of length %d (limit %d)",
                len(token),
                self.settings.max_token_length,
            )
            return StrictJSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={
                    "error": "Token exceeds maximum length of "
                             f"{self.settings.max_token_length} characters."
                },
            )

        if token:
            logger.info(
                "Received token %s",
                TokenPreview.of(token, self.settings.preview_length),
            )

        if readable is None:
            readable = self.settings.readable_by_default

        result = self.inspector.inspect(token, readable=readable, complete=complete)

        if isinstance(result, DecodeFailure):
            logger.warning("Decoding error (%s): %s", result.stage.value, result.error)
            return StrictJSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=result.to_dict(),
            )

        logger.info("Successfully decoded token")
        return StrictJSONResponse(status_code=status.HTTP_200_OK, content=result.to_dict())

    # ------------------------------------------------------------------ #
    # Router factory
    # ------------------------------------------------------------------ #

    def router(self) -> APIRouter:
        router = APIRouter()

        @router.post(
            DECODE_PATH,
            response_model=DecodeResponse,
            responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
            summary="Decode a JWT without verifying its signature",
        )
        def decode_jwt(
                body: Optional[DecodeRequest] = Body(default=None),
                readable: Optional[bool] = None,
                complete: bool = False,
        ) -> StrictJSONResponse:
            token = body.token if body is not None else None
            return self.handle(token, readable=readable, complete=complete)

        return router
