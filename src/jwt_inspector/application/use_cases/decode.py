from __future__ import annotations

import logging
from dataclasses import dataclass

from ...domain.constants import ErrorStage
from ...domain.entities import DecodeFailure, DecodeResult, DecodeSuccess
from ...domain.exceptions import (
    ClaimsParseError,
    InspectionError,
    MissingTokenError,
    SegmentDecodeError,
    TokenFormatError,
)
from ...domain.ports import TokenDecoder
from ...domain.value_objects import TokenPreview

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "No token provided"
INVALID_FORMAT_MESSAGE = "Invalid JWT format: token must have 3 parts."
DECODE_FAILED_PREFIX = "Failed to decode token"


def failure_from_error(exc: InspectionError) -> DecodeFailure:
    """Map a domain exception onto the uniform error result."""
    if isinstance(exc, MissingTokenError):
        return DecodeFailure(error=MISSING_TOKEN_MESSAGE, stage=ErrorStage.MISSING)
    if isinstance(exc, TokenFormatError):
        return DecodeFailure(error=INVALID_FORMAT_MESSAGE, stage=ErrorStage.FORMAT)
    return DecodeFailure(error=f"{DECODE_FAILED_PREFIX}: {exc}", stage=exc.stage)


@dataclass(slots=True)
class DecodeTokenUseCase:
    """
    Application use case:
    - Decode a token via the TokenDecoder port
    - Turn every domain failure into a DecodeFailure result

    The library call does not treat an empty string specially; it fails as a
    format error. Only transports raise MissingTokenError, because only they
    can tell "no token sent" apart from "empty token sent".
    """

    token_decoder: TokenDecoder

    def execute(self, token: str, *, complete: bool = False) -> DecodeResult:
        """
        Decode `token` and return a DecodeSuccess or a DecodeFailure.

        Never raises for string input. With `complete=True` the raw
        signature segment is kept on the success result.
        """
        try:
            decoded = self.token_decoder.decode(token)
        except (TokenFormatError, SegmentDecodeError, ClaimsParseError) as exc:
            logger.debug(
                "Decode failed at %s stage for token %s",
                exc.stage.value,
                TokenPreview.of(token),
            )
            return failure_from_error(exc)
        except Exception as exc:  # noqa: BLE001
            # Third-party backends may raise anything
            logger.exception("Unexpected error from %s", type(self.token_decoder).__name__)
            return DecodeFailure(
                error=f"{DECODE_FAILED_PREFIX}: {exc}",
                stage=ErrorStage.DECODE,
            )

        return DecodeSuccess(
            header=decoded.header,
            payload=decoded.payload,
            signature=decoded.signature if complete else None,
        )
