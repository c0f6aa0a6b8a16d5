"""
jwt_inspector

Read-only JWT inspector: splits a compact token, Base64URL-decodes and
JSON-parses header and payload, and renders readable timestamps for the
well-known time claims. Signatures are never verified; never authorize
anything based on the claims it returns.
"""

__version__ = "0.1.0"

from .domain.constants import ErrorStage, DecoderBackend, TIMESTAMP_CLAIMS, READABLE_SUFFIX
from .domain.entities import DecodedToken, DecodeSuccess, DecodeFailure, DecodeResult
from .domain.exceptions import (
    InspectionError,
    MissingTokenError,
    TokenFormatError,
    SegmentDecodeError,
    ClaimsParseError,
)
from .domain.value_objects import TokenSegments, TokenPreview
from .domain.ports import TokenDecoder
from .domain.codec import b64url_decode, b64url_decode_text, b64url_encode
from .domain.serialization import split_compact
from .domain.formatting import format_timestamps, readable_timestamp

from .application.use_cases.decode import DecodeTokenUseCase
from .application.use_cases.format_claims import FormatClaimsUseCase

from .adapters.compact.decoder import CompactTokenDecoder
from .adapters.pyjwt.jwt_decoder import PyJWTTokenDecoder

from .api import decode_token, decode_token_readable
from .settings import InspectorSettings

__all__ = [
    "__version__",
    # library entry points
    "decode_token",
    "decode_token_readable",
    "format_timestamps",
    "readable_timestamp",
    # domain core
    "ErrorStage",
    "DecoderBackend",
    "TIMESTAMP_CLAIMS",
    "READABLE_SUFFIX",
    "DecodedToken",
    "DecodeSuccess",
    "DecodeFailure",
    "DecodeResult",
    "TokenSegments",
    "TokenPreview",
    "TokenDecoder",
    "b64url_decode",
    "b64url_decode_text",
    "b64url_encode",
    "split_compact",
    # exceptions
    "InspectionError",
    "MissingTokenError",
    "TokenFormatError",
    "SegmentDecodeError",
    "ClaimsParseError",
    # use cases
    "DecodeTokenUseCase",
    "FormatClaimsUseCase",
    # adapters
    "CompactTokenDecoder",
    "PyJWTTokenDecoder",
    # configuration
    "InspectorSettings",
]
