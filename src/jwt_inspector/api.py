from __future__ import annotations

from .adapters.compact.decoder import CompactTokenDecoder
from .application.use_cases.decode import DecodeTokenUseCase
from .application.use_cases.format_claims import FormatClaimsUseCase
from .domain.entities import DecodeResult

# Stateless; shared by every call.
_decode = DecodeTokenUseCase(token_decoder=CompactTokenDecoder())
_format = FormatClaimsUseCase()


def decode_token(token: str, *, complete: bool = False) -> DecodeResult:
    """
    Decode a compact JWT for inspection. The signature is never verified.

    Returns DecodeSuccess(header, payload) or DecodeFailure(error); never
    raises for string input. An empty string is a format error here; only
    transports report "No token provided".
    """
    return _decode.execute(token, complete=complete)


def decode_token_readable(token: str, *, complete: bool = False) -> DecodeResult:
    """`decode_token` plus `<claim>_readable` timestamps in the payload."""
    return _format.apply(decode_token(token, complete=complete))
