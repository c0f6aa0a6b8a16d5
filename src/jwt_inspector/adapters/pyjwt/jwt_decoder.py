from typing import Any, Dict

import jwt
from jwt.exceptions import DecodeError, InvalidTokenError

from ...domain.entities import DecodedToken
from ...domain.exceptions import ClaimsParseError, SegmentDecodeError
from ...domain.json_values import ensure_strict
from ...domain.ports import TokenDecoder
from ...domain.serialization import split_compact

# Inspection only: every check that needs a key or a clock is switched off.
_UNVERIFIED_OPTIONS: Dict[str, Any] = {
    "verify_signature": False,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "require": [],
}


class PyJWTTokenDecoder(TokenDecoder):
    """
    Adapter implementing TokenDecoder port using PyJWT.

    Alternative to CompactTokenDecoder for callers that prefer the library
    parser. PyJWT also Base64URL-decodes the signature segment, so a token
    with a corrupt signature fails here while the compact decoder ignores it.
    """

    def __init__(self) -> None:
        self._jwt = jwt.PyJWT(options=dict(_UNVERIFIED_OPTIONS))

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    def decode(self, token: str) -> DecodedToken:
        """
        Raises:
            TokenFormatError
            SegmentDecodeError
            ClaimsParseError
        """
        # Same part-count rule as the compact decoder, before PyJWT sees it
        segments = split_compact(token)

        try:
            decoded = self._jwt.decode_complete(
                token,
                options=dict(_UNVERIFIED_OPTIONS),
            )
        except DecodeError as exc:
            message = str(exc)
            if isinstance(exc.__cause__ or exc.__context__, UnicodeDecodeError):
                raise SegmentDecodeError(message) from exc
            if message.startswith(("Invalid header string", "Invalid payload string")):
                raise ClaimsParseError(message) from exc
            raise SegmentDecodeError(message) from exc
        except InvalidTokenError as exc:
            raise SegmentDecodeError(str(exc)) from exc

        # PyJWT parses with the stdlib defaults, which accept NaN/Infinity
        ensure_strict(decoded["header"], "header")
        ensure_strict(decoded["payload"], "payload")

        return DecodedToken(
            header=dict(decoded["header"]),
            payload=dict(decoded["payload"]),
            signature=segments.signature,
        )
