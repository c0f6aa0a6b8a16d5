from __future__ import annotations

from typing import Protocol

from .entities import DecodedToken


class TokenDecoder(Protocol):
    """
    Port for turning a compact token string into its decoded parts.

    Implementations live in the adapters layer (manual Base64URL decoder,
    PyJWT-backed decoder).
    """

    def decode(self, token: str) -> DecodedToken:
        """
        Decode the given token without verifying its signature.

        Raises:
          - TokenFormatError
          - SegmentDecodeError
          - ClaimsParseError
        """
        ...
