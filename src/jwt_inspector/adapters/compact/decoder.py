from typing import Any, Dict

from ...domain.codec import b64url_decode_text
from ...domain.entities import DecodedToken
from ...domain.exceptions import ClaimsParseError, SegmentDecodeError
from ...domain.json_values import loads_strict
from ...domain.ports import TokenDecoder
from ...domain.serialization import split_compact


class CompactTokenDecoder(TokenDecoder):
    """
    Adapter implementing TokenDecoder by hand: split, Base64URL-decode and
    JSON-parse the header and payload segments.

    This is the canonical decode path. It holds no state, so one instance
    can serve any number of concurrent callers.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

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
        segments = split_compact(token)

        header = self._decode_segment(segments.header, "header")
        payload = self._decode_segment(segments.payload, "payload")

        return DecodedToken(header=header, payload=payload, signature=segments.signature)

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _decode_segment(self, segment: str, label: str) -> Dict[str, Any]:
        try:
            text = b64url_decode_text(segment, self._encoding)
        except SegmentDecodeError as exc:
            raise SegmentDecodeError(f"{label}: {exc}") from exc

        try:
            value = loads_strict(text)
        except (ValueError, RecursionError) as exc:
            raise ClaimsParseError(f"{label}: {exc}") from exc

        if not isinstance(value, dict):
            raise ClaimsParseError(
                f"{label}: expected a JSON object, got {type(value).__name__}"
            )
        return value
