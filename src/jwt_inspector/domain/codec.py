"""
Base64URL codec for compact JWT segments.

Segments are emitted without padding; decoding restores it before handing
the text to the strict standard-alphabet decoder.
"""

from __future__ import annotations

import base64
import binascii

from .exceptions import SegmentDecodeError


def _to_standard_alphabet(segment: str) -> str:
    """Map URL-safe characters to the standard alphabet and restore padding."""
    b64 = segment.replace("-", "+").replace("_", "/")
    return b64 + "=" * ((4 - len(b64) % 4) % 4)


def b64url_decode(segment: str) -> bytes:
    """
    Decode an unpadded Base64URL segment into raw bytes.

    Raises SegmentDecodeError for characters outside the alphabet, non-ASCII
    input and lengths that no valid encoding can have (length % 4 == 1).
    """
    try:
        return base64.b64decode(_to_standard_alphabet(segment), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SegmentDecodeError(str(exc)) from exc


def b64url_decode_text(segment: str, encoding: str = "utf-8") -> str:
    raw = b64url_decode(segment)
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise SegmentDecodeError(str(exc)) from exc


def b64url_encode(data: bytes | str) -> str:
    """Encode bytes (or UTF-8 text) as unpadded Base64URL."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")
