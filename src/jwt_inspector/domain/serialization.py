from __future__ import annotations

from .exceptions import TokenFormatError
from .value_objects import TokenSegments


def split_compact(token: str) -> TokenSegments:
    """
    Split a compact-serialized token into header, payload and signature.

    Only the part count is checked; empty segments are passed through and
    fail later when decoded.
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise TokenFormatError("token must have 3 parts")

    header, payload, signature = parts
    return TokenSegments(header=header, payload=payload, signature=signature)
