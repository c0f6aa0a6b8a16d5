# src/jwt_inspector/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_PREVIEW_LENGTH


# --- Token structure -----------------------------------------------------


@dataclass(frozen=True, slots=True)
class TokenSegments:
    """
    The three raw parts of a compact-serialized JWT.

    Segments are kept exactly as they appeared between the dots; nothing is
    decoded or validated here.
    """
    header: str
    payload: str
    signature: str


# --- Diagnostics ---------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TokenPreview:
    """
    Bounded, log-safe view of a token.

    Tokens may carry sensitive claims, so only a short prefix and the total
    length are ever written to logs.
    """
    prefix: str
    length: int
    truncated: bool

    @classmethod
    def of(cls, token: str, limit: int = DEFAULT_PREVIEW_LENGTH) -> TokenPreview:
        limit = max(limit, 0)
        return cls(
            prefix=token[:limit],
            length=len(token),
            truncated=len(token) > limit,
        )

    def __str__(self) -> str:
        suffix = "..." if self.truncated else ""
        return f"{self.prefix!r}{suffix} (length={self.length})"
