from enum import Enum


class ErrorStage(Enum):
    MISSING = "missing"
    FORMAT = "format"
    DECODE = "decode"
    PARSE = "parse"


# Numeric claims (Unix seconds) that get a human-readable sibling key.
TIMESTAMP_CLAIMS: tuple[str, ...] = ("exp", "iat", "auth_time")
READABLE_SUFFIX = "_readable"

DEFAULT_PREVIEW_LENGTH = 50


class DecoderBackend(Enum):
    COMPACT = "compact"
    PYJWT = "pyjwt"
