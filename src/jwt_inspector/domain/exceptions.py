from .constants import ErrorStage


class InspectionError(Exception):
    """Base class for every failure while inspecting a token."""
    stage: ErrorStage = ErrorStage.DECODE


class MissingTokenError(InspectionError):
    """Raised by transports when no token was supplied."""
    stage = ErrorStage.MISSING


class TokenFormatError(InspectionError):
    """Raised when the compact serialization does not have 3 parts."""
    stage = ErrorStage.FORMAT


class SegmentDecodeError(InspectionError):
    """Raised when a segment is not valid Base64URL or not valid text."""
    stage = ErrorStage.DECODE


class ClaimsParseError(InspectionError):
    """Raised when decoded text is not a JSON object."""
    stage = ErrorStage.PARSE
