from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .constants import ErrorStage


@dataclass(frozen=True, slots=True)
class DecodedToken:
    """
    Header, payload and raw signature segment of a decoded token.

    Produced by TokenDecoder implementations. The signature is never
    verified.
    """
    header: Dict[str, Any]
    payload: Dict[str, Any]
    signature: str


@dataclass(frozen=True, slots=True)
class DecodeSuccess:
    """
    Successful decode outcome.

    `signature` is only set when the caller asked for the complete decode.
    """
    header: Dict[str, Any]
    payload: Dict[str, Any]
    signature: Optional[str] = None

    @property
    def ok(self) -> bool:
        return True

    def with_payload(self, payload: Dict[str, Any]) -> DecodeSuccess:
        return DecodeSuccess(header=self.header, payload=payload, signature=self.signature)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"header": self.header, "payload": self.payload}
        if self.signature is not None:
            data["signature"] = self.signature
        return data


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """
    Failed decode outcome. Never carries partially decoded data.
    """
    error: str
    stage: ErrorStage

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error}


DecodeResult = Union[DecodeSuccess, DecodeFailure]
