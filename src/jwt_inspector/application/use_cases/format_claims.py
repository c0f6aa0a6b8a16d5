from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from ...domain.constants import READABLE_SUFFIX, TIMESTAMP_CLAIMS
from ...domain.entities import DecodeResult, DecodeSuccess
from ...domain.formatting import format_timestamps


@dataclass(frozen=True, slots=True)
class FormatClaimsUseCase:
    """
    Decoration layer adding readable timestamps to decoded payloads.

    The claim table is plain configuration; pass a different tuple to
    recognize more claims.
    """

    claims: Tuple[str, ...] = TIMESTAMP_CLAIMS
    suffix: str = READABLE_SUFFIX

    def execute(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return format_timestamps(payload, claims=self.claims, suffix=self.suffix)

    def apply(self, result: DecodeResult) -> DecodeResult:
        """Format the payload of a success; failures pass through untouched."""
        if isinstance(result, DecodeSuccess):
            return result.with_payload(self.execute(result.payload))
        return result
