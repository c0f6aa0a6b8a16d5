from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Sequence

from ...adapters.compact.decoder import CompactTokenDecoder
from ...adapters.pyjwt.jwt_decoder import PyJWTTokenDecoder
from ...application.use_cases.decode import DecodeTokenUseCase, failure_from_error
from ...application.use_cases.format_claims import FormatClaimsUseCase
from ...domain.constants import READABLE_SUFFIX, TIMESTAMP_CLAIMS, DecoderBackend
from ...domain.entities import DecodeResult
from ...domain.exceptions import MissingTokenError
from ...domain.ports import TokenDecoder


@dataclass(slots=True)
class InspectorDependencies:
    """
    Framework-agnostic inspection facade.

    Integrations (FastAPI, CLI) adapt this to their own request handling.
    """

    decode_use_case: DecodeTokenUseCase
    format_use_case: FormatClaimsUseCase = field(default_factory=FormatClaimsUseCase)

    # --- Core operations --------------------------------------------------

    def decode(self, token: str, *, complete: bool = False) -> DecodeResult:
        """Token -> DecodeResult (never raises for string input)."""
        return self.decode_use_case.execute(token, complete=complete)

    def decode_readable(self, token: str, *, complete: bool = False) -> DecodeResult:
        """Like `decode`, with readable timestamps added to the payload."""
        return self.format_use_case.apply(self.decode(token, complete=complete))

    def format_claims(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return self.format_use_case.execute(payload)

    # --- Transport helpers -------------------------------------------------

    def inspect(
            self,
            token: str | None,
            *,
            readable: bool = False,
            complete: bool = False,
    ) -> DecodeResult:
        """
        Entry point for transports: a missing or empty token is reported as
        "No token provided" instead of a format error.
        """
        if not token:
            return failure_from_error(MissingTokenError())
        if readable:
            return self.decode_readable(token, complete=complete)
        return self.decode(token, complete=complete)


def create_token_decoder(backend: DecoderBackend | str = DecoderBackend.COMPACT) -> TokenDecoder:
    backend = DecoderBackend(backend)
    if backend is DecoderBackend.PYJWT:
        return PyJWTTokenDecoder()
    return CompactTokenDecoder()


def create_inspector_dependencies(
        *,
        backend: DecoderBackend | str = DecoderBackend.COMPACT,
        timestamp_claims: Sequence[str] = TIMESTAMP_CLAIMS,
        readable_suffix: str = READABLE_SUFFIX,
) -> InspectorDependencies:
    """
    Wire decoder backend and use cases into an InspectorDependencies facade.

    Raises ValueError for an unknown backend name.
    """
    return InspectorDependencies(
        decode_use_case=DecodeTokenUseCase(token_decoder=create_token_decoder(backend)),
        format_use_case=FormatClaimsUseCase(
            claims=tuple(timestamp_claims),
            suffix=readable_suffix,
        ),
    )
