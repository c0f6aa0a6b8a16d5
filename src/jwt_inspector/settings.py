from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .domain.constants import DEFAULT_PREVIEW_LENGTH, DecoderBackend


@dataclass(slots=True)
class InspectorSettings:
    """
    HTTP server + decoding settings.

    Host code decides how to construct this (env, config file, etc.).
    """
    host: str = "127.0.0.1"
    port: int = 3000
    static_dir: Optional[str] = None
    log_level: str = "INFO"

    # Decoding
    backend: DecoderBackend = DecoderBackend.COMPACT
    readable_by_default: bool = False

    # Request limits / diagnostics
    max_token_length: int = 16384
    preview_length: int = DEFAULT_PREVIEW_LENGTH

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"
