from __future__ import annotations

import os

from .domain.constants import DEFAULT_PREVIEW_LENGTH, DecoderBackend
from .settings import InspectorSettings

ENV_PREFIX = "JWT_INSPECTOR_"


def settings_from_env() -> InspectorSettings:
    def _get(key: str) -> str | None:
        raw = os.getenv(ENV_PREFIX + key)
        if raw is None or not raw.strip():
            return None
        return raw.strip()

    def _bool(key: str, default: bool) -> bool:
        raw = _get(key)
        if raw is None:
            return default
        return raw.lower() in {"1", "true", "yes", "on"}

    def _int(key: str, default: int) -> int:
        raw = _get(key)
        if raw is None:
            return default
        try:
            value = int(raw)
        except ValueError:
            raise RuntimeError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from None
        if value < 0:
            raise RuntimeError(f"{ENV_PREFIX}{key} must not be negative, got {value}")
        return value

    backend_raw = _get("BACKEND") or DecoderBackend.COMPACT.value
    try:
        backend = DecoderBackend(backend_raw.lower())
    except ValueError:
        choices = ", ".join(b.value for b in DecoderBackend)
        raise RuntimeError(
            f"{ENV_PREFIX}BACKEND must be one of: {choices} (got {backend_raw!r})"
        ) from None

    return InspectorSettings(
        host=_get("HOST") or "127.0.0.1",
        port=_int("PORT", 3000),
        static_dir=_get("STATIC_DIR"),
        log_level=(_get("LOG_LEVEL") or "INFO").upper(),
        backend=backend,
        readable_by_default=_bool("READABLE", False),
        max_token_length=_int("MAX_TOKEN_LENGTH", 16384),
        preview_length=_int("PREVIEW_LENGTH", DEFAULT_PREVIEW_LENGTH),
    )
