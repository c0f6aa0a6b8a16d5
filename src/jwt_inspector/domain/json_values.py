from __future__ import annotations

import json
from typing import Any, NoReturn

from .exceptions import ClaimsParseError


def reject_constant(name: str) -> NoReturn:
    """`parse_constant` hook: NaN and +/-Infinity are not JSON."""
    raise ValueError(f"invalid JSON constant {name!r}")


def loads_strict(text: str) -> Any:
    """`json.loads` that refuses the NaN/Infinity extensions."""
    return json.loads(text, parse_constant=reject_constant)


def ensure_strict(value: Any, label: str) -> None:
    """
    Check an already parsed value can be serialized back as strict JSON.

    Raises ClaimsParseError for non-finite numbers.
    """
    try:
        json.dumps(value, allow_nan=False)
    except (ValueError, RecursionError) as exc:
        raise ClaimsParseError(f"{label}: {exc}") from exc
