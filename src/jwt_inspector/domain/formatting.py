from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Mapping, Optional

from .constants import READABLE_SUFFIX, TIMESTAMP_CLAIMS

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a timestamp
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def readable_timestamp(value: Any) -> Optional[str]:
    """
    Render Unix seconds as an ISO-8601 UTC instant with millisecond precision,
    e.g. ``2025-06-07T23:43:02.000Z``.

    Returns None for non-numeric values and for values outside the
    representable date range.
    """
    if not _is_number(value):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None

    try:
        millis = int(value * 1000)
        moment = _EPOCH + timedelta(milliseconds=millis)
    except (OverflowError, ValueError):
        return None

    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f".{moment.microsecond // 1000:03d}Z"
    )


def format_timestamps(
    payload: Mapping[str, Any],
    claims: Iterable[str] = TIMESTAMP_CLAIMS,
    suffix: str = READABLE_SUFFIX,
) -> Dict[str, Any]:
    """
    Return a shallow copy of `payload` with a `<claim><suffix>` key added
    for every recognized numeric time claim.

    Never raises; a claim that cannot be rendered just gets no derived key.
    """
    readable = dict(payload)
    for claim in claims:
        if claim not in readable:
            continue
        rendered = readable_timestamp(readable[claim])
        if rendered is not None:
            readable[f"{claim}{suffix}"] = rendered
    return readable
