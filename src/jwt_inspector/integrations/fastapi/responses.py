from __future__ import annotations

import json
from typing import Any

from fastapi.responses import JSONResponse


class StrictJSONResponse(JSONResponse):
    """
    JSONResponse that escapes non-ASCII text.

    Decoded claims may hold lone surrogates (``"\\ud800"``), which cannot be
    encoded as UTF-8; escaping keeps them representable.
    """

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("ascii")
