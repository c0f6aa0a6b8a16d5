from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class DecodeRequest(BaseModel):
    token: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class DecodeResponse(BaseModel):
    header: Dict[str, Any]
    payload: Dict[str, Any]
    signature: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
