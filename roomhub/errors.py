"""Centralized API error helpers and standard error schema.

Provides:
- make_error_response(...) -> dict payload: {"error": {"code": str, "message": str, "details": ...}}
"""
from __future__ import annotations

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder


def make_error_response(code: str, message: str, details: Optional[Any] = None) -> dict:
    payload: dict = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    # details may carry exception objects or datetimes
    return jsonable_encoder(payload)


__all__ = ["make_error_response"]
