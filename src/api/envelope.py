"""
Response envelopes.

Success: {"ok": true, "data": ...}; paged lists add "nextCursor" only
while older items remain.
Failure: {"ok": false, "error": {"code", "message", "details"?}}
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import model_serializer

from src.app.use_cases.dto_base import CamelModel

T = TypeVar("T")


class Envelope(CamelModel, Generic[T]):
    ok: bool = True
    data: T


class PageEnvelope(Envelope[T], Generic[T]):
    next_cursor: Optional[str] = None

    @model_serializer(mode="wrap")
    def _omit_exhausted_cursor(self, handler):
        data = handler(self)
        if self.next_cursor is None:
            data.pop("nextCursor", None)
            data.pop("next_cursor", None)
        return data


def error_body(code: str, message: str, details: Optional[Any] = None) -> dict:
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"ok": False, "error": error}
