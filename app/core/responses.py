import math
import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Query

from app.core.i18n import translate


def request_locale(request: Request) -> str | None:
    return getattr(request.state, "locale", None)


def request_id(request: Request) -> str:
    rid = getattr(request.state, "request_id", None)
    if not rid:
        rid = uuid.uuid4().hex
        request.state.request_id = rid
    return rid


def envelope(request: Request, success: bool, message: str, data: Any = None, errors: Any = None) -> dict:
    body = {
        "success": success,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": request_id(request),
    }
    if data is not None:
        body["data"] = data
    if errors:
        body["errors"] = errors
    return body


def ok(request: Request, data: Any = None, key: str = "success", status_code: int = 200, **params) -> JSONResponse:
    message = translate(key, request_locale(request), **params)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope(request, True, message, data)))


def created(request: Request, data: Any = None, key: str = "created", **params) -> JSONResponse:
    return ok(request, data, key, status_code=201, **params)


def fail(request: Request, status_code: int, key: str = "error", errors: Any = None, **params) -> JSONResponse:
    message = translate(key, request_locale(request), **params)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope(request, False, message, errors=errors)))


class Page:
    """One page of a query plus the pagination block sent to clients."""

    def __init__(self, query: Query, page: int, per_page: int):
        self.page = page
        self.per_page = per_page
        self.total = query.order_by(None).count()
        self.items = query.offset((page - 1) * per_page).limit(per_page).all()

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))

    def meta(self) -> dict:
        return {
            "current_page": self.page,
            "per_page": self.per_page,
            "total": self.total,
            "last_page": self.last_page,
            "has_more_pages": self.page < self.last_page,
        }
