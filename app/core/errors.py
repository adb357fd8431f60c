import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.i18n import translate
from app.core.responses import fail, request_locale

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error rendered as a localized envelope.

    ``key`` is a message key from app/lang; ``errors`` optionally maps field
    names to lists of messages.
    """

    def __init__(self, status_code: int, key: str, errors: dict | None = None, **params):
        super().__init__(key)
        self.status_code = status_code
        self.key = key
        self.errors = errors
        self.params = params


class NotFound(ApiError):
    def __init__(self, resource: str | None = None):
        super().__init__(404, f"resources.{resource}.not_found" if resource else "not_found")


class Conflict(ApiError):
    def __init__(self, resource: str):
        super().__init__(409, f"resources.{resource}.has_dependents")


def field_error(field: str, key: str, locale: str | None = None, **params) -> ApiError:
    """422 for a single field, e.g. a foreign key pointing nowhere."""
    params.setdefault("attribute", field.replace("_", " "))
    return ApiError(422, "validation_failed", errors={field: [translate(key, locale, **params)]})


_PYDANTIC_KEYS = {
    "missing": "validation.required",
    "int_parsing": "validation.integer",
    "int_type": "validation.integer",
    "float_parsing": "validation.numeric",
    "decimal_parsing": "validation.numeric",
    "bool_parsing": "validation.boolean",
    "date_parsing": "validation.date",
    "date_from_datetime_parsing": "validation.date",
    "literal_error": "validation.in",
    "enum": "validation.in",
}


def _validation_errors(exc: RequestValidationError, locale: str | None) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc) or "request"
        key = _PYDANTIC_KEYS.get(err.get("type", ""))
        ctx = err.get("ctx") or {}
        if err.get("type") == "value_error" and isinstance(ctx.get("error"), ValueError):
            # validators raise ValueError(<message key>)
            key = str(ctx["error"])
        if key:
            message = translate(key, locale, attribute=loc[-1].replace("_", " ") if loc else field)
        else:
            message = err.get("msg", "")
        errors.setdefault(field, []).append(message)
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return fail(request, exc.status_code, exc.key, errors=exc.errors, **exc.params)

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        client_host = request.client.host if request.client else "unknown"
        logger.warning("rate limit %s exceeded for %s: %s", exc.detail, client_host, request.url.path)
        response = fail(request, 429, "too_many_requests")
        response.headers["Retry-After"] = "60"
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return fail(request, 422, "validation_failed", errors=_validation_errors(exc, request_locale(request)))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        key = {404: "not_found", 401: "unauthorized", 403: "forbidden", 429: "too_many_requests"}.get(exc.status_code, "error")
        return fail(request, exc.status_code, key)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            "API error on %s %s (request_id=%s): %s",
            request.method,
            request.url,
            getattr(request.state, "request_id", None),
            exc,
            exc_info=True,
        )
        return fail(request, 500, "internal_server_error")
