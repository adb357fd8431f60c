import logging
import logging.config
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.i18n import resolve_locale
from app.core.rate_limiting import limiter
from app.api.v1.api import api_router

logging.config.dictConfig({
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "app": {"handlers": ["default"], "level": settings.LOG_LEVEL.upper()},
        "sqlalchemy": {"handlers": ["default"], "level": "WARNING"},
    },
})
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME, version=settings.API_VERSION)

# Rate limiter
app.state.limiter = limiter

# CORS: use CORS_ORIGINS from env in production; default to localhost for dev
_default_origins = [
    "http://127.0.0.1:3000", "http://localhost:3000",
    "http://127.0.0.1:8080", "http://localhost:8080",
]
_origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()] if settings.CORS_ORIGINS else _default_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag each request with an id and the locale its messages are rendered in."""
    request.state.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    request.state.locale = resolve_locale(
        request.query_params.get("locale"),
        request.headers.get("Accept-Language"),
    )
    response = await call_next(request)
    response.headers["X-Request-ID"] = request.state.request_id
    response.headers["Content-Language"] = request.state.locale
    return response


register_exception_handlers(app)
app.include_router(api_router)
logger.info("%s %s ready (env=%s)", settings.APP_NAME, settings.API_VERSION, settings.ENV)
