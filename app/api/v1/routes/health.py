import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.core import cache
from app.core.config import settings
from app.core.responses import fail, ok
from app.core.rate_limiting import GENERAL_LIMIT, limiter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
@limiter.limit(GENERAL_LIMIT)
def health(request: Request, db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error("health check: database unreachable: %s", e)
        database = "unavailable"
    redis_ok = cache.ping()
    data = {
        "service": settings.APP_NAME,
        "version": settings.API_VERSION,
        "env": settings.ENV,
        "database": database,
        "cache": "disabled" if redis_ok is None else ("ok" if redis_ok else "unavailable"),
    }
    if database != "ok":
        return fail(request, 503, "error", errors={"database": [database]})
    return ok(request, data)
