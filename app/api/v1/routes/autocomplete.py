import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_locale
from app.core.errors import ApiError
from app.core.i18n import translate
from app.core.responses import ok
from app.core.rate_limiting import AUTOCOMPLETE_LIMIT, limiter
from app.services.autocomplete_service import SEARCH_TYPES, search

logger = logging.getLogger(__name__)

router = APIRouter(tags=["autocomplete"])


@router.get("/autocomplete")
@router.get("/autocomplete/search")
@limiter.limit(AUTOCOMPLETE_LIMIT)
def autocomplete(request: Request,
                 lang: str = "",
                 type: str = "",
                 input: str = "",
                 q: Optional[str] = Query(None, max_length=255),
                 from_: Optional[str] = Query(None, alias="from"),
                 db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    errors: dict = {}
    if not lang:
        errors["lang"] = [translate("validation.required", locale, attribute="lang")]
    elif len(lang) != 2:
        errors["lang"] = [translate("validation.invalid", locale, attribute="lang")]
    if not type:
        errors["type"] = [translate("validation.required", locale, attribute="type")]
    elif type not in SEARCH_TYPES:
        errors["type"] = [translate("validation.in", locale, attribute="type")]
    if not input:
        errors["input"] = [translate("validation.required", locale, attribute="input")]
    elif input not in ("from", "to"):
        errors["input"] = [translate("validation.in", locale, attribute="input")]
    if errors:
        raise ApiError(422, "validation_failed", errors=errors)

    logger.info("autocomplete search type=%s input=%s q=%r from=%s client=%s",
                type, input, q or "", from_, request.client.host if request.client else None)
    return ok(request, search(db, type, input, q or "", from_), "resources.autocomplete.retrieved")
