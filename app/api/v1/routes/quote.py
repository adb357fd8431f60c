from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_locale, must_exist
from app.core.errors import ApiError
from app.core.i18n import translate
from app.core.responses import ok
from app.core.rate_limiting import QUOTE_LIMIT, limiter
from app.models.location import Location
from app.services.quote_service import SERVICE_TYPES, get_quote

router = APIRouter(tags=["quote"])

MAX_PAX = 50


@router.get("/quote")
@limiter.limit(QUOTE_LIMIT)
def quote(request: Request,
          service_type: str,
          from_location_id: int,
          to_location_id: int,
          pax: int,
          on: Optional[date] = Query(None, alias="date"),
          currency: str = "USD",
          db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    errors: dict = {}
    if service_type.strip().lower() not in SERVICE_TYPES:
        errors["service_type"] = [translate("validation.service_type_invalid", locale)]
    must_exist(db, Location, from_location_id, "from_location_id", locale, errors)
    must_exist(db, Location, to_location_id, "to_location_id", locale, errors)
    if from_location_id == to_location_id:
        errors.setdefault("to_location_id", []).append(translate("validation.locations_must_be_different", locale))
    if pax < 1:
        errors["pax"] = [translate("validation.passenger_count_min", locale)]
    elif pax > MAX_PAX:
        errors["pax"] = [translate("validation.passenger_count_max", locale)]
    if on is not None and on < date.today():
        errors["date"] = [translate("validation.date_future", locale)]
    if errors:
        raise ApiError(422, "validation_failed", errors=errors)

    data = get_quote(db, service_type.strip().lower(), from_location_id, to_location_id, pax, on, currency, locale)
    return ok(request, data, "resources.quote.calculated")
