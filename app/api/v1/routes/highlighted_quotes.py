from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import get_locale
from app.core.errors import ApiError, NotFound
from app.core.responses import ok
from app.core.rate_limiting import GENERAL_LIMIT, limiter
from app.services.exchange_service import SUPPORTED_CURRENCIES
from app.services.highlight_service import get_highlighted, highlight_out, list_highlighted

router = APIRouter(tags=["highlighted-quotes"])


def _currency(currency: str) -> str:
    currency = (currency or "USD").upper()
    if currency not in SUPPORTED_CURRENCIES:
        raise ApiError(400, "resources.quote.unsupported_currency", currency=currency)
    return currency


@router.get("/highlighted-quotes")
@limiter.limit(GENERAL_LIMIT)
def highlighted_quotes(request: Request, currency: str = "USD", db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    data = list_highlighted(db, _currency(currency), locale)
    return ok(request, data, "resources.highlighted_quotes.retrieved")


@router.get("/highlighted-quotes/{rate_id}")
@limiter.limit(GENERAL_LIMIT)
def highlighted_quote(rate_id: int, request: Request, currency: str = "USD",
                      db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    currency = _currency(currency)
    rate = get_highlighted(db, rate_id)
    if rate is None:
        raise NotFound("highlighted_quotes")
    return ok(request, highlight_out(db, rate, currency, locale), "resources.highlighted_quotes.retrieved")
