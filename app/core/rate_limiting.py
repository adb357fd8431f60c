"""Per-client request throttling for the v1 API."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

GENERAL_LIMIT = settings.RATE_LIMIT_GENERAL
QUOTE_LIMIT = settings.RATE_LIMIT_QUOTE
AUTOCOMPLETE_LIMIT = settings.RATE_LIMIT_AUTOCOMPLETE
RATES_READ_LIMIT = settings.RATE_LIMIT_RATES_READ
