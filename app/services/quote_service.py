import logging
import time
from datetime import date

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from app.core import cache
from app.core.config import settings
from app.core.errors import ApiError, NotFound
from app.models.location import Location
from app.models.service_type import ServiceType
from app.services.exchange_service import SUPPORTED_CURRENCIES, get_exchange_rate
from app.services.rate_service import find_for_route
from app.services.serializers import feature_out

logger = logging.getLogger(__name__)

SERVICE_TYPES = ("round-trip", "one-way", "hotel-to-hotel", "arrival", "departure")

_SERVICE_TYPE_CODES = {
    "round-trip": "RT",
    "round trip": "RT",
    "roundtrip": "RT",
    "one-way": "OW",
    "one way": "OW",
    "oneway": "OW",
    # airport arrivals and departures are priced as one-way trips
    "arrival": "OW",
    "departure": "OW",
    "hotel-to-hotel": "HTH",
    "hotel to hotel": "HTH",
    "hotel_to_hotel": "HTH",
}


def map_service_type_code(service_type: str) -> str:
    normalized = (service_type or "").strip().lower()
    return _SERVICE_TYPE_CODES.get(normalized, normalized.upper())


def find_service_type(db: Session, service_type: str) -> ServiceType | None:
    code = map_service_type_code(service_type)
    return (
        db.query(ServiceType)
        .filter(or_(ServiceType.code == code, ServiceType.name.ilike(f"%{service_type}%")))
        .order_by(ServiceType.code != code)
        .first()
    )


def service_type_tpv(from_location: Location, to_location: Location) -> str:
    if from_location.is_airport or to_location.is_airport:
        return "service_airport"
    return "service_hotel_hotel"


def _price_pair(cost, total, rate: float):
    """(cost string, rounded total) converted with ``rate``; each is None when its amount is empty."""
    cost_c = f"{float(cost) * rate:.2f}" if cost else None
    total_c = int(round(float(total) * rate)) if total else None
    return cost_c, total_c


def cache_key(service_type: str, from_location_id: int, to_location_id: int, pax: int, on: date, currency: str, locale: str) -> str:
    return f"quote:{service_type}:{from_location_id}:{to_location_id}:{pax}:{on.isoformat()}:{currency}:{locale}"


def calculate_quote(
    db: Session,
    service_type: str,
    from_location_id: int,
    to_location_id: int,
    pax: int,
    on: date | None = None,
    currency: str = "USD",
    locale: str = "en",
) -> dict:
    on = on or date.today()
    currency = currency.upper()
    if currency not in SUPPORTED_CURRENCIES:
        raise ApiError(400, "resources.quote.unsupported_currency", currency=currency)

    st = find_service_type(db, service_type)
    if not st:
        raise NotFound("quote")

    from_location = db.query(Location).options(joinedload(Location.city)).filter(Location.id == from_location_id).first()
    to_location = db.query(Location).options(joinedload(Location.city)).filter(Location.id == to_location_id).first()
    if not from_location or not to_location:
        raise NotFound("location")

    rates = find_for_route(db, st.id, from_location.id, to_location.id, on)
    if not rates:
        if from_location.zone_id is None or to_location.zone_id is None:
            raise ApiError(404, "resources.quote.no_routes_found")
        raise ApiError(404, "resources.quote.rate_not_available")

    rates = [r for r in rates if r.vehicle_type.max_pax >= pax]
    if not rates:
        raise ApiError(404, "business.no_available_vehicles")

    to_usd = get_exchange_rate(db, currency, "USD")
    to_mxn = get_exchange_rate(db, currency, "MXN")
    from_usd = get_exchange_rate(db, "USD", currency)

    prices = []
    for rate in rates:
        v = rate.vehicle_type
        cost_ow, total_ow = _price_pair(rate.cost_vehicle_one_way, rate.total_one_way, from_usd)
        cost_rt, total_rt = _price_pair(rate.cost_vehicle_round_trip, rate.total_round_trip, from_usd)
        prices.append({
            "id": v.id,
            "name": v.name,
            "pic": v.image,
            "type": v.code,
            "features": [feature_out(f, locale) for f in v.service_features],
            "mUnits": v.max_units,
            "mPax": v.max_pax,
            "timeFromAirport": v.travel_time,
            "video": v.video_url,
            "frame": v.frame,
            "numVehicles": rate.num_vehicles,
            "costVehicleOW": cost_ow if cost_ow is not None else "0.00",
            "totalOW": total_ow if total_ow is not None else 0,
            "costVehicleRT": cost_rt,
            "totalRT": total_rt,
            "available": 1 if rate.available else 0,
        })

    return {
        "exchangeDollar": f"{to_usd:.6f}",
        "exchangeMXN": f"{to_mxn:.6f}",
        "currency": currency.lower(),
        "fromHotelId": str(from_location.id),
        "toHotelId": str(to_location.id),
        "fromHotel": from_location.name.upper(),
        "toHotel": to_location.name.upper(),
        "toDestination": to_location.city.name.lower() if to_location.city else "",
        "toDestinationId": to_location.city_id,
        "fromDestination": from_location.city.name.lower() if from_location.city else "",
        "fromDestinationId": from_location.city_id,
        "serviceTypeTPV": service_type_tpv(from_location, to_location),
        "prices": prices,
    }


def get_quote(
    db: Session,
    service_type: str,
    from_location_id: int,
    to_location_id: int,
    pax: int,
    on: date | None = None,
    currency: str = "USD",
    locale: str = "en",
) -> dict:
    """Cached :func:`calculate_quote`; errors are never cached."""
    on = on or date.today()
    currency = (currency or "USD").upper()
    key = cache_key(service_type, from_location_id, to_location_id, pax, on, currency, locale)

    def _compute():
        started = time.perf_counter()
        result = calculate_quote(db, service_type, from_location_id, to_location_id, pax, on, currency, locale)
        elapsed_ms = (time.perf_counter() - started) * 1000
        if elapsed_ms > settings.SLOW_QUERY_MS:
            logger.warning("slow quote_generation: %.0fms key=%s", elapsed_ms, key)
        return result

    return cache.remember(key, settings.QUOTE_CACHE_TTL, _compute)
