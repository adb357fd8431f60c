from datetime import date

from sqlalchemy.orm import Session

from app.models.location import Location
from app.models.rate import Rate
from app.models.zone import Zone
from app.services.exchange_service import get_exchange_rate
from app.services.rate_service import with_relations, valid_filter
from app.services.serializers import feature_out


def service_category(from_type: str | None, to_type: str | None) -> str:
    if from_type == "A" or to_type == "A":
        return "Airport Transfer"
    if from_type == "H" and to_type == "H":
        return "Hotel Transfer"
    return "Private Transfer"


def _route_end(location: Location | None, zone: Zone) -> dict:
    if location is not None:
        return {
            "id": location.id,
            "name": location.name,
            "type": location.type,
            "city": location.city.name if location.city else None,
            "city_id": location.city_id,
        }
    return {
        "id": zone.id,
        "name": zone.name,
        "type": None,
        "city": zone.city.name if zone.city else None,
        "city_id": zone.city_id,
    }


def highlighted_query(db: Session, on: date | None = None):
    return with_relations(valid_filter(db.query(Rate).filter(Rate.highlighted == True), on))


def highlight_out(db: Session, rate: Rate, currency: str = "USD", locale: str = "en") -> dict:
    fx = get_exchange_rate(db, "USD", currency)
    v = rate.vehicle_type
    st = rate.service_type
    start = _route_end(rate.from_location, rate.from_zone)
    end = _route_end(rate.to_location, rate.to_zone)

    total_ow = int(round(float(rate.total_one_way) * fx))
    cost_rt = float(rate.cost_vehicle_round_trip or 0) * fx
    total_rt = float(rate.total_round_trip or 0) * fx
    return {
        "id": rate.id,
        "service_category": service_category(start["type"], end["type"]),
        "service_type": {"id": st.id, "name": st.name, "code": st.code},
        "vehicle_type": {
            "id": v.id,
            "name": v.name,
            "code": v.code,
            "image": v.image,
            "max_pax": v.max_pax,
            "max_units": v.max_units,
            "travel_time": v.travel_time,
            "video_url": v.video_url,
            "frame": v.frame,
            "features": [feature_out(f, locale) for f in v.service_features],
        },
        "route": {"from": start, "to": end},
        "pricing": {
            "cost_one_way": f"{float(rate.cost_vehicle_one_way) * fx:.2f}",
            "total_one_way": total_ow,
            "cost_round_trip": f"{cost_rt:.2f}" if cost_rt else None,
            "total_round_trip": int(round(total_rt)) if total_rt else None,
            "starting_from": total_ow,
        },
        "highlight": {"badge": rate.highlight_badge, "description": rate.highlight_description},
        "num_vehicles": rate.num_vehicles,
        "available": 1 if rate.available else 0,
    }


def list_highlighted(db: Session, currency: str = "USD", locale: str = "en") -> dict:
    currency = currency.upper()
    rates = highlighted_query(db).order_by(Rate.total_one_way.asc(), Rate.id.asc()).all()
    return {
        "currency": currency.lower(),
        "exchange_rates": {
            "to_usd": f"{get_exchange_rate(db, currency, 'USD'):.6f}",
            "to_mxn": f"{get_exchange_rate(db, currency, 'MXN'):.6f}",
        },
        "highlighted_quotes": [highlight_out(db, r, currency, locale) for r in rates],
    }


def get_highlighted(db: Session, rate_id: int) -> Rate | None:
    return highlighted_query(db).filter(Rate.id == rate_id).first()
