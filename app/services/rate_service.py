from datetime import date
from decimal import Decimal

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session, joinedload, selectinload

from app.models.location import Location
from app.models.rate import Rate
from app.models.vehicle_type import VehicleType

PRICE_FIELDS = {
    "one_way": "total_one_way",
    "round_trip": "total_round_trip",
    "cost_one_way": "cost_vehicle_one_way",
    "cost_round_trip": "cost_vehicle_round_trip",
}


def valid_filter(query: Query, on: date | None = None) -> Query:
    """Available rates whose validity window contains ``on`` (open ends allowed)."""
    on = on or date.today()
    return query.filter(
        Rate.available == True,
        or_(Rate.valid_from.is_(None), Rate.valid_from <= on),
        or_(Rate.valid_to.is_(None), Rate.valid_to >= on),
    )


def with_relations(query: Query) -> Query:
    return query.options(
        joinedload(Rate.service_type),
        joinedload(Rate.vehicle_type).selectinload(VehicleType.service_features),
        joinedload(Rate.from_zone),
        joinedload(Rate.to_zone),
        joinedload(Rate.from_location),
        joinedload(Rate.to_location),
    )


def find_for_zones(db: Session, service_type_id: int, from_zone_id: int, to_zone_id: int, on: date | None = None) -> list[Rate]:
    """Pure zone rates: no location override on either end."""
    q = db.query(Rate).filter(
        Rate.service_type_id == service_type_id,
        Rate.from_zone_id == from_zone_id,
        Rate.to_zone_id == to_zone_id,
        Rate.from_location_id.is_(None),
        Rate.to_location_id.is_(None),
    )
    return with_relations(valid_filter(q, on)).order_by(Rate.id).all()


def find_location_specific(db: Session, service_type_id: int, from_location_id: int, to_location_id: int, on: date | None = None) -> list[Rate]:
    q = db.query(Rate).filter(
        Rate.service_type_id == service_type_id,
        Rate.from_location_id == from_location_id,
        Rate.to_location_id == to_location_id,
    )
    return with_relations(valid_filter(q, on)).order_by(Rate.id).all()


def find_for_route(db: Session, service_type_id: int, from_location_id: int, to_location_id: int, on: date | None = None) -> list[Rate]:
    """Rates for a location pair.

    Location-specific rates win outright; otherwise fall back to the zone rates
    between the two locations' zones. A location without a zone has no zone
    fallback.
    """
    specific = find_location_specific(db, service_type_id, from_location_id, to_location_id, on)
    if specific:
        return specific

    from_location = db.get(Location, from_location_id)
    to_location = db.get(Location, to_location_id)
    if not from_location or not to_location:
        return []
    if from_location.zone_id is None or to_location.zone_id is None:
        return []
    return find_for_zones(db, service_type_id, from_location.zone_id, to_location.zone_id, on)


def is_location_specific(rate: Rate) -> bool:
    return rate.from_location_id is not None and rate.to_location_id is not None


def is_zone_based(rate: Rate) -> bool:
    return (
        rate.from_zone_id is not None
        and rate.to_zone_id is not None
        and rate.from_location_id is None
        and rate.to_location_id is None
    )


def is_valid_for_date(rate: Rate, on: date | None = None) -> bool:
    on = on or date.today()
    if not rate.available:
        return False
    if rate.valid_from is not None and rate.valid_from > on:
        return False
    if rate.valid_to is not None and rate.valid_to < on:
        return False
    return True


def money(value) -> str | None:
    if value is None:
        return None
    return f"{Decimal(str(value)):.2f}"


def formatted_price(rate: Rate, kind: str = "one_way") -> str:
    field = PRICE_FIELDS.get(kind)
    if field is None:
        raise ValueError(f"unknown price kind: {kind}")
    return money(getattr(rate, field))
