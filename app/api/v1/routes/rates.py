from datetime import date
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import Pagination, get_locale, get_or_404, must_exist, sort_params
from app.core.errors import ApiError, NotFound
from app.core.i18n import translate
from app.core.responses import Page, created, ok
from app.core.rate_limiting import GENERAL_LIMIT, RATES_READ_LIMIT, limiter
from app.models.location import Location
from app.models.rate import Rate
from app.models.service_type import ServiceType
from app.models.vehicle_type import VehicleType
from app.models.zone import Zone
from app.schemas.rate import RateIn, RatePatch
from app.services.rate_service import find_for_route, find_for_zones, valid_filter, with_relations
from app.services.serializers import rate_out

router = APIRouter(tags=["rates"])

RATE_SORTS = ("total_one_way", "total_round_trip", "created_at", "updated_at")


def _validate(db: Session, values: dict, locale: str):
    """Referenced rows exist, overrides sit inside their zones and the window is ordered."""
    errors: dict = {}
    must_exist(db, ServiceType, values.get("service_type_id"), "service_type_id", locale, errors)
    must_exist(db, VehicleType, values.get("vehicle_type_id"), "vehicle_type_id", locale, errors)
    must_exist(db, Zone, values.get("from_zone_id"), "from_zone_id", locale, errors)
    must_exist(db, Zone, values.get("to_zone_id"), "to_zone_id", locale, errors)
    for side in ("from", "to"):
        loc = must_exist(db, Location, values.get(f"{side}_location_id"), f"{side}_location_id", locale, errors)
        if loc is not None and loc.zone_id != values.get(f"{side}_zone_id"):
            errors.setdefault(f"{side}_location_id", []).append(translate(
                "validation.location_zone_mismatch", locale,
                attribute=f"{side} location", zone=f"{side} zone",
            ))
    valid_from, valid_to = values.get("valid_from"), values.get("valid_to")
    if valid_from and valid_to and valid_to < valid_from:
        errors.setdefault("valid_to", []).append(
            translate("validation.after_or_equal", locale, attribute="valid to", date="valid from")
        )
    if errors:
        raise ApiError(422, "validation_failed", errors=errors)


def _load(db: Session, rate_id: int) -> Rate:
    r = with_relations(db.query(Rate)).filter(Rate.id == rate_id).first()
    if r is None:
        raise NotFound("rate")
    return r


@router.get("/rates")
@limiter.limit(RATES_READ_LIMIT)
def list_rates(request: Request,
               service_type_id: Optional[int] = None, vehicle_type_id: Optional[int] = None,
               from_zone_id: Optional[int] = None, to_zone_id: Optional[int] = None,
               from_location_id: Optional[int] = None, to_location_id: Optional[int] = None,
               available: Optional[bool] = None,
               rate_type: Optional[Literal["zone", "location"]] = None,
               valid_date: Optional[date] = None,
               pg: Pagination = Depends(),
               sort: tuple = Depends(sort_params(RATE_SORTS, "created_at", "desc")),
               db: Session = Depends(get_db)):
    query = with_relations(db.query(Rate))
    for column, value in (
        (Rate.service_type_id, service_type_id),
        (Rate.vehicle_type_id, vehicle_type_id),
        (Rate.from_zone_id, from_zone_id),
        (Rate.to_zone_id, to_zone_id),
        (Rate.from_location_id, from_location_id),
        (Rate.to_location_id, to_location_id),
    ):
        if value is not None:
            query = query.filter(column == value)
    if available is not None:
        query = query.filter(Rate.available == available)
    if rate_type == "zone":
        query = query.filter(Rate.from_location_id.is_(None), Rate.to_location_id.is_(None))
    elif rate_type == "location":
        query = query.filter(Rate.from_location_id.is_not(None), Rate.to_location_id.is_not(None))
    if valid_date is not None:
        query = valid_filter(query, valid_date)
    column, desc = sort
    col = getattr(Rate, column)
    query = query.order_by(col.desc() if desc else col.asc(), Rate.id.asc())
    page = Page(query, pg.page, pg.per_page)
    return ok(request, {"rates": [rate_out(r) for r in page.items], "pagination": page.meta()}, "resources.rate.retrieved")


@router.get("/rates/route")
@limiter.limit(RATES_READ_LIMIT)
def route_rates(request: Request,
                service_type_id: int, from_location_id: int, to_location_id: int,
                on: Optional[date] = Query(None, alias="date"),
                db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    _validate(db, {"service_type_id": service_type_id}, locale)
    errors: dict = {}
    must_exist(db, Location, from_location_id, "from_location_id", locale, errors)
    must_exist(db, Location, to_location_id, "to_location_id", locale, errors)
    if errors:
        raise ApiError(422, "validation_failed", errors=errors)
    rates = find_for_route(db, service_type_id, from_location_id, to_location_id, on)
    return ok(request, {"rates": [rate_out(r) for r in rates]}, "resources.rate.retrieved")


@router.get("/rates/zone")
@limiter.limit(RATES_READ_LIMIT)
def zone_rates(request: Request,
               service_type_id: int, from_zone_id: int, to_zone_id: int,
               on: Optional[date] = Query(None, alias="date"),
               db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    _validate(db, {"service_type_id": service_type_id, "from_zone_id": from_zone_id, "to_zone_id": to_zone_id}, locale)
    rates = find_for_zones(db, service_type_id, from_zone_id, to_zone_id, on)
    return ok(request, {"rates": [rate_out(r) for r in rates]}, "resources.rate.retrieved")


@router.post("/rates", status_code=201)
@limiter.limit(GENERAL_LIMIT)
def create_rate(body: RateIn, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    values = body.model_dump()
    _validate(db, values, locale)
    r = Rate(**values)
    db.add(r); db.commit()
    return created(request, {"rate": rate_out(_load(db, r.id))}, "resources.rate.created")


@router.get("/rates/{rate_id}")
@limiter.limit(RATES_READ_LIMIT)
def get_rate(rate_id: int, request: Request, db: Session = Depends(get_db)):
    return ok(request, {"rate": rate_out(_load(db, rate_id))}, "resources.rate.retrieved")


@router.api_route("/rates/{rate_id}", methods=["PUT", "PATCH"])
@limiter.limit(GENERAL_LIMIT)
def update_rate(rate_id: int, body: RatePatch, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    r = get_or_404(db, Rate, rate_id, "rate")
    changes = body.model_dump(exclude_unset=True)
    required = ("service_type_id", "vehicle_type_id", "from_zone_id", "to_zone_id",
                "cost_vehicle_one_way", "total_one_way", "cost_vehicle_round_trip", "total_round_trip",
                "num_vehicles", "available", "highlighted")
    changes = {k: v for k, v in changes.items() if not (v is None and k in required)}
    merged = {c.key: getattr(r, c.key) for c in Rate.__table__.columns}
    merged.update(changes)
    _validate(db, merged, locale)
    for field, value in changes.items():
        setattr(r, field, value)
    db.commit()
    db.expire_all()
    return ok(request, {"rate": rate_out(_load(db, r.id))}, "resources.rate.updated")


@router.delete("/rates/{rate_id}")
@limiter.limit(GENERAL_LIMIT)
def delete_rate(rate_id: int, request: Request, db: Session = Depends(get_db)):
    r = get_or_404(db, Rate, rate_id, "rate")
    db.delete(r); db.commit()
    return ok(request, None, "resources.rate.deleted")
