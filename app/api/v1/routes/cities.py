from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy import case, func, or_
from sqlalchemy.orm import Session, joinedload, selectinload

from app.db.session import get_db
from app.api.deps import Pagination, get_locale, get_or_404, sort_params
from app.core.errors import Conflict, field_error
from app.core.responses import Page, created, ok
from app.core.rate_limiting import GENERAL_LIMIT, limiter
from app.models.city import City
from app.models.location import Location
from app.models.rate import Rate
from app.models.zone import Zone
from app.schemas.city import CityIn, CityPatch
from app.services.rate_service import valid_filter
from app.services.serializers import city_out, city_rate_out, location_out, zone_out

router = APIRouter(tags=["cities"])

CITY_SORTS = ("name", "state", "country", "created_at", "updated_at")


def _name_taken(db: Session, name: str, exclude_id: int | None = None) -> bool:
    q = db.query(City).filter(func.lower(City.name) == name.strip().lower())
    if exclude_id is not None:
        q = q.filter(City.id != exclude_id)
    return db.query(q.exists()).scalar()


@router.get("/cities")
@limiter.limit(GENERAL_LIMIT)
def list_cities(request: Request,
                search: Optional[str] = None, country: Optional[str] = None, state: Optional[str] = None,
                pg: Pagination = Depends(),
                sort: tuple = Depends(sort_params(CITY_SORTS, "name")),
                db: Session = Depends(get_db)):
    query = db.query(City)
    if search:
        s = f"%{search}%"
        query = query.filter(or_(City.name.ilike(s), City.state.ilike(s), City.country.ilike(s)))
    if country:
        query = query.filter(City.country.ilike(f"%{country}%"))
    if state:
        query = query.filter(City.state.ilike(f"%{state}%"))
    column, desc = sort
    col = getattr(City, column)
    query = query.order_by(col.desc() if desc else col.asc(), City.id.asc())
    page = Page(query, pg.page, pg.per_page)
    return ok(request, {"cities": [city_out(c) for c in page.items], "pagination": page.meta()}, "resources.city.retrieved")


@router.post("/cities", status_code=201)
@limiter.limit(GENERAL_LIMIT)
def create_city(body: CityIn, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    if _name_taken(db, body.name):
        raise field_error("name", "validation.unique", locale)
    c = City(**body.model_dump())
    c.name = c.name.strip()
    db.add(c); db.commit(); db.refresh(c)
    return created(request, {"city": city_out(c)}, "resources.city.created")


@router.get("/cities/{city_id}")
@limiter.limit(GENERAL_LIMIT)
def get_city(city_id: int, request: Request, db: Session = Depends(get_db)):
    c = get_or_404(db, City, city_id, "city")
    return ok(request, {"city": city_out(c)}, "resources.city.retrieved")


@router.api_route("/cities/{city_id}", methods=["PUT", "PATCH"])
@limiter.limit(GENERAL_LIMIT)
def update_city(city_id: int, body: CityPatch, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    c = get_or_404(db, City, city_id, "city")
    changes = body.model_dump(exclude_unset=True)
    if changes.get("name") is not None:
        if _name_taken(db, changes["name"], exclude_id=c.id):
            raise field_error("name", "validation.unique", locale)
        changes["name"] = changes["name"].strip()
    for field, value in changes.items():
        if value is None and field in ("name", "state", "country", "active"):
            continue
        setattr(c, field, value)
    db.commit(); db.refresh(c)
    return ok(request, {"city": city_out(c)}, "resources.city.updated")


@router.delete("/cities/{city_id}")
@limiter.limit(GENERAL_LIMIT)
def delete_city(city_id: int, request: Request, db: Session = Depends(get_db)):
    c = get_or_404(db, City, city_id, "city")
    has_zones = db.query(db.query(Zone).filter(Zone.city_id == c.id).exists()).scalar()
    has_locations = db.query(db.query(Location).filter(Location.city_id == c.id).exists()).scalar()
    if has_zones or has_locations:
        raise Conflict("city")
    db.delete(c); db.commit()
    return ok(request, None, "resources.city.deleted")


@router.get("/cities/{city_id}/details")
@limiter.limit(GENERAL_LIMIT)
def city_details(city_id: int, request: Request, db: Session = Depends(get_db)):
    c = get_or_404(db, City, city_id, "city")
    zones = (
        db.query(Zone)
        .options(joinedload(Zone.city), selectinload(Zone.locations))
        .filter(Zone.city_id == c.id, Zone.active == True)
        .order_by(Zone.name)
        .all()
    )
    airports = (
        db.query(Location)
        .filter(Location.city_id == c.id, Location.type == "A", Location.active == True)
        .order_by(Location.name)
        .all()
    )
    locations_count = db.query(func.count(Location.id)).filter(Location.city_id == c.id).scalar()
    data = city_out(
        c,
        zones=[zone_out(z, with_locations=True) for z in zones],
        airports=[location_out(a, with_city=False) for a in airports],
        zones_count=len(zones),
        airports_count=len(airports),
        locations_count=locations_count,
    )
    return ok(request, {"city": data}, "resources.city.retrieved")


@router.get("/cities/{city_id}/rates")
@limiter.limit(GENERAL_LIMIT)
def city_rates(city_id: int, request: Request,
               service_type_id: Optional[int] = None, vehicle_type_id: Optional[int] = None,
               on: Optional[date] = Query(None, alias="date"),
               pg: Pagination = Depends(),
               db: Session = Depends(get_db)):
    """Rates leaving the city, location-specific ones first, then cheapest one-way first."""
    c = get_or_404(db, City, city_id, "city")
    location_ids = db.query(Location.id).filter(Location.city_id == c.id)
    zone_ids = db.query(Zone.id).filter(Zone.city_id == c.id)
    query = (
        db.query(Rate)
        .options(
            joinedload(Rate.service_type),
            joinedload(Rate.vehicle_type),
            joinedload(Rate.from_zone).joinedload(Zone.city),
            joinedload(Rate.to_zone).joinedload(Zone.city),
            joinedload(Rate.from_location).joinedload(Location.zone),
            joinedload(Rate.to_location).joinedload(Location.zone),
        )
        .filter(or_(Rate.from_location_id.in_(location_ids), Rate.from_zone_id.in_(zone_ids)))
    )
    if service_type_id:
        query = query.filter(Rate.service_type_id == service_type_id)
    if vehicle_type_id:
        query = query.filter(Rate.vehicle_type_id == vehicle_type_id)
    query = valid_filter(query, on).order_by(
        case((Rate.from_location_id.is_not(None), 0), else_=1),
        Rate.total_one_way.asc(),
        Rate.id.asc(),
    )
    page = Page(query, pg.page, pg.per_page)
    return ok(request, {
        "city": city_out(c),
        "rates": [city_rate_out(r) for r in page.items],
        "pagination": page.meta(),
    }, "resources.rate.retrieved")
