from fastapi import APIRouter, Depends, Request
from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, joinedload

from app.db.session import get_db
from app.api.deps import get_locale, get_or_404, must_exist
from app.core.errors import ApiError, NotFound
from app.core.i18n import translate
from app.core.responses import created, ok
from app.core.rate_limiting import GENERAL_LIMIT, limiter
from app.models.city import City
from app.models.location import LOCATION_TYPES, Location
from app.models.rate import Rate
from app.models.zone import Zone
from app.schemas.location import LocationIn, LocationPatch
from app.services.serializers import location_out

router = APIRouter(tags=["locations"])


def _active_locations(db: Session):
    return db.query(Location).options(joinedload(Location.city)).filter(Location.active == True).order_by(Location.name)


def _check_refs(db: Session, city_id: int | None, zone_id: int | None, locale: str, errors: dict | None = None):
    """A location's zone, when set, must be one of its city's zones."""
    errors = {} if errors is None else errors
    must_exist(db, City, city_id, "city_id", locale, errors)
    zone = must_exist(db, Zone, zone_id, "zone_id", locale, errors)
    if zone is not None and city_id is not None and zone.city_id != city_id:
        errors.setdefault("zone_id", []).append(translate("validation.zone_city_mismatch", locale))
    if errors:
        raise ApiError(422, "validation_failed", errors=errors)


def _pinned_by_rates(db: Session, location_id: int, zone_id: int | None) -> bool:
    """Override rates on this location whose zone would no longer match."""
    return db.query(db.query(Rate).filter(or_(
        and_(Rate.from_location_id == location_id, Rate.from_zone_id != zone_id),
        and_(Rate.to_location_id == location_id, Rate.to_zone_id != zone_id),
    )).exists()).scalar()


@router.get("/locations")
@limiter.limit(GENERAL_LIMIT)
def list_locations(request: Request, db: Session = Depends(get_db)):
    return ok(request, {"locations": [location_out(l) for l in _active_locations(db).all()]}, "resources.location.retrieved")


@router.post("/locations", status_code=201)
@limiter.limit(GENERAL_LIMIT)
def create_location(body: LocationIn, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    _check_refs(db, body.city_id, body.zone_id, locale)
    l = Location(**body.model_dump())
    l.name = l.name.strip()
    db.add(l); db.commit(); db.refresh(l)
    return created(request, {"location": location_out(l)}, "resources.location.created")


@router.get("/locations/type/{location_type}")
@limiter.limit(GENERAL_LIMIT)
def locations_by_type(location_type: str, request: Request, db: Session = Depends(get_db)):
    location_type = location_type.upper()
    if location_type not in LOCATION_TYPES:
        raise NotFound()
    items = _active_locations(db).filter(Location.type == location_type).all()
    return ok(request, {"locations": [location_out(l) for l in items]}, "resources.location.retrieved")


@router.get("/locations/{location_id}")
@limiter.limit(GENERAL_LIMIT)
def get_location(location_id: int, request: Request, db: Session = Depends(get_db)):
    l = get_or_404(db, Location, location_id, "location")
    return ok(request, {"location": location_out(l)}, "resources.location.retrieved")


@router.api_route("/locations/{location_id}", methods=["PUT", "PATCH"])
@limiter.limit(GENERAL_LIMIT)
def update_location(location_id: int, body: LocationPatch, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    l = get_or_404(db, Location, location_id, "location")
    changes = body.model_dump(exclude_unset=True)
    city_id = changes.get("city_id") or l.city_id
    zone_id = changes["zone_id"] if "zone_id" in changes else l.zone_id
    errors: dict = {}
    if zone_id != l.zone_id and _pinned_by_rates(db, l.id, zone_id):
        errors["zone_id"] = [translate("validation.location_pinned_by_rates", locale)]
    _check_refs(db, city_id, zone_id, locale, errors)
    for field, value in changes.items():
        if value is None and field in ("name", "city_id", "type", "active"):
            continue
        setattr(l, field, value)
    if "name" in changes and changes["name"]:
        l.name = l.name.strip()
    db.commit(); db.refresh(l)
    return ok(request, {"location": location_out(l)}, "resources.location.updated")


@router.delete("/locations/{location_id}")
@limiter.limit(GENERAL_LIMIT)
def delete_location(location_id: int, request: Request, db: Session = Depends(get_db)):
    l = get_or_404(db, Location, location_id, "location")
    db.delete(l); db.commit()
    return ok(request, None, "resources.location.deleted")


@router.get("/cities/{city_id}/locations")
@limiter.limit(GENERAL_LIMIT)
def locations_by_city(city_id: int, request: Request, db: Session = Depends(get_db)):
    c = get_or_404(db, City, city_id, "city")
    items = _active_locations(db).filter(Location.city_id == c.id).all()
    return ok(request, {"locations": [location_out(l) for l in items]}, "resources.location.retrieved")
