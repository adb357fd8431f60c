from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session, joinedload

from app.db.session import get_db
from app.api.deps import get_locale, get_or_404, must_exist
from app.core.errors import ApiError
from app.core.i18n import translate
from app.core.responses import created, ok
from app.core.rate_limiting import GENERAL_LIMIT, limiter
from app.models.city import City
from app.models.location import Location
from app.models.zone import Zone
from app.schemas.zone import ZoneIn, ZonePatch
from app.services.serializers import zone_out

router = APIRouter(tags=["zones"])


def _active_zones(db: Session):
    return db.query(Zone).options(joinedload(Zone.city)).filter(Zone.active == True).order_by(Zone.name)


@router.get("/zones")
@limiter.limit(GENERAL_LIMIT)
def list_zones(request: Request, db: Session = Depends(get_db)):
    return ok(request, {"zones": [zone_out(z) for z in _active_zones(db).all()]}, "resources.zone.retrieved")


@router.post("/zones", status_code=201)
@limiter.limit(GENERAL_LIMIT)
def create_zone(body: ZoneIn, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    errors: dict = {}
    must_exist(db, City, body.city_id, "city_id", locale, errors)
    if errors:
        raise ApiError(422, "validation_failed", errors=errors)
    z = Zone(name=body.name.strip(), city_id=body.city_id, description=body.description, active=body.active)
    db.add(z); db.commit(); db.refresh(z)
    return created(request, {"zone": zone_out(z)}, "resources.zone.created")


@router.get("/zones/{zone_id}")
@limiter.limit(GENERAL_LIMIT)
def get_zone(zone_id: int, request: Request, db: Session = Depends(get_db)):
    z = get_or_404(db, Zone, zone_id, "zone")
    return ok(request, {"zone": zone_out(z, with_locations=True)}, "resources.zone.retrieved")


@router.api_route("/zones/{zone_id}", methods=["PUT", "PATCH"])
@limiter.limit(GENERAL_LIMIT)
def update_zone(zone_id: int, body: ZonePatch, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    z = get_or_404(db, Zone, zone_id, "zone")
    errors: dict = {}
    must_exist(db, City, body.city_id, "city_id", locale, errors)
    if "city_id" not in errors and body.city_id is not None and body.city_id != z.city_id:
        has_locations = db.query(db.query(Location).filter(Location.zone_id == z.id).exists()).scalar()
        if has_locations:
            errors.setdefault("city_id", []).append(translate("validation.zone_has_locations", locale))
    if errors:
        raise ApiError(422, "validation_failed", errors=errors)
    if body.name is not None: z.name = body.name.strip()
    if body.city_id is not None: z.city_id = body.city_id
    if "description" in body.model_fields_set: z.description = body.description
    if body.active is not None: z.active = bool(body.active)
    db.commit(); db.refresh(z)
    return ok(request, {"zone": zone_out(z)}, "resources.zone.updated")


@router.delete("/zones/{zone_id}")
@limiter.limit(GENERAL_LIMIT)
def delete_zone(zone_id: int, request: Request, db: Session = Depends(get_db)):
    """Locations keep existing without a zone; the zone's rates go with it."""
    z = get_or_404(db, Zone, zone_id, "zone")
    db.query(Location).filter(Location.zone_id == z.id).update({Location.zone_id: None}, synchronize_session=False)
    db.delete(z); db.commit()
    return ok(request, None, "resources.zone.deleted")


@router.get("/cities/{city_id}/zones")
@limiter.limit(GENERAL_LIMIT)
def zones_by_city(city_id: int, request: Request, db: Session = Depends(get_db)):
    c = get_or_404(db, City, city_id, "city")
    zones = _active_zones(db).filter(Zone.city_id == c.id).all()
    return ok(request, {"zones": [zone_out(z) for z in zones]}, "resources.zone.retrieved")
