from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from app.db.session import get_db
from app.api.deps import Pagination, get_locale, get_or_404, sort_params
from app.core.errors import ApiError, Conflict
from app.core.i18n import translate
from app.core.responses import Page, created, ok
from app.core.rate_limiting import GENERAL_LIMIT, limiter
from app.models.rate import Rate
from app.models.service_feature import ServiceFeature
from app.models.vehicle_type import VehicleType
from app.schemas.vehicle_type import VehicleTypeIn, VehicleTypePatch
from app.services.serializers import vehicle_type_out

router = APIRouter(tags=["vehicle-types"])

VEHICLE_SORTS = ("name", "code", "max_pax", "max_units", "created_at", "updated_at")


def _features(db: Session, ids: list[int], locale: str) -> list[ServiceFeature]:
    ids = list(dict.fromkeys(ids))
    if not ids:
        return []
    found = db.query(ServiceFeature).filter(ServiceFeature.id.in_(ids)).all()
    if len(found) != len(ids):
        message = translate("validation.exists", locale, attribute="service feature ids")
        raise ApiError(422, "validation_failed", errors={"service_feature_ids": [message]})
    return found


@router.get("/vehicle-types")
@limiter.limit(GENERAL_LIMIT)
def list_vehicle_types(request: Request,
                       search: Optional[str] = None, active: Optional[bool] = None,
                       pg: Pagination = Depends(),
                       sort: tuple = Depends(sort_params(VEHICLE_SORTS, "name")),
                       db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    query = db.query(VehicleType).options(selectinload(VehicleType.service_features))
    if search:
        s = f"%{search}%"
        query = query.filter(or_(VehicleType.name.ilike(s), VehicleType.code.ilike(s)))
    if active is not None:
        query = query.filter(VehicleType.active == active)
    column, desc = sort
    col = getattr(VehicleType, column)
    query = query.order_by(col.desc() if desc else col.asc(), VehicleType.id.asc())
    page = Page(query, pg.page, pg.per_page)
    return ok(request, {
        "vehicle_types": [vehicle_type_out(v, locale) for v in page.items],
        "pagination": page.meta(),
    }, "resources.vehicle_type.retrieved")


@router.post("/vehicle-types", status_code=201)
@limiter.limit(GENERAL_LIMIT)
def create_vehicle_type(body: VehicleTypeIn, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    features = _features(db, body.service_feature_ids, locale)
    v = VehicleType(**body.model_dump(exclude={"service_feature_ids"}))
    v.service_features = features
    db.add(v); db.commit(); db.refresh(v)
    return created(request, {"vehicle_type": vehicle_type_out(v, locale)}, "resources.vehicle_type.created")


@router.get("/vehicle-types/{vehicle_type_id}")
@limiter.limit(GENERAL_LIMIT)
def get_vehicle_type(vehicle_type_id: int, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    v = get_or_404(db, VehicleType, vehicle_type_id, "vehicle_type")
    return ok(request, {"vehicle_type": vehicle_type_out(v, locale)}, "resources.vehicle_type.retrieved")


@router.api_route("/vehicle-types/{vehicle_type_id}", methods=["PUT", "PATCH"])
@limiter.limit(GENERAL_LIMIT)
def update_vehicle_type(vehicle_type_id: int, body: VehicleTypePatch, request: Request,
                        db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    v = get_or_404(db, VehicleType, vehicle_type_id, "vehicle_type")
    changes = body.model_dump(exclude_unset=True, exclude={"service_feature_ids"})
    for field, value in changes.items():
        if value is None and field in ("name", "code", "max_units", "max_pax", "active"):
            continue
        setattr(v, field, value)
    if body.service_feature_ids is not None:
        v.service_features = _features(db, body.service_feature_ids, locale)
    db.commit(); db.refresh(v)
    return ok(request, {"vehicle_type": vehicle_type_out(v, locale)}, "resources.vehicle_type.updated")


@router.delete("/vehicle-types/{vehicle_type_id}")
@limiter.limit(GENERAL_LIMIT)
def delete_vehicle_type(vehicle_type_id: int, request: Request, db: Session = Depends(get_db)):
    v = get_or_404(db, VehicleType, vehicle_type_id, "vehicle_type")
    if db.query(db.query(Rate).filter(Rate.vehicle_type_id == v.id).exists()).scalar():
        raise Conflict("vehicle_type")
    v.service_features = []
    db.delete(v); db.commit()
    return ok(request, None, "resources.vehicle_type.deleted")
