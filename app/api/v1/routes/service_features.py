from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.api.deps import Pagination, get_locale, get_or_404, sort_params
from app.core.errors import Conflict
from app.core.responses import Page, created, ok
from app.core.rate_limiting import GENERAL_LIMIT, limiter
from app.models.service_feature import ServiceFeature
from app.models.vehicle_type import vehicle_type_service_feature
from app.schemas.service_feature import ServiceFeatureIn, ServiceFeaturePatch
from app.services.serializers import feature_admin_out

router = APIRouter(tags=["service-features"])

FEATURE_SORTS = ("sort_order", "name_en", "name_es", "created_at", "updated_at")


@router.get("/service-features")
@limiter.limit(GENERAL_LIMIT)
def list_service_features(request: Request,
                          search: Optional[str] = None, active: Optional[bool] = None,
                          pg: Pagination = Depends(),
                          sort: tuple = Depends(sort_params(FEATURE_SORTS, "sort_order")),
                          db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    query = db.query(ServiceFeature)
    if search:
        s = f"%{search}%"
        query = query.filter(or_(ServiceFeature.name_en.ilike(s), ServiceFeature.name_es.ilike(s)))
    if active is not None:
        query = query.filter(ServiceFeature.active == active)
    column, desc = sort
    col = getattr(ServiceFeature, column)
    query = query.order_by(col.desc() if desc else col.asc(), ServiceFeature.id.asc())
    page = Page(query, pg.page, pg.per_page)
    return ok(request, {
        "features": [feature_admin_out(f, locale) for f in page.items],
        "pagination": page.meta(),
    }, "resources.service_feature.retrieved")


@router.post("/service-features", status_code=201)
@limiter.limit(GENERAL_LIMIT)
def create_service_feature(body: ServiceFeatureIn, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    f = ServiceFeature(**body.model_dump())
    db.add(f); db.commit(); db.refresh(f)
    return created(request, {"feature": feature_admin_out(f, locale)}, "resources.service_feature.created")


@router.get("/service-features/{feature_id}")
@limiter.limit(GENERAL_LIMIT)
def get_service_feature(feature_id: int, request: Request, db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    f = get_or_404(db, ServiceFeature, feature_id, "service_feature")
    return ok(request, {"feature": feature_admin_out(f, locale)}, "resources.service_feature.retrieved")


@router.api_route("/service-features/{feature_id}", methods=["PUT", "PATCH"])
@limiter.limit(GENERAL_LIMIT)
def update_service_feature(feature_id: int, body: ServiceFeaturePatch, request: Request,
                           db: Session = Depends(get_db), locale: str = Depends(get_locale)):
    f = get_or_404(db, ServiceFeature, feature_id, "service_feature")
    for field, value in body.model_dump(exclude_unset=True).items():
        if value is None and field in ("name_en", "name_es", "active", "sort_order"):
            continue
        setattr(f, field, value)
    db.commit(); db.refresh(f)
    return ok(request, {"feature": feature_admin_out(f, locale)}, "resources.service_feature.updated")


@router.delete("/service-features/{feature_id}")
@limiter.limit(GENERAL_LIMIT)
def delete_service_feature(feature_id: int, request: Request, db: Session = Depends(get_db)):
    f = get_or_404(db, ServiceFeature, feature_id, "service_feature")
    attached = db.query(vehicle_type_service_feature).filter(
        vehicle_type_service_feature.c.service_feature_id == f.id
    ).first()
    if attached:
        raise Conflict("service_feature")
    db.delete(f); db.commit()
    return ok(request, None, "resources.service_feature.deleted")
