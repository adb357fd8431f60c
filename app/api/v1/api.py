from fastapi import APIRouter
from app.api.v1.routes.health import router as health_router
from app.api.v1.routes.cities import router as cities_router
from app.api.v1.routes.zones import router as zones_router
from app.api.v1.routes.locations import router as locations_router
from app.api.v1.routes.vehicle_types import router as vehicle_types_router
from app.api.v1.routes.service_features import router as service_features_router
from app.api.v1.routes.rates import router as rates_router
from app.api.v1.routes.quote import router as quote_router
from app.api.v1.routes.highlighted_quotes import router as highlighted_quotes_router
from app.api.v1.routes.autocomplete import router as autocomplete_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health_router)
api_router.include_router(cities_router)
api_router.include_router(zones_router)
api_router.include_router(locations_router)
api_router.include_router(vehicle_types_router)
api_router.include_router(service_features_router)
api_router.include_router(rates_router)
api_router.include_router(quote_router)
api_router.include_router(highlighted_quotes_router)
api_router.include_router(autocomplete_router)
