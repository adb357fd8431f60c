"""JSON shapes for API resources.

Decimals leave as 2-decimal strings, dates and timestamps as ISO strings.
"""

from app.models.city import City
from app.models.location import Location
from app.models.rate import Rate
from app.models.service_feature import ServiceFeature
from app.models.vehicle_type import VehicleType
from app.models.zone import Zone
from app.services.rate_service import is_location_specific, money


def _iso(value):
    return value.isoformat() if value is not None else None


def city_out(c: City, **extra) -> dict:
    out = {
        "id": c.id,
        "name": c.name,
        "state": c.state,
        "country": c.country,
        "slug": c.slug,
        "description": c.description,
        "image": c.image,
        "active": bool(c.active),
        "created_at": _iso(c.created_at),
        "updated_at": _iso(c.updated_at),
    }
    out.update(extra)
    return out


def city_ref(c: City | None) -> dict | None:
    if c is None:
        return None
    return {"id": c.id, "name": c.name, "state": c.state, "country": c.country}


def zone_out(z: Zone, with_locations: bool = False) -> dict:
    out = {
        "id": z.id,
        "name": z.name,
        "description": z.description,
        "active": bool(z.active),
        "city_id": z.city_id,
        "city": city_ref(z.city),
        "created_at": _iso(z.created_at),
        "updated_at": _iso(z.updated_at),
    }
    if with_locations:
        out["locations"] = [location_out(l, with_city=False) for l in z.locations if l.active]
    return out


def location_out(l: Location, with_city: bool = True) -> dict:
    out = {
        "id": l.id,
        "name": l.name,
        "address": l.address,
        "type": l.type,
        "type_name": l.type_name,
        "active": bool(l.active),
        "description": l.description,
    }
    if l.latitude is not None and l.longitude is not None:
        out["coordinates"] = {"latitude": float(l.latitude), "longitude": float(l.longitude)}
    if with_city:
        out["city"] = city_ref(l.city)
    out["city_id"] = l.city_id
    out["zone_id"] = l.zone_id
    out["created_at"] = _iso(l.created_at)
    out["updated_at"] = _iso(l.updated_at)
    return out


def feature_out(f: ServiceFeature, locale: str = "en") -> dict:
    return {
        "id": f.id,
        "name": f.get_name(locale),
        "description": f.get_description(locale),
        "icon": f.icon,
    }


def feature_admin_out(f: ServiceFeature, locale: str = "en") -> dict:
    out = feature_out(f, locale)
    out.update({
        "name_en": f.name_en,
        "name_es": f.name_es,
        "description_en": f.description_en,
        "description_es": f.description_es,
        "active": bool(f.active),
        "sort_order": f.sort_order,
        "created_at": _iso(f.created_at),
        "updated_at": _iso(f.updated_at),
    })
    return out


def vehicle_type_out(v: VehicleType, locale: str = "en") -> dict:
    return {
        "id": v.id,
        "name": v.name,
        "code": v.code,
        "image": v.image,
        "max_units": v.max_units,
        "max_pax": v.max_pax,
        "travel_time": v.travel_time,
        "video_url": v.video_url,
        "frame": v.frame,
        "active": bool(v.active),
        "features": [feature_out(f, locale) for f in v.service_features],
        "created_at": _iso(v.created_at),
        "updated_at": _iso(v.updated_at),
    }


def _rate_common(r: Rate) -> dict:
    return {
        "id": r.id,
        "service_type": {"id": r.service_type.id, "name": r.service_type.name, "code": r.service_type.code},
        "vehicle_type": {"id": r.vehicle_type.id, "name": r.vehicle_type.name, "code": r.vehicle_type.code},
        "pricing_type": "location" if is_location_specific(r) else "zone",
        "cost_vehicle_one_way": money(r.cost_vehicle_one_way),
        "total_one_way": money(r.total_one_way),
        "cost_vehicle_round_trip": money(r.cost_vehicle_round_trip),
        "total_round_trip": money(r.total_round_trip),
        "num_vehicles": r.num_vehicles,
        "available": bool(r.available),
        "valid_from": _iso(r.valid_from),
        "valid_to": _iso(r.valid_to),
    }


def rate_out(r: Rate) -> dict:
    out = _rate_common(r)
    out.update({
        "highlighted": bool(r.highlighted),
        "highlight_badge": r.highlight_badge,
        "highlight_description": r.highlight_description,
        "from_zone": {"id": r.from_zone.id, "name": r.from_zone.name},
        "to_zone": {"id": r.to_zone.id, "name": r.to_zone.name},
        "created_at": _iso(r.created_at),
        "updated_at": _iso(r.updated_at),
    })
    if is_location_specific(r):
        out["from_location"] = {"id": r.from_location.id, "name": r.from_location.name}
        out["to_location"] = {"id": r.to_location.id, "name": r.to_location.name}
    return out


def _endpoint(location: Location | None, zone: Zone) -> dict:
    if location is not None:
        return {
            "type": "location",
            "location_id": location.id,
            "location_name": location.name,
            "zone_name": location.zone.name if location.zone else None,
            "city_name": location.city.name if location.city else None,
        }
    return {
        "type": "zone",
        "zone_id": zone.id,
        "zone_name": zone.name,
        "city_name": zone.city.name if zone.city else None,
    }


def city_rate_out(r: Rate) -> dict:
    out = _rate_common(r)
    specific = is_location_specific(r)
    out["from"] = _endpoint(r.from_location if specific else None, r.from_zone)
    out["to"] = _endpoint(r.to_location if specific else None, r.to_zone)
    return out
