from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from app.models.city import City
from app.models.location import Location
from app.models.zone import Zone

SEARCH_TYPES = ("round-trip", "arrival", "departure", "transfer-one-way", "transfer-round-trip")


def _like(q: str) -> str:
    return f"%{(q or '').strip()}%"


def airports(db: Session, q: str, limit: int = 10) -> list[dict]:
    items = (
        db.query(Location)
        .join(Location.city)
        .options(joinedload(Location.city))
        .filter(Location.type == "A", Location.active == True)
        .filter(or_(Location.name.ilike(_like(q)), City.name.ilike(_like(q))))
        .order_by(Location.name)
        .limit(limit)
        .all()
    )
    return [{"id": str(a.id), "name": a.name, "city": a.city.name if a.city else ""} for a in items]


def zones(db: Session, q: str, limit: int = 20) -> list[dict]:
    items = (
        db.query(Zone)
        .join(Zone.city)
        .options(joinedload(Zone.city))
        .filter(Zone.active == True)
        .filter(or_(Zone.name.ilike(_like(q)), City.name.ilike(_like(q))))
        .order_by(Zone.name)
        .limit(limit)
        .all()
    )
    return [{"id": str(z.id), "name": z.name, "city": z.city.name if z.city else ""} for z in items]


def grouped_locations(db: Session, q: str, limit: int = 50) -> dict:
    """Active locations matching ``q`` grouped by city id; empty query yields {}."""
    if not (q or "").strip():
        return {}
    items = (
        db.query(Location)
        .join(Location.city)
        .outerjoin(Location.zone)
        .options(joinedload(Location.city))
        .filter(Location.active == True)
        .filter(or_(
            Location.name.ilike(_like(q)),
            Location.address.ilike(_like(q)),
            Zone.name.ilike(_like(q)),
            City.name.ilike(_like(q)),
        ))
        .order_by(Location.name)
        .limit(limit)
        .all()
    )
    grouped: dict = {}
    for loc in items:
        city_name = loc.city.name if loc.city else "Unknown"
        group = grouped.setdefault(str(loc.city_id), {"name": city_name, "locations": []})
        group["locations"].append({"id": str(loc.id), "name": loc.name, "type": loc.type, "city": city_name})
    return grouped


def search(db: Session, type_: str, input_: str, q: str = "", from_id: str | None = None) -> dict:
    """Suggestions for one search box of the booking widget.

    Arrivals and round trips start at an airport, departures end at one;
    transfers may use anything.
    """
    q = q or ""
    result = {"airport": [], "zones": [], "locations": {}}
    if type_ in ("round-trip", "arrival"):
        if input_ == "from":
            result["airport"] = airports(db, q)
        else:
            result["zones"] = zones(db, q)
            result["locations"] = grouped_locations(db, q)
    elif type_ == "departure":
        if input_ == "from":
            result["zones"] = zones(db, q)
            result["locations"] = grouped_locations(db, q)
        else:
            result["airport"] = airports(db, q)
    else:
        result["airport"] = airports(db, q, limit=5)
        result["zones"] = zones(db, q, limit=15)
        result["locations"] = grouped_locations(db, q)
    return result
