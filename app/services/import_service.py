import json
import logging
from pathlib import Path

from sqlalchemy.orm import Session

from app.models.city import City
from app.models.location import Location
from app.models.zone import Zone
from app.schemas.initial_data import InitialData

logger = logging.getLogger(__name__)

CITY_LOCATION_TYPES = ("H", "B")


def _first_or_create(db: Session, model, lookup: dict, defaults: dict):
    """Return (row, created). Matching on ``lookup`` keeps reruns from duplicating rows."""
    row = db.query(model).filter_by(**lookup).first()
    if row:
        return row, False
    row = model(**lookup, **defaults)
    db.add(row)
    db.flush()
    return row, True


def import_initial_data(db: Session, payload: InitialData | dict) -> dict:
    """Import cities, zones, airports and city locations from a legacy dump.

    Returns the number of rows created per entity. Entries whose city cannot
    be resolved are skipped.
    """
    data = payload if isinstance(payload, InitialData) else InitialData.model_validate(payload)
    counts = {"cities": 0, "zones": 0, "airports": 0, "locations": 0}
    city_by_name: dict[str, City] = {}

    for ext_city_id, block in data.locations.items():
        name = block.name.strip()
        city, created = _first_or_create(db, City, {"name": name}, {"external_id": str(ext_city_id)})
        city_by_name[name] = city
        counts["cities"] += created

    for z in data.zones:
        name = z.city.strip()
        if name not in city_by_name:
            city, created = _first_or_create(db, City, {"name": name}, {"external_id": None})
            city_by_name[name] = city
            counts["cities"] += created

    for z in data.zones:
        city = city_by_name.get(z.city.strip())
        if not city:
            continue
        _, created = _first_or_create(db, Zone, {"external_id": z.id}, {"city_id": city.id, "name": z.name.strip()})
        counts["zones"] += created

    for a in data.airport:
        city = city_by_name.get(a.city.strip())
        if not city:
            logger.debug("skipping airport %s: unknown city %r", a.id, a.city)
            continue
        _, created = _first_or_create(
            db, Location, {"external_id": a.id},
            {"city_id": city.id, "zone_id": None, "name": a.name.strip(), "type": "A"},
        )
        counts["airports"] += created

    for block in data.locations.values():
        city = city_by_name.get(block.name.strip())
        if not city:
            continue
        for loc in block.locations:
            loc_type = loc.type if loc.type in CITY_LOCATION_TYPES else "P"
            _, created = _first_or_create(
                db, Location, {"external_id": loc.id},
                {"city_id": city.id, "zone_id": None, "name": loc.name.strip(), "type": loc_type},
            )
            counts["locations"] += created

    db.commit()
    logger.info("initial data import: %s", counts)
    return counts


def import_file(db: Session, path: str | Path) -> dict:
    with open(path, encoding="utf-8") as fh:
        return import_initial_data(db, json.load(fh))
