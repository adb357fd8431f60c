import os
from datetime import date, timedelta
from decimal import Decimal
from types import SimpleNamespace

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["CACHE_ENABLED"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.main import app
from app.db.session import Base, get_db, make_engine
from app.models.city import City
from app.models.currency_exchange import CurrencyExchange
from app.models.location import Location
from app.models.rate import Rate
from app.models.service_feature import ServiceFeature
from app.models.service_type import ServiceType
from app.models.vehicle_type import VehicleType
from app.models.zone import Zone


@pytest.fixture()
def engine():
    eng = make_engine("sqlite://")
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db(session_factory):
    s = session_factory()
    yield s
    s.close()


@pytest.fixture()
def client(session_factory):
    def _get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_rate(db, service_type, vehicle, from_zone, to_zone, one_way="50.00", total_one_way="60.00",
              round_trip="90.00", total_round_trip="110.00", **kwargs) -> Rate:
    r = Rate(
        service_type_id=service_type.id,
        vehicle_type_id=vehicle.id,
        from_zone_id=from_zone.id,
        to_zone_id=to_zone.id,
        cost_vehicle_one_way=Decimal(one_way),
        total_one_way=Decimal(total_one_way),
        cost_vehicle_round_trip=Decimal(round_trip),
        total_round_trip=Decimal(total_round_trip),
        **kwargs,
    )
    db.add(r)
    db.commit()
    return r


@pytest.fixture()
def catalog(db):
    """Cancun with an airport zone, a hotel zone, two hotels and a zoneless villa."""
    city = City(name="Cancun", state="Quintana Roo", country="Mexico")
    db.add(city)
    db.flush()
    airport_zone = Zone(name="Airport Zone", city_id=city.id)
    hotel_zone = Zone(name="Hotel Zone", city_id=city.id)
    db.add_all([airport_zone, hotel_zone])
    db.flush()
    airport = Location(name="Cancun International Airport", type="A", city_id=city.id, zone_id=airport_zone.id)
    hotel = Location(name="Grand Oasis", type="H", city_id=city.id, zone_id=hotel_zone.id, address="Blvd. Kukulcan km 16.5")
    other_hotel = Location(name="Hyatt Ziva", type="H", city_id=city.id, zone_id=hotel_zone.id)
    villa = Location(name="Villa Remota", type="P", city_id=city.id, zone_id=None)
    db.add_all([airport, hotel, other_hotel, villa])

    rt = ServiceType(code="RT", name="Round Trip", tpv_type="service_airport")
    ow = ServiceType(code="OW", name="One Way", tpv_type="service_airport")
    hth = ServiceType(code="HTH", name="Hotel to Hotel", tpv_type="service_hotel_hotel")
    db.add_all([rt, ow, hth])

    wifi = ServiceFeature(name_en="WiFi", name_es="Internet inalámbrico", sort_order=1)
    water = ServiceFeature(name_en="Bottled water", name_es="Agua embotellada", sort_order=2)
    db.add_all([wifi, water])
    db.flush()

    standard = VehicleType(name="Standard Private", code="ES", max_units=10, max_pax=8, travel_time="25 min")
    standard.service_features = [wifi, water]
    vip = VehicleType(name="VIP Private", code="VP", max_units=4, max_pax=4, travel_time="25 min")
    vip.service_features = [wifi]
    db.add_all([standard, vip])

    db.add(CurrencyExchange(from_currency="USD", to_currency="MXN", exchange_rate=Decimal("20.000000")))
    db.commit()

    standard_rate = make_rate(db, ow, standard, airport_zone, hotel_zone)
    vip_rate = make_rate(db, ow, vip, airport_zone, hotel_zone, "80.00", "95.00", "150.00", "170.00")

    return SimpleNamespace(
        city=city, airport_zone=airport_zone, hotel_zone=hotel_zone,
        airport=airport, hotel=hotel, other_hotel=other_hotel, villa=villa,
        rt=rt, ow=ow, hth=hth, wifi=wifi, water=water,
        standard=standard, vip=vip,
        standard_rate=standard_rate, vip_rate=vip_rate,
    )


@pytest.fixture()
def today():
    return date.today()


@pytest.fixture()
def yesterday(today):
    return today - timedelta(days=1)


@pytest.fixture()
def rate_factory(db):
    def _make(*args, **kwargs):
        return make_rate(db, *args, **kwargs)
    return _make
