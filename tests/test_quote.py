from datetime import timedelta

from app.services.quote_service import cache_key, map_service_type_code, service_type_tpv


def _quote(client, catalog, **params):
    query = {
        "service_type": "one-way",
        "from_location_id": catalog.airport.id,
        "to_location_id": catalog.hotel.id,
        "pax": 2,
    }
    query.update(params)
    return client.get("/api/v1/quote", params=query)


def test_quote_in_usd(client, catalog):
    r = _quote(client, catalog)
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Quote calculated successfully"
    data = body["data"]
    assert data["exchangeDollar"] == "1.000000"
    assert data["exchangeMXN"] == "20.000000"
    assert data["currency"] == "usd"
    assert data["fromHotelId"] == str(catalog.airport.id)
    assert data["fromHotel"] == "CANCUN INTERNATIONAL AIRPORT"
    assert data["toHotel"] == "GRAND OASIS"
    assert data["toDestination"] == "cancun"
    assert data["toDestinationId"] == catalog.city.id
    assert data["serviceTypeTPV"] == "service_airport"

    by_type = {p["type"]: p for p in data["prices"]}
    assert set(by_type) == {"ES", "VP"}
    standard = by_type["ES"]
    assert standard["costVehicleOW"] == "50.00"
    assert standard["totalOW"] == 60
    assert standard["costVehicleRT"] == "90.00"
    assert standard["totalRT"] == 110
    assert standard["mPax"] == 8
    assert standard["available"] == 1
    assert [f["name"] for f in standard["features"]] == ["WiFi", "Bottled water"]


def test_quote_in_mxn(client, catalog):
    data = _quote(client, catalog, currency="mxn").json()["data"]
    assert data["currency"] == "mxn"
    assert data["exchangeDollar"] == "0.050000"
    assert data["exchangeMXN"] == "1.000000"
    standard = next(p for p in data["prices"] if p["type"] == "ES")
    assert standard["costVehicleOW"] == "1000.00"
    assert standard["totalOW"] == 1200


def test_quote_localizes_features(client, catalog):
    r = _quote(client, catalog, locale="es")
    assert r.json()["message"] == "Cotización calculada exitosamente"
    standard = next(p for p in r.json()["data"]["prices"] if p["type"] == "ES")
    assert [f["name"] for f in standard["features"]] == ["Internet inalámbrico", "Agua embotellada"]


def test_quote_filters_by_capacity(client, catalog):
    data = _quote(client, catalog, pax=6).json()["data"]
    assert [p["type"] for p in data["prices"]] == ["ES"]

    r = _quote(client, catalog, pax=9)
    assert r.status_code == 404
    assert r.json()["message"] == "No vehicles available for this route"


def test_quote_prefers_location_specific_rate(client, catalog, rate_factory):
    rate_factory(
        catalog.ow, catalog.vip, catalog.airport_zone, catalog.hotel_zone, "35.00", "42.00", "0", "0",
        from_location_id=catalog.airport.id, to_location_id=catalog.hotel.id,
    )
    prices = _quote(client, catalog).json()["data"]["prices"]
    assert len(prices) == 1
    assert prices[0]["type"] == "VP"
    assert prices[0]["totalOW"] == 42
    assert prices[0]["costVehicleRT"] is None
    assert prices[0]["totalRT"] is None


def test_quote_without_rates(client, catalog):
    r = _quote(client, catalog, from_location_id=catalog.hotel.id, to_location_id=catalog.other_hotel.id)
    assert r.status_code == 404
    assert r.json()["message"] == "Rate not available for this route"


def test_quote_to_location_without_zone(client, catalog):
    r = _quote(client, catalog, to_location_id=catalog.villa.id)
    assert r.status_code == 404
    assert r.json()["message"] == "No routes found for the specified locations"


def test_quote_unsupported_currency(client, catalog):
    r = _quote(client, catalog, currency="EUR")
    assert r.status_code == 400
    assert r.json()["message"] == "Currency EUR is not supported"


def test_quote_validation(client, catalog, yesterday):
    r = _quote(client, catalog, service_type="weekly", pax=0,
               to_location_id=catalog.airport.id, date=str(yesterday))
    assert r.status_code == 422
    errors = r.json()["errors"]
    assert errors["service_type"] == ["The service type must be one of: round-trip, one-way, hotel-to-hotel"]
    assert errors["pax"] == ["At least 1 passenger is required"]
    assert errors["to_location_id"] == ["Pickup and dropoff locations must be different"]
    assert errors["date"] == ["The date must be today or in the future"]

    r = _quote(client, catalog, pax=51, from_location_id=999)
    errors = r.json()["errors"]
    assert errors["pax"] == ["Maximum 50 passengers allowed"]
    assert errors["from_location_id"] == ["The selected from location id does not exist"]


def test_quote_for_future_date(client, catalog, today):
    r = _quote(client, catalog, date=str(today + timedelta(days=30)))
    assert r.status_code == 200


def test_service_type_codes():
    assert map_service_type_code("round-trip") == "RT"
    assert map_service_type_code("Round Trip") == "RT"
    assert map_service_type_code("arrival") == "OW"
    assert map_service_type_code("hotel_to_hotel") == "HTH"


def test_service_type_tpv(catalog):
    assert service_type_tpv(catalog.airport, catalog.hotel) == "service_airport"
    assert service_type_tpv(catalog.hotel, catalog.other_hotel) == "service_hotel_hotel"


def test_cache_key_includes_locale(today):
    assert cache_key("one-way", 1, 2, 3, today, "USD", "es") == f"quote:one-way:1:2:3:{today.isoformat()}:USD:es"


def test_quote_keeps_total_when_cost_is_empty(client, catalog, rate_factory):
    rate_factory(
        catalog.ow, catalog.vip, catalog.airport_zone, catalog.hotel_zone, "35.00", "42.00", "0", "110.00",
        from_location_id=catalog.airport.id, to_location_id=catalog.hotel.id,
    )
    price = _quote(client, catalog).json()["data"]["prices"][0]
    assert price["costVehicleRT"] is None
    assert price["totalRT"] == 110
    assert price["costVehicleOW"] == "35.00"
