from datetime import timedelta


def _payload(catalog, **overrides):
    body = {
        "service_type_id": catalog.rt.id,
        "vehicle_type_id": catalog.standard.id,
        "from_zone_id": catalog.airport_zone.id,
        "to_zone_id": catalog.hotel_zone.id,
        "cost_vehicle_one_way": "40.00",
        "total_one_way": "48.00",
        "cost_vehicle_round_trip": "75.00",
        "total_round_trip": "90.00",
    }
    body.update(overrides)
    return body


def test_create_zone_rate(client, catalog):
    r = client.post("/api/v1/rates", json=_payload(catalog))
    assert r.status_code == 201
    rate = r.json()["data"]["rate"]
    assert rate["pricing_type"] == "zone"
    assert rate["total_one_way"] == "48.00"
    assert rate["service_type"]["code"] == "RT"
    assert rate["from_zone"]["name"] == "Airport Zone"
    assert "from_location" not in rate


def test_create_location_specific_rate(client, catalog):
    r = client.post("/api/v1/rates", json=_payload(
        catalog, from_location_id=catalog.airport.id, to_location_id=catalog.hotel.id,
    ))
    assert r.status_code == 201
    rate = r.json()["data"]["rate"]
    assert rate["pricing_type"] == "location"
    assert rate["to_location"] == {"id": catalog.hotel.id, "name": "Grand Oasis"}


def test_location_override_must_sit_in_its_zone(client, catalog):
    r = client.post("/api/v1/rates", json=_payload(
        catalog, from_location_id=catalog.hotel.id, to_location_id=catalog.other_hotel.id,
    ))
    assert r.status_code == 422
    assert r.json()["errors"] == {
        "from_location_id": ["The from location must belong to the specified from zone"],
    }


def test_missing_references(client, catalog):
    r = client.post("/api/v1/rates", json=_payload(catalog, vehicle_type_id=999, to_zone_id=998))
    assert r.status_code == 422
    errors = r.json()["errors"]
    assert errors["vehicle_type_id"] == ["The selected vehicle type id does not exist"]
    assert errors["to_zone_id"] == ["The selected to zone id does not exist"]


def test_validity_window_must_be_ordered(client, catalog, today):
    r = client.post("/api/v1/rates", json=_payload(
        catalog, valid_from=str(today), valid_to=str(today - timedelta(days=3)),
    ))
    assert r.status_code == 422
    assert r.json()["errors"]["valid_to"] == ["The valid to must be a date after or equal to valid from"]


def test_negative_price_is_rejected(client, catalog):
    r = client.post("/api/v1/rates", json=_payload(catalog, total_one_way="-1"))
    assert r.status_code == 422
    assert "total_one_way" in r.json()["errors"]


def test_list_rates_filters(client, catalog, rate_factory):
    rate_factory(
        catalog.ow, catalog.standard, catalog.airport_zone, catalog.hotel_zone,
        from_location_id=catalog.airport.id, to_location_id=catalog.hotel.id,
    )
    r = client.get("/api/v1/rates")
    data = r.json()["data"]
    assert data["pagination"]["total"] == 3

    r = client.get("/api/v1/rates", params={"rate_type": "location"})
    assert [rate["pricing_type"] for rate in r.json()["data"]["rates"]] == ["location"]

    r = client.get("/api/v1/rates", params={"vehicle_type_id": catalog.vip.id})
    assert [rate["id"] for rate in r.json()["data"]["rates"]] == [catalog.vip_rate.id]

    r = client.get("/api/v1/rates", params={"sort_by": "total_one_way", "sort_order": "asc", "rate_type": "zone"})
    assert [rate["total_one_way"] for rate in r.json()["data"]["rates"]] == ["60.00", "95.00"]


def test_list_rates_valid_on_date(client, catalog, db, yesterday):
    catalog.vip_rate.valid_to = yesterday
    db.commit()
    r = client.get("/api/v1/rates", params={"valid_date": str(yesterday + timedelta(days=1))})
    assert [rate["id"] for rate in r.json()["data"]["rates"]] == [catalog.standard_rate.id]


def test_update_rate(client, catalog):
    url = f"/api/v1/rates/{catalog.standard_rate.id}"
    r = client.patch(url, json={"total_one_way": "65.50", "highlighted": True, "highlight_badge": "Best seller"})
    assert r.status_code == 200
    rate = r.json()["data"]["rate"]
    assert rate["total_one_way"] == "65.50"
    assert rate["highlighted"] is True
    assert rate["highlight_badge"] == "Best seller"

    r = client.patch(url, json={"from_location_id": catalog.hotel.id, "to_location_id": catalog.hotel.id})
    assert r.status_code == 422
    assert "from_location_id" in r.json()["errors"]


def test_delete_rate(client, catalog):
    url = f"/api/v1/rates/{catalog.vip_rate.id}"
    assert client.delete(url).json()["message"] == "Rate deleted successfully"
    assert client.get(url).json()["message"] == "Rate not found"


def test_route_lookup_endpoint(client, catalog, rate_factory):
    r = client.get("/api/v1/rates/route", params={
        "service_type_id": catalog.ow.id,
        "from_location_id": catalog.airport.id,
        "to_location_id": catalog.hotel.id,
    })
    assert r.status_code == 200
    assert {rate["id"] for rate in r.json()["data"]["rates"]} == {catalog.standard_rate.id, catalog.vip_rate.id}

    specific = rate_factory(
        catalog.ow, catalog.vip, catalog.airport_zone, catalog.hotel_zone,
        from_location_id=catalog.airport.id, to_location_id=catalog.hotel.id,
    )
    r = client.get("/api/v1/rates/route", params={
        "service_type_id": catalog.ow.id,
        "from_location_id": catalog.airport.id,
        "to_location_id": catalog.hotel.id,
    })
    assert [rate["id"] for rate in r.json()["data"]["rates"]] == [specific.id]


def test_zone_lookup_endpoint(client, catalog):
    r = client.get("/api/v1/rates/zone", params={
        "service_type_id": catalog.ow.id,
        "from_zone_id": catalog.airport_zone.id,
        "to_zone_id": catalog.hotel_zone.id,
    })
    assert len(r.json()["data"]["rates"]) == 2

    r = client.get("/api/v1/rates/zone", params={
        "service_type_id": catalog.rt.id,
        "from_zone_id": catalog.airport_zone.id,
        "to_zone_id": catalog.hotel_zone.id,
    })
    assert r.json()["data"]["rates"] == []

    r = client.get("/api/v1/rates/zone", params={"service_type_id": catalog.ow.id, "from_zone_id": 999, "to_zone_id": 1})
    assert r.status_code == 422
