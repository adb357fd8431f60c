def test_no_highlighted_quotes(client, catalog):
    r = client.get("/api/v1/highlighted-quotes")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["highlighted_quotes"] == []
    assert data["currency"] == "usd"


def test_zone_rate_highlight(client, catalog, db):
    catalog.standard_rate.highlighted = True
    catalog.standard_rate.highlight_badge = "Most popular"
    db.commit()

    r = client.get("/api/v1/highlighted-quotes")
    assert r.json()["message"] == "Highlighted quotes retrieved successfully"
    quotes = r.json()["data"]["highlighted_quotes"]
    assert len(quotes) == 1
    q = quotes[0]
    assert q["id"] == catalog.standard_rate.id
    assert q["service_category"] == "Private Transfer"
    assert q["route"]["from"]["name"] == "Airport Zone"
    assert q["route"]["to"]["city"] == "Cancun"
    assert q["pricing"]["starting_from"] == 60
    assert q["pricing"]["cost_one_way"] == "50.00"
    assert q["highlight"] == {"badge": "Most popular", "description": None}


def test_location_rate_highlight_in_mxn(client, catalog, rate_factory):
    rate = rate_factory(
        catalog.ow, catalog.vip, catalog.airport_zone, catalog.hotel_zone,
        from_location_id=catalog.airport.id, to_location_id=catalog.hotel.id,
        highlighted=True,
    )
    r = client.get("/api/v1/highlighted-quotes", params={"currency": "MXN"})
    data = r.json()["data"]
    assert data["currency"] == "mxn"
    assert data["exchange_rates"] == {"to_usd": "0.050000", "to_mxn": "1.000000"}
    q = data["highlighted_quotes"][0]
    assert q["service_category"] == "Airport Transfer"
    assert q["route"]["from"]["type"] == "A"
    assert q["pricing"]["total_one_way"] == 1200
    assert q["pricing"]["total_round_trip"] == 2200

    r = client.get(f"/api/v1/highlighted-quotes/{rate.id}")
    assert r.status_code == 200
    assert r.json()["data"]["vehicle_type"]["code"] == "VP"


def test_show_non_highlighted_rate_is_not_found(client, catalog):
    r = client.get(f"/api/v1/highlighted-quotes/{catalog.vip_rate.id}")
    assert r.status_code == 404
    assert r.json()["message"] == "Highlighted quote not found"


def test_highlighted_quotes_unsupported_currency(client, catalog):
    r = client.get("/api/v1/highlighted-quotes", params={"currency": "EUR"})
    assert r.status_code == 400
