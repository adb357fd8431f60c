def _search(client, **params):
    query = {"lang": "en", "type": "arrival", "input": "from"}
    query.update(params)
    return client.get("/api/v1/autocomplete", params=query)


def test_arrival_from_lists_airports(client, catalog):
    r = _search(client, q="cancun")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "Search results retrieved successfully"
    data = body["data"]
    assert data["airport"] == [{"id": str(catalog.airport.id), "name": "Cancun International Airport", "city": "Cancun"}]
    assert data["zones"] == []
    assert data["locations"] == {}


def test_arrival_to_lists_destinations(client, catalog):
    data = _search(client, input="to", q="oasis").json()["data"]
    assert data["airport"] == []
    assert data["zones"] == []
    group = data["locations"][str(catalog.city.id)]
    assert group["name"] == "Cancun"
    assert [l["name"] for l in group["locations"]] == ["Grand Oasis"]


def test_location_search_matches_zone_name(client, catalog):
    data = _search(client, input="to", q="hotel zone").json()["data"]
    assert [z["name"] for z in data["zones"]] == ["Hotel Zone"]
    names = [l["name"] for l in data["locations"][str(catalog.city.id)]["locations"]]
    assert names == ["Grand Oasis", "Hyatt Ziva"]


def test_empty_query_has_no_grouped_locations(client, catalog):
    data = _search(client, input="to").json()["data"]
    assert data["locations"] == {}
    assert len(data["zones"]) == 2


def test_departure_to_lists_airports(client, catalog):
    data = _search(client, type="departure", input="to").json()["data"]
    assert [a["name"] for a in data["airport"]] == ["Cancun International Airport"]


def test_transfer_searches_everything(client, catalog):
    data = client.get("/api/v1/autocomplete/search", params={
        "lang": "es", "type": "transfer-one-way", "input": "from", "q": "cancun",
    }).json()["data"]
    assert len(data["airport"]) == 1
    assert len(data["zones"]) == 2
    assert len(data["locations"][str(catalog.city.id)]["locations"]) == 4


def test_inactive_locations_are_hidden(client, catalog, db):
    catalog.airport.active = False
    db.commit()
    assert _search(client, q="cancun").json()["data"]["airport"] == []


def test_validation(client):
    r = client.get("/api/v1/autocomplete", params={"lang": "english", "type": "cruise"})
    assert r.status_code == 422
    errors = r.json()["errors"]
    assert set(errors) == {"lang", "type", "input"}
    assert errors["input"] == ["The input field is required"]
