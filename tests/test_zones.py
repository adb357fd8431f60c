from app.models.location import Location
from app.models.rate import Rate


def test_create_zone(client, catalog):
    r = client.post("/api/v1/zones", json={"name": " Downtown ", "city_id": catalog.city.id})
    assert r.status_code == 201
    zone = r.json()["data"]["zone"]
    assert zone["name"] == "Downtown"
    assert zone["city"]["name"] == "Cancun"


def test_create_zone_for_unknown_city(client):
    r = client.post("/api/v1/zones", json={"name": "Downtown", "city_id": 42})
    assert r.status_code == 422
    assert r.json()["errors"] == {"city_id": ["The selected city id does not exist"]}


def test_list_zones_only_active(client, catalog, db):
    catalog.airport_zone.active = False
    db.commit()
    r = client.get("/api/v1/zones")
    assert [z["name"] for z in r.json()["data"]["zones"]] == ["Hotel Zone"]


def test_zones_by_city(client, catalog):
    r = client.get(f"/api/v1/cities/{catalog.city.id}/zones")
    assert [z["name"] for z in r.json()["data"]["zones"]] == ["Airport Zone", "Hotel Zone"]
    assert client.get("/api/v1/cities/999/zones").status_code == 404


def test_show_zone_includes_locations(client, catalog):
    r = client.get(f"/api/v1/zones/{catalog.hotel_zone.id}")
    zone = r.json()["data"]["zone"]
    assert [l["name"] for l in zone["locations"]] == ["Grand Oasis", "Hyatt Ziva"]


def test_update_zone(client, catalog):
    r = client.put(f"/api/v1/zones/{catalog.hotel_zone.id}", json={"description": "Km 3 to km 25"})
    assert r.status_code == 200
    assert r.json()["data"]["zone"]["description"] == "Km 3 to km 25"

    r = client.put(f"/api/v1/zones/{catalog.hotel_zone.id}", json={"city_id": 999})
    assert r.status_code == 422
    assert r.json()["errors"] == {"city_id": ["The selected city id does not exist"]}


def test_delete_zone_detaches_locations_and_drops_rates(client, catalog, db):
    zone_id = catalog.hotel_zone.id
    r = client.delete(f"/api/v1/zones/{zone_id}")
    assert r.status_code == 200
    assert r.json()["message"] == "Zone deleted successfully"

    db.expire_all()
    hotel = db.get(Location, catalog.hotel.id)
    assert hotel is not None
    assert hotel.zone_id is None
    assert db.query(Rate).count() == 0
    assert client.get(f"/api/v1/zones/{zone_id}").status_code == 404


def test_zone_with_locations_cannot_change_city(client, catalog, db):
    tulum = client.post("/api/v1/cities", json={"name": "Tulum", "state": "Quintana Roo", "country": "Mexico"})
    tulum_id = tulum.json()["data"]["city"]["id"]

    r = client.put(f"/api/v1/zones/{catalog.hotel_zone.id}", json={"city_id": tulum_id})
    assert r.status_code == 422
    assert r.json()["errors"] == {"city_id": ["The zone cannot move to another city while it has locations"]}

    db.expire_all()
    hotel = db.get(Location, catalog.hotel.id)
    assert hotel.zone.city_id == hotel.city_id == catalog.city.id


def test_empty_zone_can_change_city(client, catalog):
    tulum_id = client.post("/api/v1/cities", json={
        "name": "Tulum", "state": "Quintana Roo", "country": "Mexico",
    }).json()["data"]["city"]["id"]
    zone_id = client.post("/api/v1/zones", json={"name": "Aldea Zama", "city_id": catalog.city.id}).json()["data"]["zone"]["id"]

    r = client.patch(f"/api/v1/zones/{zone_id}", json={"city_id": tulum_id})
    assert r.status_code == 200
    assert r.json()["data"]["zone"]["city"]["name"] == "Tulum"
