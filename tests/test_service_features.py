FEATURE = {"name_en": "Child seat", "name_es": "Silla para niños", "icon": "baby", "sort_order": 3}


def test_create_and_show_feature(client):
    r = client.post("/api/v1/service-features", json=FEATURE)
    assert r.status_code == 201
    f = r.json()["data"]["feature"]
    assert f["name"] == "Child seat"
    assert f["name_es"] == "Silla para niños"

    r = client.get(f"/api/v1/service-features/{f['id']}", headers={"Accept-Language": "es-MX"})
    assert r.json()["data"]["feature"]["name"] == "Silla para niños"


def test_french_falls_back_to_english_name(client):
    f_id = client.post("/api/v1/service-features", json=FEATURE).json()["data"]["feature"]["id"]
    r = client.get(f"/api/v1/service-features/{f_id}", params={"locale": "fr"})
    assert r.json()["data"]["feature"]["name"] == "Child seat"


def test_list_features_by_sort_order(client, catalog):
    client.post("/api/v1/service-features", json=FEATURE)
    r = client.get("/api/v1/service-features")
    assert [f["name_en"] for f in r.json()["data"]["features"]] == ["WiFi", "Bottled water", "Child seat"]


def test_update_feature(client, catalog):
    r = client.put(f"/api/v1/service-features/{catalog.water.id}", json={"active": False})
    assert r.json()["data"]["feature"]["active"] is False
    r = client.get("/api/v1/service-features", params={"active": True})
    assert [f["name_en"] for f in r.json()["data"]["features"]] == ["WiFi"]


def test_delete_attached_feature_conflicts(client, catalog):
    r = client.delete(f"/api/v1/service-features/{catalog.wifi.id}")
    assert r.status_code == 409


def test_delete_unattached_feature(client):
    f_id = client.post("/api/v1/service-features", json=FEATURE).json()["data"]["feature"]["id"]
    assert client.delete(f"/api/v1/service-features/{f_id}").status_code == 200
    assert client.get(f"/api/v1/service-features/{f_id}").status_code == 404
