import pytest

from app.core.rate_limiting import limiter


@pytest.fixture()
def throttled():
    limiter.reset()
    limiter.enabled = True
    try:
        yield limiter
    finally:
        limiter.enabled = False
        limiter.reset()


def _quote(client, catalog, **headers):
    return client.get("/api/v1/quote", headers=headers, params={
        "service_type": "one-way",
        "from_location_id": catalog.airport.id,
        "to_location_id": catalog.hotel.id,
        "pax": 2,
    })


def test_quote_limit_returns_429_envelope(client, catalog, throttled):
    for _ in range(30):
        assert _quote(client, catalog).status_code == 200

    r = _quote(client, catalog)
    assert r.status_code == 429
    assert r.headers["Retry-After"] == "60"
    body = r.json()
    assert body["success"] is False
    assert body["message"] == "Too many requests"
    assert body["request_id"] == r.headers["X-Request-ID"]

    r = _quote(client, catalog, **{"Accept-Language": "es"})
    assert r.status_code == 429
    assert r.json()["message"] == "Demasiadas solicitudes"


def test_quote_limit_does_not_consume_other_endpoints(client, catalog, throttled):
    for _ in range(31):
        _quote(client, catalog)
    assert client.get("/api/v1/cities").status_code == 200
    assert client.get("/api/v1/autocomplete", params={"lang": "en", "type": "arrival", "input": "from"}).status_code == 200


def test_limits_off_when_disabled(client, catalog):
    assert limiter.enabled is False
    for _ in range(35):
        assert _quote(client, catalog).status_code == 200
