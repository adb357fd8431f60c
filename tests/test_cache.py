import json
import logging
from datetime import date

import pytest
import redis

from app.core import cache
from app.core.config import settings
from app.core.errors import ApiError
from app.services.quote_service import cache_key, get_quote


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.ttls = {}

    def get(self, key):
        return self.store.get(key)

    def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl

    def ping(self):
        return True


class BrokenRedis:
    def get(self, key):
        raise redis.ConnectionError("connection refused")

    def setex(self, key, ttl, value):
        raise redis.ConnectionError("connection refused")

    def ping(self):
        raise redis.ConnectionError("connection refused")


@pytest.fixture()
def fake_redis(monkeypatch):
    fake = FakeRedis()
    monkeypatch.setattr(settings, "CACHE_ENABLED", True)
    monkeypatch.setattr(cache, "_client", fake)
    return fake


@pytest.fixture()
def broken_redis(monkeypatch):
    monkeypatch.setattr(settings, "CACHE_ENABLED", True)
    monkeypatch.setattr(cache, "_client", BrokenRedis())


def test_remember_returns_cached_value_without_computing(fake_redis):
    fake_redis.store["k"] = json.dumps({"a": 1})

    def compute():
        raise AssertionError("should not be called")

    assert cache.remember("k", 60, compute) == {"a": 1}


def test_remember_stores_computed_value(fake_redis):
    assert cache.remember("k", 90, lambda: [1, 2]) == [1, 2]
    assert json.loads(fake_redis.store["k"]) == [1, 2]
    assert fake_redis.ttls["k"] == 90


def test_get_quote_is_served_from_cache(db, catalog, fake_redis):
    on = date.today()
    first = get_quote(db, "one-way", catalog.airport.id, catalog.hotel.id, 2, on)
    key = cache_key("one-way", catalog.airport.id, catalog.hotel.id, 2, on, "USD", "en")
    assert json.loads(fake_redis.store[key]) == first
    assert fake_redis.ttls[key] == settings.QUOTE_CACHE_TTL

    # a rate change is invisible until the entry expires
    catalog.standard_rate.total_one_way = 999
    db.commit()
    second = get_quote(db, "one-way", catalog.airport.id, catalog.hotel.id, 2, on)
    assert second == first


def test_quote_errors_are_not_cached(db, catalog, fake_redis):
    with pytest.raises(ApiError):
        get_quote(db, "one-way", catalog.hotel.id, catalog.other_hotel.id, 2)
    assert fake_redis.store == {}


def test_cache_failure_falls_back_to_compute(broken_redis, caplog):
    with caplog.at_level(logging.WARNING, logger="app.core.cache"):
        assert cache.remember("k", 60, lambda: {"fresh": True}) == {"fresh": True}
    assert "cache read failed for k" in caplog.text
    assert "cache write failed for k" in caplog.text


def test_quote_survives_cache_failure(client, catalog, broken_redis):
    r = client.get("/api/v1/quote", params={
        "service_type": "one-way",
        "from_location_id": catalog.airport.id,
        "to_location_id": catalog.hotel.id,
        "pax": 2,
    })
    assert r.status_code == 200
    assert len(r.json()["data"]["prices"]) == 2


def test_health_reports_cache_state(client, fake_redis):
    assert client.get("/api/v1/health").json()["data"]["cache"] == "ok"


def test_health_reports_unreachable_cache(client, broken_redis):
    r = client.get("/api/v1/health")
    assert r.status_code == 200
    assert r.json()["data"]["cache"] == "unavailable"


def test_slow_quote_is_logged(db, catalog, monkeypatch, caplog):
    monkeypatch.setattr(settings, "SLOW_QUERY_MS", -1)
    with caplog.at_level(logging.WARNING, logger="app.services.quote_service"):
        get_quote(db, "one-way", catalog.airport.id, catalog.hotel.id, 2)
    assert "slow quote_generation" in caplog.text
    assert "key=quote:one-way:" in caplog.text
