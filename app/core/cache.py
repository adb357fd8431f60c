import json
import logging
from typing import Any, Callable
from urllib.parse import urlparse, urlunparse, parse_qs, urlencode

import redis

from app.core.config import settings

logger = logging.getLogger(__name__)


def _redis_url_with_tls_defaults(url: str) -> str:
    """rediss:// (e.g. Upstash TLS) needs ssl_cert_reqs or the client refuses to connect."""
    if not url or not url.strip().lower().startswith("rediss://"):
        return url
    parsed = urlparse(url)
    qs = parse_qs(parsed.query)
    if "ssl_cert_reqs" not in qs:
        qs["ssl_cert_reqs"] = ["none"]
        return urlunparse(parsed._replace(query=urlencode(qs, doseq=True)))
    return url


_client: redis.Redis | None = None


def get_client() -> redis.Redis | None:
    global _client
    if not settings.CACHE_ENABLED:
        return None
    if _client is None:
        _client = redis.Redis.from_url(
            _redis_url_with_tls_defaults(settings.REDIS_URL),
            decode_responses=True,
            socket_timeout=2,
        )
    return _client


def get_json(key: str) -> Any | None:
    client = get_client()
    if client is None:
        return None
    try:
        raw = client.get(key)
    except redis.RedisError as e:
        logger.warning("cache read failed for %s: %s", key, e)
        return None
    return json.loads(raw) if raw else None


def set_json(key: str, value: Any, ttl: int) -> None:
    client = get_client()
    if client is None:
        return
    try:
        client.setex(key, ttl, json.dumps(value))
    except redis.RedisError as e:
        logger.warning("cache write failed for %s: %s", key, e)


def remember(key: str, ttl: int, compute: Callable[[], Any]) -> Any:
    cached = get_json(key)
    if cached is not None:
        logger.debug("cache hit %s", key)
        return cached
    value = compute()
    set_json(key, value, ttl)
    return value


def ping() -> bool | None:
    """None when caching is off, else whether Redis answered."""
    client = get_client()
    if client is None:
        return None
    try:
        return bool(client.ping())
    except redis.RedisError:
        return False
