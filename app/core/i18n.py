"""
Message lookup for API responses.

Messages live in app/lang/<locale>.py as nested dicts and are addressed with
dotted keys (``resources.city.not_found``). ``:name`` placeholders are
substituted from keyword arguments.
"""

from typing import Any, Optional

from app.core.config import settings
from app.lang import en, es, fr

MESSAGES: dict[str, dict[str, Any]] = {
    "en": en.MESSAGES,
    "es": es.MESSAGES,
    "fr": fr.MESSAGES,
}

FALLBACK_LOCALE = "en"


def _lookup(table: dict[str, Any], key: str) -> Optional[str]:
    node: Any = table
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(key: str, locale: str | None = None, **params) -> str:
    """Localized message for ``key``; falls back to English, then to the key itself."""
    locale = (locale or settings.DEFAULT_LOCALE).lower()
    message = _lookup(MESSAGES.get(locale, {}), key)
    if message is None:
        message = _lookup(MESSAGES[FALLBACK_LOCALE], key)
    if message is None:
        return key
    # longest names first so :total is not clobbered by :to
    for name in sorted(params, key=len, reverse=True):
        message = message.replace(f":{name}", str(params[name]))
    return message


def is_supported(locale: str | None) -> bool:
    return bool(locale) and locale.lower() in settings.supported_locales and locale.lower() in MESSAGES


def parse_accept_language(header: str | None) -> list[str]:
    """Language prefixes from an Accept-Language header, highest quality first."""
    if not header:
        return []
    entries = []
    for position, chunk in enumerate(header.split(",")):
        chunk = chunk.strip()
        if not chunk:
            continue
        lang, _, params = chunk.partition(";")
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        prefix = lang.strip().split("-")[0].lower()
        if prefix and prefix != "*" and quality > 0:
            entries.append((quality, position, prefix))
    entries.sort(key=lambda e: (-e[0], e[1]))
    return [prefix for _, _, prefix in entries]


def resolve_locale(query_locale: str | None, accept_language: str | None) -> str:
    if is_supported(query_locale):
        return query_locale.lower()
    for prefix in parse_accept_language(accept_language):
        if is_supported(prefix):
            return prefix
    return settings.DEFAULT_LOCALE
