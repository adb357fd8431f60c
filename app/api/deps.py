from fastapi import Query, Request

from app.core.config import settings
from app.core.errors import NotFound
from app.core.i18n import translate


def get_locale(request: Request) -> str:
    return getattr(request.state, "locale", settings.DEFAULT_LOCALE)


class Pagination:
    def __init__(
        self,
        page: int = Query(1, ge=1),
        per_page: int = Query(settings.DEFAULT_PER_PAGE, ge=1),
    ):
        self.page = page
        self.per_page = min(per_page, settings.MAX_PER_PAGE)


def sort_params(allowed: tuple[str, ...], default: str, default_order: str = "asc"):
    """Dependency returning (column, descending) restricted to ``allowed``."""
    def _sort(
        sort_by: str = Query(default),
        sort_order: str = Query(default_order),
    ) -> tuple[str, bool]:
        column = sort_by if sort_by in allowed else default
        return column, sort_order.lower() == "desc"
    return _sort


def get_or_404(db, model, obj_id, resource: str):
    obj = db.get(model, obj_id)
    if obj is None:
        raise NotFound(resource)
    return obj


def must_exist(db, model, obj_id, field: str, locale: str | None, errors: dict):
    """Look up a referenced row; on a miss record a field error and return None."""
    if obj_id is None:
        return None
    obj = db.get(model, obj_id)
    if obj is None:
        errors.setdefault(field, []).append(translate("validation.exists", locale, attribute=field.replace("_", " ")))
    return obj
