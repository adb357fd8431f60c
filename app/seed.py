import logging
from decimal import Decimal

from sqlalchemy import text
from sqlalchemy.exc import OperationalError, ProgrammingError
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.core.config import settings
from app.models.currency_exchange import CurrencyExchange
from app.models.service_type import ServiceType
from app.services.import_service import import_file

logger = logging.getLogger(__name__)

SERVICE_TYPES = [
    ("RT", "Round Trip", "service_airport"),
    ("OW", "One Way", "service_airport"),
    ("HTH", "Hotel to Hotel", "service_hotel_hotel"),
]

EXCHANGE_RATES = [
    ("USD", "MXN", Decimal("20.000000")),
    ("MXN", "USD", Decimal("0.050000")),
]


def ensure_service_type(db: Session, code: str, name: str, tpv_type: str):
    st = db.query(ServiceType).filter(ServiceType.code == code).first()
    if st:
        return st
    st = ServiceType(code=code, name=name, tpv_type=tpv_type, active=True)
    db.add(st)
    db.commit()
    return st


def ensure_exchange(db: Session, from_currency: str, to_currency: str, rate: Decimal):
    row = db.query(CurrencyExchange).filter(
        CurrencyExchange.from_currency == from_currency,
        CurrencyExchange.to_currency == to_currency,
    ).first()
    if row:
        return row
    row = CurrencyExchange(from_currency=from_currency, to_currency=to_currency, exchange_rate=rate)
    db.add(row)
    db.commit()
    return row


def run(db=None):
    owns_session = db is None
    if db is None:
        db = SessionLocal()
    try:
        # If migrations haven't been applied yet, seeding must not crash the API.
        try:
            db.execute(text("SELECT 1 FROM service_types LIMIT 1"))
        except (ProgrammingError, OperationalError):
            db.rollback()
            logger.warning("[seed] service_types table not found yet. Skipping seeding (run alembic upgrade head).")
            return

        for code, name, tpv_type in SERVICE_TYPES:
            ensure_service_type(db, code, name, tpv_type)
        for from_currency, to_currency, rate in EXCHANGE_RATES:
            ensure_exchange(db, from_currency, to_currency, rate)

        if settings.INITIAL_DATA_PATH:
            counts = import_file(db, settings.INITIAL_DATA_PATH)
            logger.info("[seed] imported %s from %s", counts, settings.INITIAL_DATA_PATH)
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    run()
