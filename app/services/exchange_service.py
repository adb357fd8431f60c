from decimal import Decimal

from sqlalchemy.orm import Session

from app.models.currency_exchange import CurrencyExchange

BASE_CURRENCY = "USD"
SUPPORTED_CURRENCIES = ("USD", "MXN")


def _stored(db: Session, from_currency: str, to_currency: str) -> CurrencyExchange | None:
    return db.query(CurrencyExchange).filter(
        CurrencyExchange.from_currency == from_currency,
        CurrencyExchange.to_currency == to_currency,
    ).first()


def get_exchange_rate(db: Session, from_currency: str, to_currency: str) -> float:
    """Units of ``to_currency`` per unit of ``from_currency``; 1.0 when unknown."""
    from_currency = from_currency.upper()
    to_currency = to_currency.upper()
    if from_currency == to_currency:
        return 1.0
    direct = _stored(db, from_currency, to_currency)
    if direct and direct.exchange_rate:
        return float(direct.exchange_rate)
    reverse = _stored(db, to_currency, from_currency)
    if reverse and reverse.exchange_rate:
        return 1.0 / float(reverse.exchange_rate)
    return 1.0


def set_exchange_rate(db: Session, from_currency: str, to_currency: str, rate: Decimal | float) -> CurrencyExchange:
    if Decimal(str(rate)) <= 0:
        raise ValueError("rate must be > 0")
    row = _stored(db, from_currency.upper(), to_currency.upper())
    if not row:
        row = CurrencyExchange(from_currency=from_currency.upper(), to_currency=to_currency.upper(), exchange_rate=rate)
        db.add(row)
    else:
        row.exchange_rate = rate
    db.commit()
    return row


def convert(db: Session, amount, to_currency: str, from_currency: str = BASE_CURRENCY) -> float:
    return float(amount) * get_exchange_rate(db, from_currency, to_currency)
