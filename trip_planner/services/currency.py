"""Currency conversion via the open ExchangeRate-API endpoint with a static fallback."""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional, Tuple

import httpx

from ..config import Settings, get_settings
from ..models import CurrencyConversion


logger = logging.getLogger(__name__)

EXCHANGE_RATE_URL = "https://open.er-api.com/v6/latest/{base}"
MOCK_RATE_NOTE = "Mock exchange rate - replace with real API for production"
MULTIPLE_TARGETS: Tuple[str, ...] = ("USD", "EUR", "GBP", "JPY", "AUD", "CAD")

# Approximate INR-anchored rates keyed "FROM-TO".
MOCK_RATES: Dict[str, float] = {
    "INR-USD": 0.012,
    "INR-EUR": 0.011,
    "INR-GBP": 0.0095,
    "INR-JPY": 1.82,
    "INR-AUD": 0.018,
    "INR-CAD": 0.016,
    "INR-CHF": 0.0105,
    "INR-CNY": 0.087,
    "INR-SGD": 0.016,
    "INR-AED": 0.044,
    "USD-INR": 83.5,
    "EUR-INR": 91.2,
    "GBP-INR": 105.3,
    "JPY-INR": 0.55,
    "AUD-INR": 55.8,
    "CAD-INR": 62.1,
    "CHF-INR": 95.2,
    "CNY-INR": 11.5,
    "SGD-INR": 62.5,
    "AED-INR": 22.7,
}
DEFAULT_FROM_INR_RATE = 0.012
DEFAULT_TO_INR_RATE = 83.5


class ExchangeRateError(RuntimeError):
    """Raised when the exchange-rate endpoint gives no usable rate."""


def mock_rate(from_currency: str, to_currency: str) -> float:
    """Look up a tabulated rate, inverting the reverse pair when only that exists."""

    rate = MOCK_RATES.get(f"{from_currency}-{to_currency}")
    if rate:
        return rate
    reverse = MOCK_RATES.get(f"{to_currency}-{from_currency}")
    if reverse:
        return 1 / reverse
    return DEFAULT_FROM_INR_RATE if from_currency == "INR" else DEFAULT_TO_INR_RATE


def mock_conversion(amount: float, from_currency: str, to_currency: str) -> CurrencyConversion:
    rate = mock_rate(from_currency, to_currency)
    return CurrencyConversion(
        amount=amount * rate,
        rate=rate,
        from_currency=from_currency,
        to_currency=to_currency,
        last_updated=int(time.time()),
        note=MOCK_RATE_NOTE,
    )


def fetch_live_conversion(
    amount: float, from_currency: str, to_currency: str, timeout: float = 10.0
) -> CurrencyConversion:
    with httpx.Client(timeout=timeout) as client:
        resp = client.get(EXCHANGE_RATE_URL.format(base=from_currency))
        resp.raise_for_status()
        payload = resp.json()

    if payload.get("result") != "success":
        raise ExchangeRateError(f"Exchange rate API error: {payload.get('error-type')}")
    rate = (payload.get("rates") or {}).get(to_currency)
    if not rate:
        raise ExchangeRateError(f"Exchange rate not available for {to_currency}")
    return CurrencyConversion(
        amount=amount * rate,
        rate=rate,
        from_currency=from_currency,
        to_currency=to_currency,
        last_updated=int(payload.get("time_last_update_unix") or time.time()),
    )


def convert_currency(
    amount: float,
    from_currency: str = "INR",
    to_currency: str = "USD",
    settings: Optional[Settings] = None,
) -> CurrencyConversion:
    """Convert ``amount`` between currencies. Never raises; mock results carry a note."""

    from_currency = from_currency.upper()
    to_currency = to_currency.upper()
    settings = settings or get_settings()
    try:
        return fetch_live_conversion(amount, from_currency, to_currency, timeout=settings.http_timeout)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Mock exchange rate used for %s-%s due to error: %s", from_currency, to_currency, exc)
        return mock_conversion(amount, from_currency, to_currency)


def get_multiple_conversions(
    amount: float, from_currency: str = "INR", settings: Optional[Settings] = None
) -> Dict[str, CurrencyConversion]:
    """Convert ``amount`` into each of the common target currencies, one after another."""

    conversions: Dict[str, CurrencyConversion] = {}
    for currency in MULTIPLE_TARGETS:
        try:
            conversions[currency] = convert_currency(amount, from_currency, currency, settings=settings)
        except Exception as exc:  # noqa: BLE001
            logger.error("Failed to convert to %s: %s", currency, exc)
    return conversions
