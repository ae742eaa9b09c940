"""
Currency conversion for imported offers.

Rates are fixed and updated by hand; prices are stored in PLN.
"""
from __future__ import annotations

import math
from typing import Optional

EXCHANGE_RATES = {
    "USD": 4.0,
    "EUR": 4.3,
    "GBP": 5.0,
    "CNY": 0.55,
    "PLN": 1.0,
}


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def convert_to_pln(amount: float, currency: str) -> float:
    """
    Convert an amount to PLN, rounded to 2 decimal places.

    Unknown currencies use a rate of 1.0.
    """
    rate = EXCHANGE_RATES.get((currency or "PLN").upper(), 1.0)
    return _round_half_up(amount * rate * 100) / 100


def calculate_discount(original_price: Optional[float], current_price: Optional[float]) -> int:
    """Discount in whole percent; 0 when there is no original price or no reduction."""
    if not original_price or current_price is None or original_price <= current_price:
        return 0
    return int(_round_half_up((original_price - current_price) / original_price * 100))
