"""Formatting helpers for estimate output.

Currency amounts are shown the way the estimate screens show them: whole
units with thousands separators and the currency symbol in front
(e.g. '€12,438').
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from reforma.rounding import MONEY_CONTEXT

CURRENCY_SYMBOLS: dict[str, str] = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
    "BRL": "R$",
    "MXN": "MX$",
}


def format_currency(amount: float, currency: str = "EUR") -> str:
    """Format *amount* with no decimal places.

    - Known currencies use their symbol: '€1,188', '-$250'
    - Other ISO codes are used as a prefix: 'CHF 1,188'

    Raises:
        ValueError: If *amount* is infinite or NaN.
    """
    if not math.isfinite(amount):
        raise ValueError(f"cannot format non-finite amount {amount!r}")
    whole = Decimal(repr(amount)).quantize(
        Decimal(1), rounding=ROUND_HALF_UP, context=MONEY_CONTEXT,
    )
    sign = "-" if whole < 0 else ""
    digits = f"{whole.copy_abs():,.0f}"
    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{code} {digits}"
    return f"{sign}{symbol}{digits}"


def format_quantity(qty: float, unit: str) -> str:
    """Format a quantity with its unit: '12 m²', '10.50 lm'.

    Raises:
        ValueError: If *qty* is infinite or NaN.
    """
    if not math.isfinite(qty):
        raise ValueError(f"cannot format non-finite quantity {qty!r}")
    if float(qty).is_integer():
        return f"{qty:,.0f} {unit}"
    return f"{qty:,.2f} {unit}"
