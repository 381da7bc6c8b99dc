"""The one rounding rule applied to money values in estimate output."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Context, Decimal, localcontext
from typing import TypeVar

K = TypeVar("K", bound=Hashable)

_CENT = Decimal("0.01")

# Wide enough to hold any finite float to the cent exactly.
MONEY_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def to_cents(value: float) -> Decimal:
    """Quantize *value* to cents, rounding halves away from zero.

    Goes through ``repr`` so that e.g. ``2.675`` rounds to ``2.68`` rather
    than following its binary expansion down to ``2.67``.
    """
    return Decimal(repr(value)).quantize(_CENT, context=MONEY_CONTEXT)


def round_money(value: float) -> float:
    """Round *value* to 2 decimal places (half-up)."""
    return float(to_cents(value))


def allocate_cents(parts: Mapping[K, float], total: float) -> dict[K, Decimal]:
    """Round each of *parts* to cents so that they add up to ``to_cents(total)``.

    Largest remainder: every part is first rounded down to the cent, then
    the missing cents go one at a time to the parts with the largest
    fractional remainders.  Each result is within a cent of its exact
    value, and a part that is exactly zero stays zero.
    """
    with localcontext(MONEY_CONTEXT):
        exact = {key: Decimal(repr(value)) for key, value in parts.items()}
        result = {
            key: value.quantize(_CENT, rounding=ROUND_FLOOR)
            for key, value in exact.items()
        }
        remainders = {key: exact[key] - result[key] for key in exact}
        missing = int((to_cents(total) - sum(result.values(), Decimal(0))) / _CENT)

        by_remainder = sorted(exact, key=lambda key: remainders[key], reverse=True)
        if missing > 0:
            keys = [key for key in by_remainder if remainders[key] > 0] or by_remainder
            step = _CENT
        elif missing < 0:
            keys = [key for key in reversed(by_remainder) if result[key] > 0] or by_remainder
            step = -_CENT
        else:
            return result
        # beyond one cent per key only happens with float noise on huge totals
        each, extra = divmod(abs(missing), len(keys))
        for i, key in enumerate(keys):
            result[key] += step * (each + (1 if i < extra else 0))
    return result
