"""Numeric values shared across the domain.

Prices, rates and shipping costs are plain ``Decimal`` values so that
arithmetic stays exact (100 * (1 - 0.2) is 80, not 80.00000000000001).
Only display rounds: amounts are shown with six significant digits and no
trailing zeros, much like ``%g`` formatting of a float.
"""

from __future__ import annotations

from decimal import Context, Decimal, InvalidOperation

from shopcart.domain.exceptions import ValidationError

DISPLAY_DIGITS = 6


def parse_decimal(value: str | float | int | Decimal, field: str = "value") -> Decimal:
    """Coerce *value* to Decimal via its string form.

    Range is not checked; only values that are not numbers at all are
    rejected.
    """
    if isinstance(value, Decimal):
        return value
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {field}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {field}: {value!r}")
    return result


def format_amount(value: Decimal) -> str:
    """Render *value* for display, e.g. ``93.00`` -> ``93``, ``80.0`` -> ``80``.

    Compounded discounts keep adding decimal places to the exact value;
    the displayed form never grows past ``DISPLAY_DIGITS`` significant
    digits.
    """
    rounded = value.normalize(Context(prec=DISPLAY_DIGITS))
    if rounded.is_zero():
        return "0"
    return f"{rounded:f}"
