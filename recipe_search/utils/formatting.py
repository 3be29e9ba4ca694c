"""
Display formatting helpers for recipe cards.

Calories are shown with five significant figures, matching JavaScript's
Number.prototype.toPrecision(5) output (e.g. 1843.41299 -> "1843.4", 0.5 -> "0.50000",
123456.7 -> "1.2346e+5").
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

CALORIE_PRECISION = 5


def to_precision(value: float, precision: int = CALORIE_PRECISION) -> str:
    """
    Format a number with a fixed count of significant figures.

    Uses fixed notation unless the decimal exponent is below -6 or at least
    the precision, in which case exponential notation without zero-padding
    of the exponent is used ("1.2346e+5").

    Args:
        value: Number to format
        precision: Significant figures (1-100)

    Returns:
        Formatted string

    Raises:
        ValueError: If precision is out of range.
    """
    if not 1 <= precision <= 100:
        raise ValueError(f"precision must be between 1 and 100, got {precision}")

    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    # Work on the exact binary value; ties round away from zero as in JavaScript
    exact = Decimal(value)
    sign = "-" if exact < 0 else ""
    magnitude = abs(exact)

    with localcontext() as ctx:
        ctx.prec = 1000
        exponent = magnitude.adjusted() if magnitude else 0
        rounded = _round_at(magnitude, exponent, precision)
        if rounded.adjusted() > exponent:
            # Rounding carried into a new digit (e.g. 99999.5 -> 100000)
            exponent += 1
            rounded = _round_at(rounded, exponent, precision)

        if exponent < -6 or exponent >= precision:
            mantissa = format(rounded.scaleb(-exponent), "f")
            exp_sign = "+" if exponent >= 0 else "-"
            return f"{sign}{mantissa}e{exp_sign}{abs(exponent)}"

        return f"{sign}{format(rounded, 'f')}"


def _round_at(magnitude: Decimal, exponent: int, precision: int) -> Decimal:
    """Round half-up to `precision` significant digits below 10**(exponent + 1)."""
    quantum = Decimal(1).scaleb(exponent - precision + 1)
    return magnitude.quantize(quantum, rounding=ROUND_HALF_UP)


def format_calories(calories: float) -> str:
    """Format a raw calorie count for display on a recipe card."""
    return to_precision(calories, CALORIE_PRECISION)
