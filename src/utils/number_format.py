"""
Number formatting for Scale Compare.

Sizes in the catalog range from the Planck length (~1.6e-35 m) to the
observable universe (~8.8e26 m). Values in a readable band are printed in
normal notation; everything else is printed as a mantissa times a power of
ten with a Unicode superscript exponent:

    >>> format_number(1234.5678)
    '1235'
    >>> format_number(0.5)
    '0.5000'
    >>> format_number(500000)
    '5.000 x 10⁵'
    >>> format_number(1.616255e-35)
    '1.616 x 10⁻³⁵'

Rounding is half-up on the exact binary value of the float, using Decimal
so no precision is lost at either end of the range.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Tuple

from src.utils.constants import (
    DEFAULT_SIGNIFICANT_DIGITS,
    NORMAL_NOTATION_MAX,
    NORMAL_NOTATION_MIN,
)

SUPERSCRIPTS = {
    "0": "⁰",
    "1": "¹",
    "2": "²",
    "3": "³",
    "4": "⁴",
    "5": "⁵",
    "6": "⁶",
    "7": "⁷",
    "8": "⁸",
    "9": "⁹",
    "-": "⁻",
    "+": "",
}


def to_superscript(exponent: int) -> str:
    """Render an integer exponent with Unicode superscript characters."""
    return "".join(SUPERSCRIPTS[ch] for ch in str(exponent))


def _round_significant(value: Decimal, digits: int) -> Decimal:
    """
    Round a non-zero Decimal to a number of significant digits.

    Rounding can carry into the next power of ten (9.99999 -> 10.000); the
    result is then requantized so it still has exactly ``digits`` digits
    (10.00).
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + 2)
        quantum = Decimal(1).scaleb(value.adjusted() - digits + 1)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
        if rounded.adjusted() != value.adjusted():
            quantum = Decimal(1).scaleb(rounded.adjusted() - digits + 1)
            rounded = rounded.quantize(quantum, rounding=ROUND_HALF_UP)
        return rounded


def to_precision(value: float, digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
    """
    Format a value in fixed notation with a number of significant digits.

    Trailing zeros are kept so every result shows the same precision
    (1 -> "1.000", 0.0001 -> "0.0001000").

    Args:
        value: Finite number to format
        digits: Significant digits (>= 1)

    Returns:
        Fixed notation string
    """
    if digits < 1:
        raise ValueError("digits must be >= 1")
    exact = Decimal(value)
    if exact == 0:
        return format(Decimal(0).scaleb(-(digits - 1)), "f")
    return format(_round_significant(exact, digits), "f")


def split_scientific(value: float, digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> Tuple[str, int]:
    """
    Split a finite value into a rounded mantissa string and a base-10 exponent.

    The exponent follows the rounded mantissa so the mantissa always lies in
    [1, 10): 99999.9 with 4 digits gives ("1.000", 5), not ("10.00", 4).

    Args:
        value: Finite number
        digits: Significant digits of the mantissa

    Returns:
        Tuple of (mantissa, exponent)
    """
    if digits < 1:
        raise ValueError("digits must be >= 1")
    exact = Decimal(value)
    if exact == 0:
        return to_precision(0.0, digits), 0
    rounded = _round_significant(exact, digits)
    exponent = rounded.adjusted()
    mantissa = rounded.scaleb(-exponent)
    return format(mantissa, "f"), exponent


def format_number(value: float, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
    """
    Format a number in normal or scientific notation.

    Values with 0.0001 <= value < 10000 use fixed notation with
    ``significant_digits`` significant figures. All other values (including
    zero and negative numbers) use "<mantissa> x 10<exponent>" with a
    superscript exponent; a positive exponent sign is omitted.

    Args:
        value: Number to format
        significant_digits: Significant digits to show (default 4)

    Returns:
        Formatted string, e.g. "9.999 x 10⁹"
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    if NORMAL_NOTATION_MIN <= value < NORMAL_NOTATION_MAX:
        return to_precision(value, significant_digits)

    mantissa, exponent = split_scientific(value, significant_digits)
    return f"{mantissa} x 10{to_superscript(exponent)}"
