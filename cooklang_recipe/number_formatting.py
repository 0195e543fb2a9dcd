"""
Scaling and human-friendly formatting of recipe quantities.

At a high-level the following functions may be used:

.. autofunction:: scale

.. autofunction:: format_quantity

.. autofunction:: format_scaled

.. autofunction:: scale_for_servings

Though :py:func:`format_quantity` is in turn implemented by the following
specialised functions

.. autofunction:: format_decimal

.. autofunction:: format_fraction
"""

from typing import Callable, Mapping, Optional, Sequence, Union

from decimal import Decimal, ROUND_HALF_UP, localcontext

import math

from cooklang_recipe.recipe import Number, ParsedQuantity

from cooklang_recipe.quantity_parser import parse_quantity


__all__ = [
    "scale",
    "format_decimal",
    "format_fraction",
    "format_quantity",
    "format_scaled",
    "scale_for_servings",
]


DEFAULT_DENOMINATORS: Sequence[int] = (1, 2, 3, 4, 5, 6, 7, 8, 9)
"""Denominators tried, in order, by :py:func:`format_fraction`."""

DEFAULT_TOLERANCE = 0.01
"""
How far (in units of the numerator) a fraction may be from the true value and
still be used by :py:func:`format_fraction`.
"""


def scale(
    quantity: Optional[Union[Number, str]], factor: Number
) -> Optional[Union[Number, str]]:
    """
    Multiply a quantity by a scaling factor. Textual (e.g. 'a pinch') and
    missing quantities are returned unchanged.
    """
    if quantity is None or isinstance(quantity, str):
        return quantity
    return quantity * factor


def format_decimal(number: Number) -> str:
    """
    Format a number rounded to one decimal place. A trailing '.0' is dropped
    so that whole numbers are shown as integers.

    Halves are rounded away from zero (e.g. 0.25 becomes '0.3').
    """
    if isinstance(number, float) and not math.isfinite(number):
        return str(number)

    exact = Decimal(number)
    with localcontext() as context:
        # Enough digits for every integer digit plus the one decimal place
        context.prec = max(context.prec, exact.adjusted() + 3)
        rounded = exact.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if rounded == 0:
        return "0"

    fixed = format(rounded, "f")
    if fixed.endswith(".0"):
        return fixed[:-2]
    return fixed


def format_fraction(
    number: Number,
    allowed_denominators: Sequence[int] = DEFAULT_DENOMINATORS,
    tolerance: float = DEFAULT_TOLERANCE,
    format_decimal: Callable[[Number], str] = format_decimal,
) -> str:
    """
    Format a number as a whole number and fraction in the style '3/4' or
    '1 3/4'.

    The first denominator in ``allowed_denominators`` which gives a numerator
    within ``tolerance`` of a whole number is used. If none do, the number is
    formatted (without its sign) by ``format_decimal`` instead.
    """
    if isinstance(number, float) and not math.isfinite(number):
        return format_decimal(number)

    negative = number < 0
    magnitude = -number if negative else number

    whole = math.floor(magnitude)
    remainder = magnitude - whole

    for denominator in allowed_denominators:
        exact_numerator = denominator * remainder
        if abs(exact_numerator - round(exact_numerator)) <= tolerance:
            break
    else:
        return format_decimal(whole + remainder)

    numerator = round(exact_numerator)

    if denominator == 1:  # Integer case
        return str((whole + numerator) * (-1 if negative else 1))

    return "{}{}{}/{}".format(
        "-" if negative else "",
        f"{whole} " if whole else "",
        numerator,
        denominator,
    )


def format_quantity(value: Optional[Union[Number, str]], was_fraction: bool) -> str:
    """
    Format a quantity for display.

    Missing values are shown as an empty string and textual values are shown
    as they are. Numbers originally written as fractions are shown as
    fractions (see :py:func:`format_fraction`), where sensible, and all other
    numbers are shown as decimals (see :py:func:`format_decimal`).
    """
    if value is None:
        return ""
    elif isinstance(value, str):
        return value
    elif was_fraction:
        return format_fraction(value)
    else:
        return format_decimal(value)


def format_scaled(quantity: ParsedQuantity, factor: Number = 1) -> str:
    """
    Scale a :py:class:`~cooklang_recipe.recipe.ParsedQuantity` and format it
    for display.
    """
    return format_quantity(scale(quantity.value, factor), quantity.was_fraction)


def scale_for_servings(metadata: Mapping[str, str], servings: Number) -> Number:
    """
    Compute the factor needed to scale a recipe to a given number of servings,
    using the recipe's 'servings' metadata (e.g. '>> servings: 4').

    Raises
    ======
    ValueError
        If the recipe does not give a numeric number of servings.
    """
    native = parse_quantity(metadata.get("servings")).value
    if not isinstance(native, (int, float)) or native == 0:
        raise ValueError("Recipe does not specify a number of servings.")
    return servings / native
