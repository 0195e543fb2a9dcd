"""
Parsing of the quantities and units written inside ingredient, cookware and
timer markers (e.g. the '1 1/2' and 'cups' in '@flour{1 1/2%cups}').

.. autofunction:: parse_quantity

.. autofunction:: parse_units

.. autofunction:: number
"""

from typing import Optional

import logging
import re

from cooklang_recipe.recipe import Number, ParsedQuantity

__all__ = [
    "parse_quantity",
    "parse_units",
    "number",
]

logger = logging.getLogger(__name__)


numeric_pattern = re.compile(r"[0-9./%\s]+")
"""Quantities made only of these characters are treated as numbers."""


def _decimal(value: str) -> Number:
    if "." in value:
        return float(value)
    else:
        return int(value)


def _fraction(value: str) -> float:
    numerator, denominator = value.split("/")
    return _decimal(numerator) / _decimal(denominator)


def parse_quantity(quantity: Optional[str]) -> ParsedQuantity:
    """
    Parse a quantity string.

    * Missing or blank quantities produce a value of None.
    * Integers (e.g. '3') and decimals (e.g. '1.5') produce an int or float.
    * Fractions (e.g. '1/2') and mixed fractions (e.g. '1 1/2') produce a
      float and are flagged as having been fractions.
    * Anything else (e.g. 'a pinch', or a malformed number like '1/0') is
      returned as the stripped string.

    This function never raises an exception.
    """
    if quantity is None or quantity.strip() == "":
        return ParsedQuantity(None, False)

    stripped = quantity.strip()

    if numeric_pattern.fullmatch(quantity) is None:
        return ParsedQuantity(stripped, False)

    try:
        parts = stripped.split()
        if len(parts) > 1:  # Mixed fraction, e.g. '1 1/2'
            whole, fraction = parts
            return ParsedQuantity(_decimal(whole) + _fraction(fraction), True)
        elif "/" in stripped:  # Simple fraction, e.g. '1/2'
            return ParsedQuantity(_fraction(stripped), True)
        else:
            return ParsedQuantity(_decimal(stripped), False)
    except (ValueError, ZeroDivisionError, OverflowError) as e:
        logger.debug("Treating quantity %r as text (%s)", stripped, e)
        return ParsedQuantity(stripped, False)


def parse_units(units: Optional[str]) -> Optional[str]:
    """
    Strip a units string, returning None if it is missing or blank.
    """
    if units is None or units.strip() == "":
        return None
    return units.strip()


def number(value: str) -> Number:
    """
    Parse a number formatted as an integer (e.g. '2'), decimal (e.g. '1.5'),
    fraction (e.g. '1/2') or mixed fraction (e.g. '1 1/2'). Throws a
    :py:exc:`ValueError` if the value is not a number.
    """
    value_or_text = parse_quantity(value).value
    if isinstance(value_or_text, (int, float)):
        return value_or_text
    raise ValueError(f"{value!r} is not a number")
