"""Macro scaling from per-100 g values."""

import math
from dataclasses import asdict

from macro_calculator.domain.errors import InvalidQuantityError
from macro_calculator.domain.nutrition import MacroSet, Nutriments
from macro_calculator.services.units import convert

SCALED_DECIMALS = 1
BASELINE_DECIMALS = 2


def scale_macros(
    nutriments: Nutriments, serving_amount: float, serving_unit: str = "g"
) -> MacroSet:
    """Scale per-100 g nutriments to a serving, rounded to one decimal.

    The serving amount must be positive and finite, and so must its weight in
    grams; otherwise ``InvalidQuantityError`` is raised.
    """
    if not math.isfinite(serving_amount) or serving_amount <= 0:
        raise InvalidQuantityError("serving_amount", serving_amount)
    grams = convert(serving_amount, serving_unit)
    if not math.isfinite(grams):
        raise InvalidQuantityError("serving_amount", serving_amount)
    return _rounded_macros(nutriments, grams / 100, SCALED_DECIMALS)


def baseline_macros(nutriments: Nutriments) -> MacroSet:
    """Return the unscaled per-100 g values rounded to two decimals."""
    return _rounded_macros(nutriments, 1, BASELINE_DECIMALS)


def _rounded_macros(nutriments: Nutriments, ratio: float, decimals: int) -> MacroSet:
    values = {
        name: _round_half_up(name, value * ratio, decimals)
        for name, value in asdict(nutriments).items()
    }
    return MacroSet(**values)


def _round_half_up(name: str, value: float, decimals: int) -> float:
    """Round halves up on the float product; ``round`` rounds 0.45 down."""
    factor = 10**decimals
    shifted = value * factor
    if not math.isfinite(shifted):
        raise InvalidQuantityError(name, value)
    return math.floor(shifted + 0.5) / factor
