"""Serving size text parsing."""

import re

from macro_calculator.domain.errors import (
    UnparseableServingSizeError,
    UnsupportedUnitError,
)
from macro_calculator.domain.nutrition import ServingSpec
from macro_calculator.services.units import is_supported_unit

DEFAULT_UNIT = "g"

_PARENTHETICAL = re.compile(r"\([^)]*\)")
_LEADING_AMOUNT = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)\s*([a-zA-Z]+)?")


def parse_serving_size(text: str | None, *, strict: bool = False) -> ServingSpec:
    """Parse label text like ``"30 g"`` or ``"1 cup (240 ml)"``.

    Parenthetical notes are dropped before matching. The unit defaults to
    grams and is lowercased. With ``strict`` the unit must also be
    convertible, otherwise ``UnsupportedUnitError`` is raised here instead of
    at conversion time.
    """
    if not text:
        raise UnparseableServingSizeError(text)
    cleaned = _PARENTHETICAL.sub("", text).strip()
    match = _LEADING_AMOUNT.match(cleaned)
    if match is None:
        raise UnparseableServingSizeError(text)

    amount = float(match.group(1))
    if amount <= 0:
        raise UnparseableServingSizeError(text)
    unit = (match.group(2) or DEFAULT_UNIT).lower()
    if strict and not is_supported_unit(unit):
        raise UnsupportedUnitError(unit)
    return ServingSpec(amount=amount, unit=unit)
