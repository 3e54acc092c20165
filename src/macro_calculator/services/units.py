"""Unit conversion to grams."""

from macro_calculator.domain.errors import UnsupportedUnitError

# ml and l assume a density of 1 g/ml.
GRAMS_PER_UNIT: dict[str, float] = {
    "g": 1,
    "kg": 1000,
    "mg": 0.001,
    "oz": 28.3495,
    "lb": 453.592,
    "ml": 1,
    "l": 1000,
}

SUPPORTED_UNITS = frozenset(GRAMS_PER_UNIT)


def is_supported_unit(unit: str) -> bool:
    """Return whether the unit can be converted to grams."""
    return unit.lower() in GRAMS_PER_UNIT


def convert(amount: float, unit: str) -> float:
    """Convert an amount in the given unit to grams."""
    factor = GRAMS_PER_UNIT.get(unit.lower())
    if factor is None:
        raise UnsupportedUnitError(unit)
    return amount * factor
