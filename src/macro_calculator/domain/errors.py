"""Error taxonomy for macro calculations.

Every failure raised by the calculator is a ``MacroCalculationError`` tagged
with an ``ErrorKind``. Callers branch on ``exc.kind``; the subclasses only
exist to build each kind with the right context attached.
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failures the calculator reports."""

    UNSUPPORTED_UNIT = "unsupported_unit"
    UNPARSEABLE_SERVING_SIZE = "unparseable_serving_size"
    INVALID_QUANTITY = "invalid_quantity"
    PRODUCT_NOT_FOUND = "product_not_found"
    LOOKUP_FAILED = "lookup_failed"
    SEARCH_FAILED = "search_failed"


class MacroCalculationError(Exception):
    """Base error carrying a kind and a human readable message."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(message)


class UnsupportedUnitError(MacroCalculationError):
    """Unit is not present in the conversion table."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(ErrorKind.UNSUPPORTED_UNIT, f"Unsupported unit: {unit}")


class UnparseableServingSizeError(MacroCalculationError):
    """Serving text does not start with a numeric amount."""

    def __init__(self, text: str | None) -> None:
        self.text = text
        super().__init__(
            ErrorKind.UNPARSEABLE_SERVING_SIZE,
            f"Unable to parse serving size: {text!r}",
        )


class InvalidQuantityError(MacroCalculationError):
    """A serving amount or nutrient value is not a usable number."""

    def __init__(self, field: str, value: float) -> None:
        self.field = field
        self.value = value
        super().__init__(
            ErrorKind.INVALID_QUANTITY, f"Invalid {field}: {value!r}"
        )


class ProductNotFoundError(MacroCalculationError):
    """The remote database has no product for the code."""

    def __init__(self, upc: str) -> None:
        self.upc = upc
        super().__init__(
            ErrorKind.PRODUCT_NOT_FOUND, f"Product not found for UPC: {upc}"
        )


class ProductLookupError(MacroCalculationError):
    """Product lookup failed at the transport layer."""

    def __init__(self, upc: str, status: int | str) -> None:
        self.upc = upc
        self.status = status
        super().__init__(
            ErrorKind.LOOKUP_FAILED,
            f"Failed to fetch product information for UPC {upc}: status {status}",
        )


class SearchError(MacroCalculationError):
    """Text search failed at the transport layer."""

    def __init__(self, query: str, cause: str) -> None:
        self.query = query
        self.cause = cause
        super().__init__(
            ErrorKind.SEARCH_FAILED, f"Failed to search products: {cause}"
        )
