"""Nutrition domain models."""

from dataclasses import dataclass, field

UNKNOWN_PRODUCT_NAME = "Unknown Product"


@dataclass(frozen=True)
class Nutriments:
    """Macronutrient values per 100 grams of a product."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0


@dataclass(frozen=True)
class Product:
    """Canonical product record mapped from Open Food Facts."""

    name: str
    brand: str | None
    serving_size: str | None
    nutriments: Nutriments
    code: str | None = None
    image_url: str | None = None
    quantity: str | None = None
    categories: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ServingSpec:
    """A serving amount with its lowercase unit token."""

    amount: float
    unit: str


@dataclass(frozen=True)
class MacroSet:
    """Rounded macro values for a serving or baseline."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float


@dataclass(frozen=True)
class MacroInfo:
    """Baseline (per 100 g) macros for a product."""

    product_name: str
    brand: str | None
    serving_size: str | None
    macros: MacroSet


@dataclass(frozen=True)
class ServingInfo:
    """Serving used for a scaled calculation."""

    amount: float
    unit: str
    original_serving_size: str | None


@dataclass(frozen=True)
class ProductLabel:
    """Display identity of a product."""

    name: str
    brand: str | None


@dataclass(frozen=True)
class MacrosByServing:
    """Macros scaled to a specific serving."""

    serving_info: ServingInfo
    product: ProductLabel
    macros: MacroSet


@dataclass(frozen=True)
class SearchResults:
    """A page of text search results."""

    count: int
    page: int
    page_size: int
    total_pages: int
    products: list[Product]
