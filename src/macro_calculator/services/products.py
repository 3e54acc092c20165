"""Product lookup and search against Open Food Facts."""

import logging
import math
from dataclasses import dataclass

import httpx

from macro_calculator.adapters.off_client import OpenFoodFactsClient, is_valid_locale
from macro_calculator.adapters.off_models import (
    OffNutriments,
    OffProduct,
    OffProductResponse,
    OffSearchResponse,
)
from macro_calculator.domain.errors import (
    ProductLookupError,
    ProductNotFoundError,
    SearchError,
)
from macro_calculator.domain.nutrition import (
    UNKNOWN_PRODUCT_NAME,
    Nutriments,
    Product,
    SearchResults,
)

FOUND_STATUS = 1
MALFORMED_RESPONSE = "malformed response"

_logger = logging.getLogger(__name__)


@dataclass
class ProductService:
    """Resolves products by barcode and searches them by text."""

    client: OpenFoodFactsClient
    debug: bool = False

    async def resolve_by_upc(self, upc: str) -> Product:
        """Fetch a product by barcode and map it to the canonical shape."""
        try:
            payload = await self.client.get_product(upc)
        except (httpx.HTTPError, ValueError) as exc:
            status = _status_code_from_exception(exc)
            _logger.warning("Product lookup failed: upc=%s status=%s", upc, status)
            raise ProductLookupError(upc, status) from exc

        try:
            response = OffProductResponse.model_validate(payload)
        except ValueError as exc:
            _logger.warning("Product lookup returned malformed payload: upc=%s", upc)
            raise ProductLookupError(upc, MALFORMED_RESPONSE) from exc

        if response.status != FOUND_STATUS or response.product is None:
            _logger.info("Product not found: upc=%s", upc)
            raise ProductNotFoundError(upc)

        product = map_product(response.product, fallback_code=upc)
        if self.debug:
            _logger.info("Product lookup OFF: upc=%s name=%s", upc, product.name)
        return product

    async def search_by_text(
        self, query: str, page: int = 1, page_size: int = 24, locale: str = "world"
    ) -> SearchResults:
        """Search products by free text and normalize the result page."""
        if not is_valid_locale(locale):
            _logger.warning("Product search rejected: locale=%r", locale)
            raise SearchError(query, f"unsupported locale: {locale!r}")
        try:
            payload = await self.client.search_products(
                query, page=page, page_size=page_size, locale=locale
            )
            response = OffSearchResponse.model_validate(payload)
        except (httpx.HTTPError, ValueError) as exc:
            cause = _search_failure_cause(exc)
            _logger.warning("Product search failed: query=%s cause=%s", query, cause)
            raise SearchError(query, cause) from exc

        resolved_page_size = response.page_size or page_size
        results = SearchResults(
            count=response.count,
            page=response.page or page,
            page_size=resolved_page_size,
            total_pages=total_pages(response.count, resolved_page_size),
            products=[
                map_product(item) for item in response.products if item is not None
            ],
        )
        if self.debug:
            _logger.info(
                "Product search OFF: query=%s results=%s", query, len(results.products)
            )
        return results


def total_pages(count: int, page_size: int) -> int:
    """Return the number of pages needed for ``count`` results."""
    if page_size <= 0:
        return 0
    return math.ceil(count / page_size)


def map_product(payload: OffProduct, fallback_code: str | None = None) -> Product:
    """Map a remote product to the domain model, applying defaults once."""
    return Product(
        code=payload.code or payload.id or fallback_code,
        name=payload.product_name or UNKNOWN_PRODUCT_NAME,
        brand=payload.brands or None,
        serving_size=payload.serving_size or None,
        nutriments=map_nutriments(payload.nutriments),
        image_url=payload.image_url or None,
        quantity=payload.quantity or None,
        categories=tuple(payload.categories_tags or ()),
    )


def map_nutriments(payload: OffNutriments | None) -> Nutriments:
    """Map per-100 g nutriments, treating absent values as zero."""
    if payload is None:
        return Nutriments()
    return Nutriments(
        calories=payload.energy_kcal_100g or 0.0,
        protein=payload.proteins_100g or 0.0,
        carbs=payload.carbohydrates_100g or 0.0,
        fat=payload.fat_100g or 0.0,
        fiber=payload.fiber_100g or 0.0,
    )


def _status_code_from_exception(exc: Exception) -> int | str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return status_code
    if isinstance(exc, ValueError):
        return MALFORMED_RESPONSE
    return "n/a"


def _search_failure_cause(exc: Exception) -> str:
    """Describe why a search request failed."""
    status_code = _status_code_from_exception(exc)
    if isinstance(status_code, int):
        return f"API request failed with status: {status_code}"
    if isinstance(exc, ValueError):
        return MALFORMED_RESPONSE
    return str(exc) or type(exc).__name__
