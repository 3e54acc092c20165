"""Open Food Facts API client."""

import re
from dataclasses import dataclass
from typing import Protocol

import httpx

DEFAULT_PRODUCT_FIELDS = (
    "brands,categories_tags,code,image_url,product_name,"
    "nutriments,quantity,serving_size"
)

# Country subdomain of openfoodfacts.org, or "world".
LOCALE_PATTERN = r"^(?:world|[a-z]{2,3})$"
_LOCALE = re.compile(LOCALE_PATTERN)


def is_valid_locale(locale: str) -> bool:
    """Return whether the locale is a bare Open Food Facts host label."""
    return _LOCALE.fullmatch(locale) is not None


class OpenFoodFactsClient(Protocol):
    """Interface for Open Food Facts API interactions."""

    async def get_product(self, upc: str) -> dict[str, object]:
        """Fetch a product by barcode and return raw API data."""

    async def search_products(
        self, query: str, page: int = 1, page_size: int = 24, locale: str = "world"
    ) -> dict[str, object]:
        """Search products by text and return raw API data."""


@dataclass
class HttpxOpenFoodFactsClient(OpenFoodFactsClient):
    """HTTPX-backed Open Food Facts client."""

    base_url: str
    search_url_template: str
    http_client: httpx.AsyncClient
    product_fields: str = DEFAULT_PRODUCT_FIELDS
    timeout_seconds: float = 15

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        base_url: str,
        search_url_template: str,
        user_agent: str,
        product_fields: str = DEFAULT_PRODUCT_FIELDS,
        timeout_seconds: float = 15,
    ) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            search_url_template=search_url_template,
            http_client=httpx.AsyncClient(headers={"User-Agent": user_agent}),
            product_fields=product_fields,
            timeout_seconds=timeout_seconds,
        )

    async def get_product(self, upc: str) -> dict[str, object]:
        """Fetch a product by barcode.

        A 404 carrying a JSON body is the structured not-found answer and is
        returned as data; any other failure raises ``httpx.HTTPStatusError``.
        """
        url = f"{self.base_url}/api/v2/product/{upc}"
        params = {"fields": self.product_fields} if self.product_fields else None
        response = await self.http_client.get(
            url, params=params, timeout=self.timeout_seconds
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            try:
                return response.json()
            except ValueError:
                response.raise_for_status()
        response.raise_for_status()
        return response.json()

    async def search_products(
        self, query: str, page: int = 1, page_size: int = 24, locale: str = "world"
    ) -> dict[str, object]:
        """Search products with the legacy full text search endpoint."""
        if not is_valid_locale(locale):
            raise ValueError(f"Invalid locale: {locale!r}")
        url = f"{self.search_url_template.format(locale=locale)}/cgi/search.pl"
        response = await self.http_client.get(
            url,
            params={
                "search_terms": query,
                "search_simple": 1,
                "action": "process",
                "json": "true",
                "page": page,
                "page_size": page_size,
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
