"""Tests for product lookup and search."""

import asyncio

import httpx
import pytest

from macro_calculator.domain.errors import (
    ErrorKind,
    MacroCalculationError,
    ProductLookupError,
    ProductNotFoundError,
    SearchError,
)
from macro_calculator.domain.nutrition import Nutriments
from macro_calculator.services.products import ProductService, total_pages
from tests.conftest import APPLE_UPC, FakeOpenFoodFactsClient


def _status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://off.test/api/v2/product/1")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("failed", request=request, response=response)


def test_resolve_by_upc_maps_product(
    product_service: ProductService, off_client: FakeOpenFoodFactsClient
) -> None:
    product = asyncio.run(product_service.resolve_by_upc(APPLE_UPC))

    assert off_client.product_calls == [APPLE_UPC]
    assert product.code == APPLE_UPC
    assert product.name == "Apple slices"
    assert product.brand == "Orchard Co"
    assert product.serving_size == "150 g (1 cup)"
    assert product.categories == ("en:fruits", "en:apples")
    assert product.nutriments == Nutriments(
        calories=52, protein=0.3, carbs=14, fat=0.2, fiber=2.4
    )


def test_resolve_by_upc_defaults_missing_fields() -> None:
    client = FakeOpenFoodFactsClient(
        product_payload={"status": 1, "product": {"nutriments": {"fat_100g": 3}}}
    )
    service = ProductService(client)

    product = asyncio.run(service.resolve_by_upc("123"))

    assert product.code == "123"
    assert product.name == "Unknown Product"
    assert product.brand is None
    assert product.serving_size is None
    assert product.image_url is None
    assert product.categories == ()
    assert product.nutriments == Nutriments(fat=3)


@pytest.mark.parametrize(
    "payload",
    [
        {"status": 0, "status_verbose": "product not found"},
        {"status": 0, "product": {"product_name": "stale"}},
        {"status": 1},
    ],
)
def test_resolve_by_upc_not_found(payload: dict[str, object]) -> None:
    service = ProductService(FakeOpenFoodFactsClient(product_payload=payload))

    with pytest.raises(ProductNotFoundError) as exc_info:
        asyncio.run(service.resolve_by_upc("000"))

    assert exc_info.value.kind is ErrorKind.PRODUCT_NOT_FOUND
    assert exc_info.value.upc == "000"


def test_resolve_by_upc_transport_failure_is_lookup_error() -> None:
    client = FakeOpenFoodFactsClient(error=_status_error(503))
    service = ProductService(client)

    with pytest.raises(ProductLookupError) as exc_info:
        asyncio.run(service.resolve_by_upc("000"))

    assert exc_info.value.kind is ErrorKind.LOOKUP_FAILED
    assert exc_info.value.status == 503


def test_resolve_by_upc_connection_failure_is_lookup_error() -> None:
    client = FakeOpenFoodFactsClient(error=httpx.ConnectError("offline"))
    service = ProductService(client)

    with pytest.raises(MacroCalculationError) as exc_info:
        asyncio.run(service.resolve_by_upc("000"))

    assert exc_info.value.kind is ErrorKind.LOOKUP_FAILED


def test_resolve_by_upc_malformed_payload_is_lookup_error() -> None:
    client = FakeOpenFoodFactsClient(product_payload={"status": "not-a-number"})
    service = ProductService(client)

    with pytest.raises(ProductLookupError) as exc_info:
        asyncio.run(service.resolve_by_upc("000"))

    assert exc_info.value.status == "malformed response"


def test_search_by_text_normalizes_results(
    product_service: ProductService, off_client: FakeOpenFoodFactsClient
) -> None:
    results = asyncio.run(product_service.search_by_text("greek yogurt"))

    assert off_client.search_calls == [
        {"query": "greek yogurt", "page": 1, "page_size": 24, "locale": "world"}
    ]
    assert results.count == 100
    assert results.page == 1
    assert results.page_size == 24
    assert results.total_pages == 5
    yogurt, bare = results.products
    assert yogurt.code == "0001"
    assert yogurt.brand == "Dairy Farm"
    assert yogurt.nutriments.fiber == 0
    assert yogurt.nutriments.protein == 9
    assert bare.name == "Unknown Product"
    assert bare.brand is None
    assert bare.image_url is None
    assert bare.quantity is None
    assert bare.categories == ()
    assert bare.nutriments == Nutriments()


def test_search_by_text_failure_wraps_cause() -> None:
    client = FakeOpenFoodFactsClient(error=_status_error(500))
    service = ProductService(client)

    with pytest.raises(SearchError) as exc_info:
        asyncio.run(service.search_by_text("rice", page=2, locale="fr"))

    assert exc_info.value.kind is ErrorKind.SEARCH_FAILED
    assert exc_info.value.query == "rice"
    assert exc_info.value.cause == "API request failed with status: 500"
    assert client.search_calls[0]["locale"] == "fr"


def test_total_pages() -> None:
    assert total_pages(100, 24) == 5
    assert total_pages(96, 24) == 4
    assert total_pages(0, 24) == 0
    assert total_pages(10, 0) == 0


def test_search_by_text_rejects_locale_before_request() -> None:
    client = FakeOpenFoodFactsClient()
    service = ProductService(client)

    with pytest.raises(SearchError) as exc_info:
        asyncio.run(service.search_by_text("x", locale="evil.example/path#"))

    assert exc_info.value.kind is ErrorKind.SEARCH_FAILED
    assert client.search_calls == []


def test_search_by_text_defaults_badly_typed_items() -> None:
    client = FakeOpenFoodFactsClient(
        search_payload={
            "count": 3,
            "page_size": 24,
            "products": [
                {
                    "_id": "0003",
                    "product_name": 12345,
                    "brands": ["not", "a", "string"],
                    "categories_tags": "en:snacks",
                    "nutriments": {"energy-kcal_100g": "lots", "fat_100g": 7},
                },
                {"_id": "0004", "nutriments": ["broken"]},
                "not-a-product",
            ],
        }
    )
    service = ProductService(client)

    results = asyncio.run(service.search_by_text("snack"))

    assert results.count == 3
    assert [product.code for product in results.products] == ["0003", "0004"]
    odd, broken = results.products
    assert odd.name == "Unknown Product"
    assert odd.brand is None
    assert odd.categories == ()
    assert odd.nutriments == Nutriments(fat=7)
    assert broken.nutriments == Nutriments()


def test_resolve_by_upc_non_finite_nutriment_defaults_to_zero() -> None:
    client = FakeOpenFoodFactsClient(
        product_payload={
            "status": 1,
            "product": {
                "product_name": "Odd bar",
                "nutriments": {"energy-kcal_100g": float("nan"), "proteins_100g": 4},
            },
        }
    )
    service = ProductService(client)

    product = asyncio.run(service.resolve_by_upc("777"))

    assert product.nutriments == Nutriments(protein=4)
