"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from macro_calculator.adapters.off_client import OpenFoodFactsClient
from macro_calculator.config import Settings
from macro_calculator.containers import AppContainer
from macro_calculator.services.macros import MacroCalculator
from macro_calculator.services.products import ProductService

APPLE_UPC = "3017620422003"


def apple_product_payload() -> dict[str, object]:
    return {
        "code": APPLE_UPC,
        "status": 1,
        "status_verbose": "product found",
        "product": {
            "code": APPLE_UPC,
            "product_name": "Apple slices",
            "brands": "Orchard Co",
            "categories_tags": ["en:fruits", "en:apples"],
            "image_url": "https://images.example/apple.jpg",
            "quantity": "500 g",
            "serving_size": "150 g (1 cup)",
            "nutriments": {
                "energy-kcal_100g": 52,
                "proteins_100g": 0.3,
                "carbohydrates_100g": 14,
                "fat_100g": 0.2,
                "fiber_100g": 2.4,
                "sugars_100g": 10.4,
            },
        },
    }


def search_payload() -> dict[str, object]:
    return {
        "count": 100,
        "page": 1,
        "page_size": 24,
        "products": [
            {
                "_id": "0001",
                "product_name": "Greek yogurt",
                "brands": "Dairy Farm",
                "image_url": "https://images.example/yogurt.jpg",
                "quantity": "1 kg",
                "categories_tags": ["en:dairies"],
                "nutriments": {
                    "energy-kcal_100g": 97,
                    "proteins_100g": 9,
                    "carbohydrates_100g": 3.6,
                    "fat_100g": 5,
                },
            },
            {"_id": "0002"},
        ],
    }


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client with in-memory responses."""

    product_payload: dict[str, object] = field(default_factory=apple_product_payload)
    search_payload: dict[str, object] = field(default_factory=search_payload)
    error: Exception | None = None
    product_calls: list[str] = field(default_factory=list)
    search_calls: list[dict[str, object]] = field(default_factory=list)

    async def get_product(self, upc: str) -> dict[str, object]:
        self.product_calls.append(upc)
        if self.error is not None:
            raise self.error
        return self.product_payload

    async def search_products(
        self, query: str, page: int = 1, page_size: int = 24, locale: str = "world"
    ) -> dict[str, object]:
        self.search_calls.append(
            {"query": query, "page": page, "page_size": page_size, "locale": locale}
        )
        if self.error is not None:
            raise self.error
        return self.search_payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        off_base_url="https://off.test",
        off_search_url_template="https://{locale}.off.test",
        off_user_agent="macro-calculator-tests",
    )


@pytest.fixture
def off_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def product_service(off_client: FakeOpenFoodFactsClient) -> ProductService:
    return ProductService(off_client)


@pytest.fixture
def macro_calculator(product_service: ProductService) -> MacroCalculator:
    return MacroCalculator(product_service)


@pytest.fixture
def container(
    settings: Settings,
    product_service: ProductService,
    macro_calculator: MacroCalculator,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        product_service=product_service,
        macro_calculator=macro_calculator,
        close_resources=close_resources,
    )
