"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from macro_calculator.adapters.off_client import HttpxOpenFoodFactsClient
from macro_calculator.config import Settings
from macro_calculator.services.macros import MacroCalculator
from macro_calculator.services.products import ProductService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    product_service: ProductService
    macro_calculator: MacroCalculator
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    off_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.off_base_url,
        search_url_template=resolved_settings.off_search_url_template,
        user_agent=resolved_settings.off_user_agent,
        product_fields=resolved_settings.off_product_fields,
        timeout_seconds=resolved_settings.off_timeout_seconds,
    )
    product_service = ProductService(
        client=off_client,
        debug=resolved_settings.debug,
    )
    macro_calculator = MacroCalculator(product_service)

    async def close_resources() -> None:
        await off_client.close()

    return AppContainer(
        settings=resolved_settings,
        product_service=product_service,
        macro_calculator=macro_calculator,
        close_resources=close_resources,
    )
