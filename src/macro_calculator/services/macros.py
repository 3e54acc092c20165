"""Macro calculations for products and servings."""

import logging
from dataclasses import dataclass

from macro_calculator.domain.nutrition import (
    MacroInfo,
    MacrosByServing,
    Product,
    ProductLabel,
    ServingInfo,
)
from macro_calculator.services.products import ProductService
from macro_calculator.services.scaling import baseline_macros, scale_macros
from macro_calculator.services.servings import parse_serving_size

_logger = logging.getLogger(__name__)


@dataclass
class MacroCalculator:
    """Entry point the diet log uses to compute macros."""

    product_service: ProductService

    async def get_macros_for_upc(self, upc: str) -> MacroInfo:
        """Return the label baseline (per 100 g) macros for a barcode."""
        product = await self.product_service.resolve_by_upc(upc)
        return MacroInfo(
            product_name=product.name,
            brand=product.brand,
            serving_size=product.serving_size,
            macros=baseline_macros(product.nutriments),
        )

    async def get_macros_for_serving(
        self,
        product_or_upc: Product | str,
        serving_amount: float,
        serving_unit: str = "g",
    ) -> MacrosByServing:
        """Return macros scaled to a caller-supplied serving."""
        product = await self._resolve(product_or_upc)
        return _macros_by_serving(product, serving_amount, serving_unit)

    async def get_macros_for_label_serving(
        self, product_or_upc: Product | str
    ) -> MacrosByServing:
        """Return macros for the serving declared on the product label."""
        product = await self._resolve(product_or_upc)
        serving = parse_serving_size(product.serving_size, strict=True)
        _logger.info(
            "Derived label serving: product=%s amount=%s unit=%s",
            product.name,
            serving.amount,
            serving.unit,
        )
        return _macros_by_serving(product, serving.amount, serving.unit)

    async def _resolve(self, product_or_upc: Product | str) -> Product:
        if isinstance(product_or_upc, Product):
            return product_or_upc
        return await self.product_service.resolve_by_upc(product_or_upc)


def _macros_by_serving(
    product: Product, serving_amount: float, serving_unit: str
) -> MacrosByServing:
    macros = scale_macros(product.nutriments, serving_amount, serving_unit)
    return MacrosByServing(
        serving_info=ServingInfo(
            amount=serving_amount,
            unit=serving_unit,
            original_serving_size=product.serving_size,
        ),
        product=ProductLabel(name=product.name, brand=product.brand),
        macros=macros,
    )
