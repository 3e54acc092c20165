"""Macro calculation API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, status

from macro_calculator.adapters.off_client import LOCALE_PATTERN
from macro_calculator.domain.errors import ErrorKind
from macro_calculator.domain.nutrition import (
    MacroInfo,
    MacrosByServing,
    SearchResults,
)

if TYPE_CHECKING:
    from macro_calculator.containers import AppContainer

router = APIRouter(prefix="/products", tags=["products"])

UNPROCESSABLE = 422
MAX_SERVING_AMOUNT = 100_000

ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.UNSUPPORTED_UNIT: UNPROCESSABLE,
    ErrorKind.UNPARSEABLE_SERVING_SIZE: UNPROCESSABLE,
    ErrorKind.INVALID_QUANTITY: UNPROCESSABLE,
    ErrorKind.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.LOOKUP_FAILED: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.SEARCH_FAILED: status.HTTP_502_BAD_GATEWAY,
}


@router.get("/search")
async def search_products(
    request: Request,
    q: str = Query(min_length=1),
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=24, ge=1, le=100),
    locale: str = Query(default="world", pattern=LOCALE_PATTERN),
) -> SearchResults:
    """Search products by free text."""
    container: AppContainer = request.app.state.container
    return await container.product_service.search_by_text(
        q, page=page, page_size=page_size, locale=locale
    )


@router.get("/{upc}/macros")
async def product_macros(upc: str, request: Request) -> MacroInfo:
    """Return baseline per-100 g macros for a barcode."""
    container: AppContainer = request.app.state.container
    return await container.macro_calculator.get_macros_for_upc(upc)


@router.get("/{upc}/macros/serving")
async def serving_macros(
    upc: str,
    request: Request,
    amount: float = Query(gt=0, le=MAX_SERVING_AMOUNT, allow_inf_nan=False),
    unit: str = "g",
) -> MacrosByServing:
    """Return macros scaled to a serving amount."""
    container: AppContainer = request.app.state.container
    return await container.macro_calculator.get_macros_for_serving(upc, amount, unit)


@router.get("/{upc}/macros/label-serving")
async def label_serving_macros(upc: str, request: Request) -> MacrosByServing:
    """Return macros for the serving declared on the label."""
    container: AppContainer = request.app.state.container
    return await container.macro_calculator.get_macros_for_label_serving(upc)
