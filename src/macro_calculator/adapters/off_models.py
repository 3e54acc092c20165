"""Pydantic models for Open Food Facts payloads.

Every product field is optional: the remote shape is open and products are
frequently incomplete or carry values of the wrong type. A field that fails
validation is read as absent, so one bad value never discards the product.
Defaults are applied when mapping to domain models.
"""

from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)


def _none_on_error(value: object, handler: ValidatorFunctionWrapHandler) -> object:
    try:
        return handler(value)
    except ValidationError:
        return None


_Lenient = WrapValidator(_none_on_error)

OptionalStr = Annotated[str | None, _Lenient]
OptionalFloat = Annotated[float | None, _Lenient]


class OffNutriments(BaseModel):
    """Per-100 g nutriment fields consumed from a product."""

    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", allow_inf_nan=False
    )

    energy_kcal_100g: OptionalFloat = Field(default=None, alias="energy-kcal_100g")
    proteins_100g: OptionalFloat = None
    carbohydrates_100g: OptionalFloat = None
    fat_100g: OptionalFloat = None
    fiber_100g: OptionalFloat = None


class OffProduct(BaseModel):
    """Open Food Facts product payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: OptionalStr = Field(default=None, alias="_id")
    code: OptionalStr = None
    product_name: OptionalStr = None
    brands: OptionalStr = None
    categories_tags: Annotated[list[str] | None, _Lenient] = None
    image_url: OptionalStr = None
    quantity: OptionalStr = None
    serving_size: OptionalStr = None
    nutriments: Annotated[OffNutriments | None, _Lenient] = None


class OffProductResponse(BaseModel):
    """Response of the product-by-code endpoint."""

    model_config = ConfigDict(extra="ignore")

    status: int | None = None
    product: OffProduct | None = None


class OffSearchResponse(BaseModel):
    """Response of the legacy text search endpoint.

    Items that are not product objects at all come through as ``None``.
    """

    model_config = ConfigDict(extra="ignore")

    count: int = 0
    page: int | None = None
    page_size: int | None = None
    products: list[Annotated[OffProduct | None, _Lenient]] = Field(
        default_factory=list
    )
