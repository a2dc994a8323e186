"""Pydantic models for the HTTP API."""

from pydantic import BaseModel, Field

from salad_catalog.domain.products import Product, ProductKind, cooking_tip
from salad_catalog.domain.salads import Salad, SaladIngredient
from salad_catalog.services.aggregation import total_calories, total_weight


class ProductCreate(BaseModel):
    """Payload for adding a catalog product."""

    kind: ProductKind
    name: str
    calories_per_100g: float | str
    details: dict[str, float | bool | str] = Field(default_factory=dict)


class SaladCreate(BaseModel):
    """Payload for creating an empty salad."""

    name: str


class IngredientCreate(BaseModel):
    """Payload for adding an ingredient to a salad."""

    product_name: str
    weight_grams: float | str


class ProductView(BaseModel):
    """Catalog product as returned by the API."""

    kind: ProductKind
    name: str
    calories_per_100g: float
    cooking_tip: str | None = None
    details: dict[str, float | bool | str]

    @classmethod
    def from_product(cls, product: Product) -> "ProductView":
        fields = dict(vars(product))
        name = fields.pop("name")
        calories = fields.pop("calories_per_100g")
        return cls(
            kind=product.kind,
            name=name,
            calories_per_100g=calories,
            cooking_tip=cooking_tip(product),
            details=fields,
        )


class IngredientView(BaseModel):
    """Salad ingredient with its calorie contribution."""

    product: ProductView
    weight_grams: float
    total_calories: float

    @classmethod
    def from_ingredient(cls, ingredient: SaladIngredient) -> "IngredientView":
        return cls(
            product=ProductView.from_product(ingredient.product),
            weight_grams=ingredient.weight_grams,
            total_calories=ingredient.total_calories,
        )


class SaladSummary(BaseModel):
    """Salad name with its totals."""

    name: str
    total_calories: float
    total_weight: float

    @classmethod
    def from_salad(cls, salad: Salad) -> "SaladSummary":
        return cls(
            name=salad.name,
            total_calories=total_calories(salad),
            total_weight=total_weight(salad),
        )


class SaladDetail(SaladSummary):
    """Salad with its ingredients."""

    ingredients: list[IngredientView]

    @classmethod
    def from_salad(cls, salad: Salad) -> "SaladDetail":
        return cls(
            name=salad.name,
            total_calories=total_calories(salad),
            total_weight=total_weight(salad),
            ingredients=[
                IngredientView.from_ingredient(item) for item in salad.ingredients
            ],
        )
