"""Application service for composing salads."""

import logging
from dataclasses import dataclass

from salad_catalog.adapters.text_codec import parse_number
from salad_catalog.domain.salads import Salad, SaladIngredient, validate_salad_name
from salad_catalog.errors import (
    InvalidInputError,
    ProductNotFoundError,
    SaladNotFoundError,
)
from salad_catalog.services.aggregation import (
    IngredientSortKey,
    filter_vegetables_by_calorie_range,
    sort_ingredients,
    sort_salads,
)
from salad_catalog.services.catalog import ProductCatalog
from salad_catalog.services.salad_store import SaladStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaladChange:
    """A created salad and whether its recipe file was written."""

    salad: Salad
    persisted: bool


@dataclass(frozen=True)
class IngredientChange:
    """An added or removed ingredient and whether the recipe file was updated."""

    ingredient: SaladIngredient
    persisted: bool


@dataclass
class SaladService:
    """Recipe editing on top of the salad store and the product catalog."""

    store: SaladStore
    catalog: ProductCatalog

    def create_salad(self, name: str) -> SaladChange:
        """Create an empty salad and try to persist it.

        When the recipe file cannot be written the salad is returned with
        ``persisted=False`` and is not cached.
        """
        cleaned = validate_salad_name(name)
        if self.store.find_by_name(cleaned) is not None:
            raise InvalidInputError(f"Salad {cleaned!r} already exists")
        salad = Salad(name=cleaned)
        persisted = self.store.save(salad)
        _logger.info("Salad created: name=%s persisted=%s", cleaned, persisted)
        return SaladChange(salad=salad, persisted=persisted)

    def get_salad(self, name: str) -> Salad:
        salad = self.store.find_by_name(name) or self.store.find_by_name(name.strip())
        if salad is None:
            raise SaladNotFoundError(f"No salad named {name!r}")
        return salad

    def list_salads(self) -> list[Salad]:
        return self.store.all_salads()

    def delete_salad(self, name: str) -> bool:
        """Delete an existing salad; returns whether the deletion succeeded."""
        salad = self.get_salad(name)
        return self.store.delete(salad.name)

    def add_ingredient(
        self, salad_name: str, product_name: str, weight: object
    ) -> IngredientChange:
        """Add a catalog product to a salad and persist the recipe.

        The cached salad keeps the ingredient even when saving fails.
        """
        salad = self.get_salad(salad_name)
        product = self.catalog.find_by_name(product_name.strip())
        if product is None:
            raise ProductNotFoundError(f"No product named {product_name!r}")
        weight_grams = parse_number(str(weight))
        if weight_grams is None:
            raise InvalidInputError(f"Weight must be a number, got {weight!r}")

        ingredient = SaladIngredient(product=product, weight_grams=weight_grams)
        salad.add_ingredient(ingredient)
        persisted = self.store.save(salad)
        _logger.info(
            "Ingredient added: salad=%s product=%s grams=%s persisted=%s",
            salad.name,
            product.name,
            weight_grams,
            persisted,
        )
        return IngredientChange(ingredient=ingredient, persisted=persisted)

    def remove_ingredient(
        self, salad_name: str, product_name: str
    ) -> IngredientChange:
        """Remove the first ingredient with this product name and persist."""
        salad = self.get_salad(salad_name)
        ingredient = salad.find_ingredient(product_name.strip())
        if ingredient is None:
            raise ProductNotFoundError(
                f"Salad {salad.name!r} has no ingredient {product_name!r}"
            )
        salad.remove_ingredient(ingredient)
        persisted = self.store.save(salad)
        return IngredientChange(ingredient=ingredient, persisted=persisted)

    def sorted_ingredients(
        self, salad_name: str, key: IngredientSortKey
    ) -> list[SaladIngredient]:
        return sort_ingredients(self.get_salad(salad_name), key)

    def salads_by_calories(self) -> list[Salad]:
        return sort_salads(self.store.all_salads())

    def vegetables_in_calorie_range(
        self, salad_name: str, min_calories: float, max_calories: float
    ) -> list[SaladIngredient]:
        """Return the salad's vegetables with calories per 100 g in range."""
        salad = self.get_salad(salad_name)
        if min_calories > max_calories:
            raise InvalidInputError("Minimum calories must not exceed the maximum")
        return filter_vegetables_by_calorie_range(salad, min_calories, max_calories)
