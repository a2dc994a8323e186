"""Nutritional totals, ordering and filtering over salads."""

from collections.abc import Iterable
from enum import Enum

from salad_catalog.domain.products import is_vegetable
from salad_catalog.domain.salads import Salad, SaladIngredient


class IngredientSortKey(str, Enum):
    """Orderings available for a salad's ingredients."""

    NAME = "name"
    WEIGHT = "weight"
    CALORIES = "calories"


def total_calories(salad: Salad) -> float:
    """Return the calories of the whole salad."""
    return sum(
        (ingredient.total_calories for ingredient in salad.ingredients), start=0.0
    )


def total_weight(salad: Salad) -> float:
    """Return the weight of the whole salad in grams."""
    return sum(
        (ingredient.weight_grams for ingredient in salad.ingredients), start=0.0
    )


def sort_ingredients(
    salad: Salad, key: IngredientSortKey
) -> list[SaladIngredient]:
    """Return the salad's ingredients in ascending order of the key.

    The sort is stable, so ties keep their recipe order. The salad itself is
    not reordered.
    """
    match key:
        case IngredientSortKey.NAME:
            return sorted(salad.ingredients, key=lambda item: item.product.name)
        case IngredientSortKey.WEIGHT:
            return sorted(salad.ingredients, key=lambda item: item.weight_grams)
        case IngredientSortKey.CALORIES:
            return sorted(salad.ingredients, key=lambda item: item.total_calories)
    raise ValueError(f"Unsupported sort key: {key!r}")


def sort_salads(salads: Iterable[Salad]) -> list[Salad]:
    """Return salads ordered by total calories, lowest first."""
    return sorted(salads, key=total_calories)


def filter_vegetables_by_calorie_range(
    salad: Salad, min_calories: float, max_calories: float
) -> list[SaladIngredient]:
    """Return vegetable ingredients whose calories per 100 g lie in [min, max]."""
    return [
        ingredient
        for ingredient in salad.ingredients
        if is_vegetable(ingredient.product)
        and min_calories <= ingredient.product.calories_per_100g <= max_calories
    ]
