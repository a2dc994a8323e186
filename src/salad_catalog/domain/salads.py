"""Domain models for salad recipes."""

from dataclasses import dataclass, field

from salad_catalog.domain.products import Product
from salad_catalog.errors import InvalidInputError

_FORBIDDEN_NAME_CHARS = frozenset('/\\:*?"<>|;\n\r\t\0')


def validate_salad_name(name: str) -> str:
    """Return the trimmed salad name, or raise if it cannot name a recipe file."""
    cleaned = name.strip()
    if not cleaned:
        raise InvalidInputError("Salad name must not be empty")
    if cleaned in {".", ".."} or _FORBIDDEN_NAME_CHARS.intersection(cleaned):
        raise InvalidInputError(f"Salad name {name!r} is not a valid file name")
    return cleaned


@dataclass(frozen=True)
class SaladIngredient:
    """A catalog product used in a salad with its weight in grams."""

    product: Product
    weight_grams: float

    @property
    def total_calories(self) -> float:
        """Calories contributed by this ingredient."""
        return self.product.calories_per_100g * self.weight_grams / 100


@dataclass
class Salad:
    """A named, ordered list of ingredients."""

    name: str
    ingredients: list[SaladIngredient] = field(default_factory=list)

    def add_ingredient(self, ingredient: SaladIngredient) -> None:
        self.ingredients.append(ingredient)

    def remove_ingredient(self, ingredient: SaladIngredient) -> None:
        """Remove the first equal ingredient; raises ValueError when absent."""
        self.ingredients.remove(ingredient)

    def find_ingredient(self, product_name: str) -> SaladIngredient | None:
        """Return the first ingredient whose product name matches, ignoring case."""
        wanted = product_name.casefold()
        for ingredient in self.ingredients:
            if ingredient.product.name.casefold() == wanted:
                return ingredient
        return None


@dataclass(frozen=True)
class LoadSummary:
    """Outcome counts of a bulk load."""

    loaded: int
    skipped: int
