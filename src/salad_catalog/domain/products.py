"""Domain models for catalog products."""

from dataclasses import dataclass
from enum import Enum

JUICY_WATER_PERCENT = 90.0


class ProductKind(str, Enum):
    """Type tags used in the catalog file."""

    ROOT_VEGETABLE = "RootVegetable"
    LEAFY_VEGETABLE = "LeafyVegetable"
    FRUITING_VEGETABLE = "FruitingVegetable"
    TUBER_VEGETABLE = "TuberVegetable"
    DRESSING = "Dressing"
    TOPPING = "Topping"


class ProductGroup(str, Enum):
    """Coarse grouping used when browsing the catalog."""

    VEGETABLE = "vegetable"
    DRESSING = "dressing"
    TOPPING = "topping"


@dataclass(frozen=True)
class RootVegetable:
    """Root vegetable such as carrot or beet."""

    name: str
    calories_per_100g: float
    sugar_content: float
    is_hard: bool

    kind = ProductKind.ROOT_VEGETABLE


@dataclass(frozen=True)
class LeafyVegetable:
    """Leafy vegetable such as lettuce or spinach."""

    name: str
    calories_per_100g: float
    fiber_content: float

    kind = ProductKind.LEAFY_VEGETABLE


@dataclass(frozen=True)
class FruitingVegetable:
    """Fruiting vegetable such as tomato or cucumber."""

    name: str
    calories_per_100g: float
    water_content_percent: float

    kind = ProductKind.FRUITING_VEGETABLE


@dataclass(frozen=True)
class TuberVegetable:
    """Tuber such as potato."""

    name: str
    calories_per_100g: float
    starch_content: float

    kind = ProductKind.TUBER_VEGETABLE


@dataclass(frozen=True)
class Dressing:
    """Salad dressing with a base (oil, cream, acid, ...)."""

    name: str
    calories_per_100g: float
    base_type: str

    kind = ProductKind.DRESSING


@dataclass(frozen=True)
class Topping:
    """Salad topping such as croutons or seeds."""

    name: str
    calories_per_100g: float
    is_crunchy: bool

    kind = ProductKind.TOPPING


Vegetable = RootVegetable | LeafyVegetable | FruitingVegetable | TuberVegetable
Product = Vegetable | Dressing | Topping

VEGETABLE_TYPES = (RootVegetable, LeafyVegetable, FruitingVegetable, TuberVegetable)


def is_vegetable(product: Product) -> bool:
    """Return True when the product belongs to the vegetable group."""
    return isinstance(product, VEGETABLE_TYPES)


def product_group(product: Product) -> ProductGroup:
    """Return the browsing group of a product."""
    match product:
        case Dressing():
            return ProductGroup.DRESSING
        case Topping():
            return ProductGroup.TOPPING
        case _:
            return ProductGroup.VEGETABLE


def cooking_tip(product: Product) -> str | None:
    """Return a preparation tip for the product, if it has one."""
    match product:
        case RootVegetable(is_hard=True):
            return "Grate or slice thinly, hard roots are tough to chew in chunks."
        case RootVegetable():
            return "Dice and add raw."
        case LeafyVegetable():
            return "Tear the leaves by hand just before serving to keep them crisp."
        case FruitingVegetable(water_content_percent=water) if (
            water >= JUICY_WATER_PERCENT
        ):
            return "Remove the seeds and drain the juice so the salad stays crisp."
        case TuberVegetable():
            return "Boil until tender and let cool, never add raw."
        case Dressing(base_type=base_type):
            return f"Add the {base_type.lower()} dressing right before serving."
        case Topping(is_crunchy=True):
            return "Sprinkle on at the last moment so it stays crunchy."
        case _:
            return None
