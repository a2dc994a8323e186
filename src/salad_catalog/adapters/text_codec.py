"""Line codecs for the catalog file and recipe files.

Catalog lines look like ``<TypeTag>;<name>;<calories>;<fields...>`` with the
type-specific fields in the order given by ``PRODUCT_SCHEMAS``. Recipe lines
look like ``<productName>;<weightGrams>``. Decoding never raises: it returns
either the decoded value or a ``MalformedRecord`` describing the problem.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum

from salad_catalog.domain.products import (
    Dressing,
    FruitingVegetable,
    LeafyVegetable,
    Product,
    ProductKind,
    RootVegetable,
    Topping,
    TuberVegetable,
)
from salad_catalog.domain.salads import SaladIngredient

SEPARATOR = ";"
_MIN_PRODUCT_FIELDS = 3
_INGREDIENT_FIELDS = 2
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class FieldType(Enum):
    """Wire type of a type-specific catalog field."""

    NUMBER = "number"
    BOOLEAN = "boolean"
    TEXT = "text"


@dataclass(frozen=True)
class ProductSchema:
    """Constructor and ordered type-specific fields of one product variant."""

    factory: type
    fields: tuple[tuple[str, FieldType], ...]


PRODUCT_SCHEMAS: dict[ProductKind, ProductSchema] = {
    ProductKind.ROOT_VEGETABLE: ProductSchema(
        RootVegetable,
        (("sugar_content", FieldType.NUMBER), ("is_hard", FieldType.BOOLEAN)),
    ),
    ProductKind.LEAFY_VEGETABLE: ProductSchema(
        LeafyVegetable, (("fiber_content", FieldType.NUMBER),)
    ),
    ProductKind.FRUITING_VEGETABLE: ProductSchema(
        FruitingVegetable, (("water_content_percent", FieldType.NUMBER),)
    ),
    ProductKind.TUBER_VEGETABLE: ProductSchema(
        TuberVegetable, (("starch_content", FieldType.NUMBER),)
    ),
    ProductKind.DRESSING: ProductSchema(Dressing, (("base_type", FieldType.TEXT),)),
    ProductKind.TOPPING: ProductSchema(Topping, (("is_crunchy", FieldType.BOOLEAN),)),
}

_KINDS_BY_TAG = {kind.value: kind for kind in ProductKind}


@dataclass(frozen=True)
class MalformedRecord:
    """A line that could not be decoded."""

    line: str
    reason: str


@dataclass(frozen=True)
class IngredientLine:
    """A decoded recipe line, not yet resolved against the catalog."""

    product_name: str
    weight_grams: float


def parse_number(raw: str) -> float | None:
    """Parse a finite decimal number, accepting ``,`` as the decimal separator."""
    candidate = raw.strip().replace(",", ".")
    if not _NUMBER_PATTERN.fullmatch(candidate):
        return None
    value = float(candidate)
    if not math.isfinite(value):
        return None
    return value


def parse_bool(raw: str) -> bool | None:
    """Parse ``true``/``false`` in any letter case."""
    candidate = raw.strip().lower()
    if candidate == "true":
        return True
    if candidate == "false":
        return False
    return None


def format_number(value: float) -> str:
    """Render a number with ``.`` as the decimal separator."""
    return repr(float(value))


def _format_field(value: object, field_type: FieldType) -> str:
    if field_type is FieldType.NUMBER:
        return format_number(value)  # type: ignore[arg-type]
    if field_type is FieldType.BOOLEAN:
        return "true" if value else "false"
    return str(value)


def _parse_field(raw: str, field_type: FieldType) -> float | bool | str | None:
    if field_type is FieldType.NUMBER:
        return parse_number(raw)
    if field_type is FieldType.BOOLEAN:
        return parse_bool(raw)
    return raw if raw.strip() else None


def resolve_kind(tag: str) -> ProductKind | None:
    """Return the product kind for a type tag, if known."""
    return _KINDS_BY_TAG.get(tag)


def build_product(
    kind: ProductKind, name: str, calories: str, details: list[str]
) -> Product | str:
    """Build a product from raw text fields.

    Returns the product, or a short reason string when a field is missing or
    fails to parse. Extra trailing fields are ignored.
    """
    schema = PRODUCT_SCHEMAS[kind]
    calories_value = parse_number(calories)
    if calories_value is None:
        return f"invalid calories {calories!r}"
    if len(details) < len(schema.fields):
        return f"{kind.value} expects {len(schema.fields)} extra field(s)"
    values: dict[str, object] = {}
    for (field_name, field_type), raw in zip(schema.fields, details, strict=False):
        parsed = _parse_field(raw, field_type)
        if parsed is None:
            return f"invalid {field_name} {raw!r}"
        values[field_name] = parsed
    return schema.factory(name=name, calories_per_100g=calories_value, **values)


def encode_product(product: Product) -> str:
    """Serialize a product into a catalog line."""
    schema = PRODUCT_SCHEMAS[product.kind]
    parts = [
        product.kind.value,
        product.name,
        format_number(product.calories_per_100g),
    ]
    parts.extend(
        _format_field(getattr(product, field_name), field_type)
        for field_name, field_type in schema.fields
    )
    return SEPARATOR.join(parts)


def decode_product(line: str) -> Product | MalformedRecord:
    """Decode a catalog line into a product or a malformed-record outcome."""
    parts = line.split(SEPARATOR)
    if len(parts) < _MIN_PRODUCT_FIELDS:
        return MalformedRecord(line, "too few fields")
    tag, name, calories, *details = parts
    kind = resolve_kind(tag)
    if kind is None:
        return MalformedRecord(line, f"unknown type tag {tag!r}")
    result = build_product(kind, name, calories, details)
    if isinstance(result, str):
        return MalformedRecord(line, result)
    return result


def encode_ingredient(ingredient: SaladIngredient) -> str:
    """Serialize an ingredient into a recipe line."""
    return SEPARATOR.join(
        [ingredient.product.name, format_number(ingredient.weight_grams)]
    )


def decode_ingredient(line: str) -> IngredientLine | MalformedRecord:
    """Decode a recipe line into a product name and weight."""
    parts = line.split(SEPARATOR)
    if len(parts) != _INGREDIENT_FIELDS:
        return MalformedRecord(line, f"expected 2 fields, got {len(parts)}")
    product_name, raw_weight = parts
    weight = parse_number(raw_weight)
    if weight is None:
        return MalformedRecord(line, f"invalid weight {raw_weight!r}")
    return IngredientLine(product_name=product_name, weight_grams=weight)
