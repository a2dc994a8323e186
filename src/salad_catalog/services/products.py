"""Application service for catalog operations driven by user input."""

import logging
from dataclasses import dataclass

from salad_catalog.adapters.text_codec import (
    PRODUCT_SCHEMAS,
    SEPARATOR,
    build_product,
    resolve_kind,
)
from salad_catalog.domain.products import (
    Product,
    ProductGroup,
    ProductKind,
    product_group,
)
from salad_catalog.errors import InvalidInputError, ProductNotFoundError
from salad_catalog.services.catalog import ProductCatalog

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProductChange:
    """A product added or removed and whether the catalog file was updated."""

    product: Product
    persisted: bool


@dataclass
class CatalogService:
    """Validates raw input before it reaches the catalog."""

    catalog: ProductCatalog

    def add_product(
        self,
        kind: ProductKind | str,
        name: str,
        calories: object,
        details: dict[str, object] | None = None,
    ) -> ProductChange:
        """Build a product from raw values and add it to the catalog.

        Raises InvalidInputError before anything is written when a value is
        missing or cannot be parsed.
        """
        resolved_kind = _resolve_kind(kind)
        cleaned_name = _validate_text("name", name)
        details = details or {}
        raw_fields: list[str] = []
        for field_name, _field_type in PRODUCT_SCHEMAS[resolved_kind].fields:
            value = details.get(field_name)
            if value is None:
                raise InvalidInputError(
                    f"Missing {field_name} for {resolved_kind.value}"
                )
            raw_fields.append(_validate_text(field_name, _as_text(value)))

        product = build_product(
            resolved_kind, cleaned_name, _as_text(calories), raw_fields
        )
        if isinstance(product, str):
            raise InvalidInputError(product)
        persisted = self.catalog.add(product)
        _logger.info(
            "Product added: name=%s kind=%s persisted=%s",
            product.name,
            resolved_kind.value,
            persisted,
        )
        return ProductChange(product=product, persisted=persisted)

    def list_products(self, group: ProductGroup | None = None) -> list[Product]:
        """Return catalog products, optionally restricted to one group."""
        products = self.catalog.all()
        if group is None:
            return products
        return [product for product in products if product_group(product) is group]

    def remove_product(self, name: str, group: ProductGroup) -> ProductChange:
        """Remove the first product with this name if it belongs to the group."""
        product = self.catalog.find_by_name(name)
        if product is None or product_group(product) is not group:
            raise ProductNotFoundError(f"No {group.value} named {name!r}")
        persisted = self.catalog.remove(product)
        _logger.info("Product removed: name=%s persisted=%s", product.name, persisted)
        return ProductChange(product=product, persisted=persisted)


def _resolve_kind(kind: ProductKind | str) -> ProductKind:
    if isinstance(kind, ProductKind):
        return kind
    resolved = resolve_kind(kind)
    if resolved is None:
        raise InvalidInputError(f"Unknown product kind {kind!r}")
    return resolved


def _as_text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _validate_text(label: str, value: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise InvalidInputError(f"{label} must not be empty")
    if SEPARATOR in cleaned or "\n" in cleaned or "\r" in cleaned:
        raise InvalidInputError(f"{label} must not contain {SEPARATOR!r} or newlines")
    return cleaned
