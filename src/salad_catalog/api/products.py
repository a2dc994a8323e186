"""Catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from salad_catalog.api.models import ProductCreate, ProductView
from salad_catalog.domain.products import ProductGroup

if TYPE_CHECKING:
    from salad_catalog.containers import AppContainer

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
async def list_products(
    request: Request, group: ProductGroup | None = None
) -> dict[str, object]:
    """Return catalog products in catalog order."""
    container: AppContainer = request.app.state.container
    products = container.catalog_service.list_products(group)
    return {"products": [ProductView.from_product(product) for product in products]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_product(payload: ProductCreate, request: Request) -> dict[str, object]:
    """Add a product to the catalog."""
    container: AppContainer = request.app.state.container
    result = container.catalog_service.add_product(
        payload.kind,
        payload.name,
        payload.calories_per_100g,
        dict(payload.details),
    )
    return {
        "product": ProductView.from_product(result.product),
        "persisted": result.persisted,
    }


@router.delete("/{group}/{name}")
async def remove_product(
    group: ProductGroup, name: str, request: Request
) -> dict[str, object]:
    """Remove the first product with this name from a group."""
    container: AppContainer = request.app.state.container
    result = container.catalog_service.remove_product(name, group)
    return {
        "removed": ProductView.from_product(result.product),
        "persisted": result.persisted,
    }
