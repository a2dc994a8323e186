"""Salad recipe endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from salad_catalog.api.models import (
    IngredientCreate,
    IngredientView,
    SaladCreate,
    SaladDetail,
    SaladSummary,
)
from salad_catalog.services.aggregation import IngredientSortKey

if TYPE_CHECKING:
    from salad_catalog.containers import AppContainer

router = APIRouter(prefix="/salads", tags=["salads"])


@router.get("")
async def list_salads(
    request: Request, sort_by_calories: bool = False
) -> dict[str, object]:
    """Return salads with totals, optionally ordered by calories."""
    container: AppContainer = request.app.state.container
    service = container.salad_service
    salads = service.salads_by_calories() if sort_by_calories else service.list_salads()
    return {"salads": [SaladSummary.from_salad(salad) for salad in salads]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_salad(payload: SaladCreate, request: Request) -> dict[str, object]:
    """Create an empty salad."""
    container: AppContainer = request.app.state.container
    result = container.salad_service.create_salad(payload.name)
    return {
        "salad": SaladDetail.from_salad(result.salad),
        "persisted": result.persisted,
    }


@router.get("/{name}")
async def salad_detail(name: str, request: Request) -> SaladDetail:
    """Return a salad with its ingredients and totals."""
    container: AppContainer = request.app.state.container
    return SaladDetail.from_salad(container.salad_service.get_salad(name))


@router.delete("/{name}")
async def delete_salad(name: str, request: Request) -> dict[str, object]:
    """Delete a salad recipe."""
    container: AppContainer = request.app.state.container
    return {"deleted": container.salad_service.delete_salad(name)}


@router.post("/{name}/ingredients", status_code=status.HTTP_201_CREATED)
async def add_ingredient(
    name: str, payload: IngredientCreate, request: Request
) -> dict[str, object]:
    """Add a catalog product to a salad."""
    container: AppContainer = request.app.state.container
    result = container.salad_service.add_ingredient(
        name, payload.product_name, payload.weight_grams
    )
    return {
        "ingredient": IngredientView.from_ingredient(result.ingredient),
        "persisted": result.persisted,
    }


@router.delete("/{name}/ingredients/{product_name}")
async def remove_ingredient(
    name: str, product_name: str, request: Request
) -> dict[str, object]:
    """Remove an ingredient from a salad."""
    container: AppContainer = request.app.state.container
    result = container.salad_service.remove_ingredient(name, product_name)
    return {
        "removed": IngredientView.from_ingredient(result.ingredient),
        "persisted": result.persisted,
    }


@router.get("/{name}/ingredients")
async def sorted_ingredients(
    name: str, request: Request, sort: IngredientSortKey = IngredientSortKey.NAME
) -> dict[str, object]:
    """Return a salad's ingredients in the requested order."""
    container: AppContainer = request.app.state.container
    ingredients = container.salad_service.sorted_ingredients(name, sort)
    return {"ingredients": [IngredientView.from_ingredient(i) for i in ingredients]}


@router.get("/{name}/vegetables")
async def vegetables_in_range(
    name: str, request: Request, min_calories: float, max_calories: float
) -> dict[str, object]:
    """Return the salad's vegetables within a calories-per-100g range."""
    container: AppContainer = request.app.state.container
    ingredients = container.salad_service.vegetables_in_calorie_range(
        name, min_calories, max_calories
    )
    return {"ingredients": [IngredientView.from_ingredient(i) for i in ingredients]}
