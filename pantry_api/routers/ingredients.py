"""Ingredient endpoints for the Pantry API.

Thin glue over IngredientStore: each handler resolves the ingredients it
needs, calls one store operation and serializes the result. Domain errors
are rendered by the exception handler registered in pantry_api.main.
"""

from typing import Any

from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from pantry.graph import Ingredient
from pantry_api.dependencies import IngredientStoreDep

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])


class CreateIngredientRequest(BaseModel):
    """Request model for creating an ingredient.

    Field rules are enforced by the store so that the user-facing messages
    come from one place; here everything is optional.
    """

    name: Any = Field(None, description="Unique ingredient name")


class PatchIngredientRequest(BaseModel):
    """Request model for a partial ingredient update."""

    name: Any = Field(None, description="New ingredient name")


class FollowRequest(BaseModel):
    """Request model for follow and unfollow."""

    other: str = Field(..., description="Name of the other ingredient")


class IngredientResponse(BaseModel):
    """Response model for a single ingredient."""

    name: str = Field(..., description="Ingredient name")
    properties: dict[str, Any] = Field(default_factory=dict, description="Stored properties")


class IngredientListResponse(BaseModel):
    """Response model for listing ingredients."""

    ingredients: list[IngredientResponse] = Field(..., description="All ingredients")
    total: int = Field(..., description="Total count")


class IngredientDetailResponse(BaseModel):
    """Response model for an ingredient with its follow partition.

    Attributes:
        ingredient: The requested ingredient.
        following: Ingredients it follows.
        others: All remaining ingredients, itself excluded.
    """

    ingredient: IngredientResponse
    following: list[IngredientResponse] = Field(default_factory=list)
    others: list[IngredientResponse] = Field(default_factory=list)


def to_response(ingredient: Ingredient) -> IngredientResponse:
    return IngredientResponse(name=ingredient.name, properties=ingredient.properties)


@router.get("", response_model=IngredientListResponse, summary="List ingredients")
async def list_ingredients(store: IngredientStoreDep) -> IngredientListResponse:
    ingredients = await store.get_all()
    return IngredientListResponse(
        ingredients=[to_response(i) for i in ingredients],
        total=len(ingredients),
    )


@router.post(
    "",
    response_model=IngredientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create ingredient",
)
async def create_ingredient(
    request: CreateIngredientRequest, store: IngredientStoreDep
) -> IngredientResponse:
    ingredient = await store.create(request.model_dump(exclude_unset=True))
    return to_response(ingredient)


@router.get("/{name}", response_model=IngredientDetailResponse, summary="Show ingredient")
async def show_ingredient(name: str, store: IngredientStoreDep) -> IngredientDetailResponse:
    """Return an ingredient with the ingredients it follows and all others."""
    ingredient = await store.get(name)
    following, others = await store.get_following_and_others(ingredient)
    return IngredientDetailResponse(
        ingredient=to_response(ingredient),
        following=[to_response(i) for i in following],
        others=[to_response(i) for i in others],
    )


@router.patch("/{name}", response_model=IngredientResponse, summary="Edit ingredient")
async def edit_ingredient(
    name: str, request: PatchIngredientRequest, store: IngredientStoreDep
) -> IngredientResponse:
    ingredient = await store.get(name)
    updated = await store.patch(ingredient, request.model_dump(exclude_unset=True))
    return to_response(updated)


@router.delete(
    "/{name}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete ingredient",
)
async def delete_ingredient(name: str, store: IngredientStoreDep) -> Response:
    ingredient = await store.get(name)
    await store.delete(ingredient)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{name}/follow", response_model=IngredientResponse, summary="Follow ingredient")
async def follow_ingredient(
    name: str, request: FollowRequest, store: IngredientStoreDep
) -> IngredientResponse:
    ingredient = await store.get(name)
    other = await store.get(request.other)
    await store.follow(ingredient, other)
    return to_response(ingredient)


@router.post("/{name}/unfollow", response_model=IngredientResponse, summary="Unfollow ingredient")
async def unfollow_ingredient(
    name: str, request: FollowRequest, store: IngredientStoreDep
) -> IngredientResponse:
    ingredient = await store.get(name)
    other = await store.get(request.other)
    await store.unfollow(ingredient, other)
    return to_response(ingredient)
