"""Recipe-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import RequestModel


class RecipeCreate(RequestModel):
    """Schema for submitting a new family recipe."""

    grandmother_title: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    recipe_title: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)
    region: str | None = None
    history: str = Field(..., min_length=1)
    geo_history: str | None = None
    recipe: str = Field(..., min_length=1)
    directions: str = Field(..., min_length=1)
    traditions: str | None = None
    influences: str | None = None
    photo: list[str] | None = None
    recipe_image: list[str] | None = None
    dish_image: list[str] | None = None
    release_signature: bool = False


class RecipeUpdate(RequestModel):
    """Schema for partial recipe updates; omitted or empty fields are kept."""

    published: bool | None = None
    grandmother_title: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    recipe_title: str | None = None
    country: str | None = None
    region: str | None = None
    history: str | None = None
    geo_history: str | None = None
    recipe: str | None = None
    directions: str | None = None
    traditions: str | None = None
    influences: str | None = None
    photo: list[str] | None = None
    recipe_image: list[str] | None = None
    dish_image: list[str] | None = None
    release_signature: bool | None = None


class RecipeResponse(BaseModel):
    """Schema for recipe information returned by the API."""

    id: int
    user_id: str | None
    grandmother_title: str
    first_name: str
    last_name: str
    recipe_title: str
    country: str
    region: str | None
    history: str
    geo_history: str | None
    recipe: str
    directions: str
    traditions: str | None
    influences: str | None
    photo: list[str] | None
    recipe_image: list[str] | None
    dish_image: list[str] | None
    release_signature: bool
    published: bool
    created_at: datetime
    lang: str | None = None

    model_config = ConfigDict(from_attributes=True)


class RecipeListResponse(BaseModel):
    """Envelope for recipe listings."""

    recipes: list[RecipeResponse]


class TranslationRequest(RequestModel):
    """Schema for requesting a translation of a recipe's narrative fields."""

    lang: str = Field(..., min_length=2, max_length=16, description="Target language code")


class RecipeTranslationResponse(BaseModel):
    """Schema for a stored recipe translation."""

    id: int
    recipe_id: int
    lang: str
    history: str | None
    geo_history: str | None
    recipe: str | None
    influences: str | None

    model_config = ConfigDict(from_attributes=True)
