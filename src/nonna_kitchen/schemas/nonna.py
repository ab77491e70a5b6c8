"""Schemas for recipe counts and listings grouped by place."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NonnaSummary(BaseModel):
    """A grandmother and her recipe, as shown on the map."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str = Field(validation_alias="nonna_name")
    first_name: str
    last_name: str
    grandmother_title: str
    recipe_title: str
    region: str | None = None
    photo: list[str] | None = None


class NonnaDetail(NonnaSummary):
    country: str
    recipe_image: list[str] | None = None
    dish_image: list[str] | None = None
    history: str
    traditions: str | None = None


class CountryCountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    country_code: str
    country_name: str
    continent: str
    region: str | None = None
    lat: float
    lng: float
    nonna_count: int


class GlobeResponse(BaseModel):
    """Recipe counts per country plus continent and sub-region totals."""

    model_config = ConfigDict(from_attributes=True)

    countries: list[CountryCountResponse]
    continent_summary: dict[str, int]
    region_summary: dict[str, int]
    total_nonnas: int


class StateGroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    state_name: str
    lat: float
    lng: float
    nonna_count: int
    nonnas: list[NonnaSummary]


class CountryStatesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    country_code: str
    country_name: str
    continent: str
    states: list[StateGroupResponse]
    total_nonnas: int


class StateNonnasResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    country: str
    country_code: str
    state: str
    nonnas: list[NonnaDetail]
    count: int
