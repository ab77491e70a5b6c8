"""Map endpoints: recipe counts by country and recipes by region."""

from fastapi import APIRouter, Query

from nonna_kitchen.schemas.nonna import (
    CountryStatesResponse,
    GlobeResponse,
    StateNonnasResponse,
)
from nonna_kitchen.services import nonnas as nonna_service

from ..dependencies import OptionalIdentityDep, RoleCheckerDep, SessionDep

router = APIRouter(prefix="/nonnas", tags=["nonnas"])


@router.get("/globe", response_model=GlobeResponse)
async def get_globe(
    db: SessionDep,
    roles: RoleCheckerDep,
    current_user: OptionalIdentityDep,
    continent: str | None = Query(None, description="Only countries on this continent"),
    region: str | None = Query(None, description="Only countries in this sub-region"),
    published: bool = Query(True, description="Count published recipes only"),
) -> GlobeResponse:
    """Count recipes per country for the globe view."""
    summary = nonna_service.globe_summary(
        db,
        roles=roles,
        viewer=current_user,
        continent=continent,
        region=region,
        published=published,
    )
    return GlobeResponse.model_validate(summary)


@router.get("/country/{code}", response_model=CountryStatesResponse)
async def get_country(
    code: str,
    db: SessionDep,
    roles: RoleCheckerDep,
    current_user: OptionalIdentityDep,
    name: str | None = Query(None, description="Country name, when the code is ambiguous"),
    published: bool = Query(True, description="List published recipes only"),
) -> CountryStatesResponse:
    """Group the recipes of a country by state or region."""
    grouped = nonna_service.country_states(
        db, code, roles=roles, viewer=current_user, name=name, published=published
    )
    return CountryStatesResponse.model_validate(grouped)


@router.get("/state", response_model=StateNonnasResponse)
async def get_state(
    db: SessionDep,
    roles: RoleCheckerDep,
    current_user: OptionalIdentityDep,
    country: str | None = Query(None, description="Country code or name"),
    state: str | None = Query(None, description="State or region name"),
    published: bool = Query(True, description="List published recipes only"),
) -> StateNonnasResponse:
    """List the recipes of one state or region."""
    listing = nonna_service.state_nonnas(
        db,
        roles=roles,
        viewer=current_user,
        country=country,
        state=state,
        published=published,
    )
    return StateNonnasResponse.model_validate(listing)
