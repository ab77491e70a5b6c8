"""Recipe counts and listings grouped by country and region."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.models import Recipe
from nonna_kitchen.services.access import RoleChecker
from nonna_kitchen.services.errors import ValidationFailed
from nonna_kitchen.services.geo import (
    SUB_REGIONS,
    UNKNOWN_REGION,
    CountryInfo,
    country_info_with_fallback,
    resolve_country,
    state_centre,
    sub_region_of,
)
from nonna_kitchen.services.recipes import visible_to

logger = logging.getLogger(__name__)


@dataclass
class CountryCount:
    id: str
    country_code: str
    country_name: str
    continent: str
    region: str | None
    lat: float
    lng: float
    nonna_count: int


@dataclass
class GlobeSummary:
    countries: list[CountryCount] = field(default_factory=list)
    continent_summary: dict[str, int] = field(default_factory=dict)
    region_summary: dict[str, int] = field(default_factory=dict)
    total_nonnas: int = 0


@dataclass
class StateGroup:
    state_name: str
    lat: float
    lng: float
    nonnas: list[Recipe] = field(default_factory=list)

    @property
    def nonna_count(self) -> int:
        return len(self.nonnas)


@dataclass
class CountryStates:
    country_code: str
    country_name: str
    continent: str
    states: list[StateGroup]
    total_nonnas: int


@dataclass
class StateNonnas:
    country: str
    country_code: str
    state: str
    nonnas: list[Recipe]

    @property
    def count(self) -> int:
        return len(self.nonnas)


def _base_query(
    stmt: Any, *, published: bool, roles: RoleChecker, viewer: Identity | None
) -> Any:
    stmt = visible_to(stmt, viewer, roles)
    if published:
        stmt = stmt.where(Recipe.published.is_(True))
    return stmt


def _country_clause(info: CountryInfo, code: str) -> Any:
    lowered = func.lower(Recipe.country)
    return or_(
        lowered == info.name.lower(),
        Recipe.country.icontains(info.name, autoescape=True),
        lowered == code.strip().lower(),
    )


def globe_summary(
    db: Session,
    *,
    roles: RoleChecker,
    viewer: Identity | None = None,
    continent: str | None = None,
    region: str | None = None,
    published: bool = True,
) -> GlobeSummary:
    """Count recipes per country, with continent and sub-region totals.

    A known ``region`` (see ``SUB_REGIONS``) takes precedence over
    ``continent``; an unknown one leaves the result unfiltered. Spellings of
    the same country are merged into one entry.
    """
    stmt = _base_query(
        select(Recipe.country, func.count(Recipe.id)),
        published=published,
        roles=roles,
        viewer=viewer,
    ).group_by(Recipe.country)

    region_countries = SUB_REGIONS.get(region) if region else None
    by_name: dict[str, CountryCount] = {}
    for country, count in db.execute(stmt).all():
        if not country or not country.strip():
            continue
        info = country_info_with_fallback(country.strip())

        if region:
            if region_countries is not None and info.name not in region_countries:
                continue
        elif continent and info.continent != continent:
            continue

        entry = by_name.get(info.name)
        if entry is None:
            entry = CountryCount(
                id=f"country-{info.code}",
                country_code=info.code,
                country_name=info.name,
                continent=info.continent,
                region=sub_region_of(info.name),
                lat=info.lat,
                lng=info.lng,
                nonna_count=0,
            )
            by_name[info.name] = entry
        entry.nonna_count += int(count)

    summary = GlobeSummary(
        countries=sorted(by_name.values(), key=lambda c: (-c.nonna_count, c.country_name))
    )
    for entry in summary.countries:
        summary.continent_summary[entry.continent] = (
            summary.continent_summary.get(entry.continent, 0) + entry.nonna_count
        )
        if entry.region:
            summary.region_summary[entry.region] = (
                summary.region_summary.get(entry.region, 0) + entry.nonna_count
            )
        summary.total_nonnas += entry.nonna_count
    return summary


def country_states(
    db: Session,
    code: str,
    *,
    roles: RoleChecker,
    viewer: Identity | None = None,
    name: str | None = None,
    published: bool = True,
) -> CountryStates:
    """Group the recipes of one country by state or region."""
    info = resolve_country(name or code)
    stmt = (
        _base_query(select(Recipe), published=published, roles=roles, viewer=viewer)
        .where(_country_clause(info, code))
        .order_by(Recipe.id.asc())
    )
    recipes = list(db.scalars(stmt))

    groups: dict[str, StateGroup] = {}
    for recipe in recipes:
        state_name = (recipe.region or "").strip() or UNKNOWN_REGION
        group = groups.get(state_name)
        if group is None:
            # States without a known centre sit on the country centre.
            centre = state_centre(code, state_name)
            lat, lng = centre if centre is not None else (info.lat, info.lng)
            group = StateGroup(state_name=state_name, lat=lat, lng=lng)
            groups[state_name] = group
        group.nonnas.append(recipe)

    logger.debug("Grouped %d recipes for %s into %d states", len(recipes), code, len(groups))
    return CountryStates(
        country_code=code.upper(),
        country_name=info.name,
        continent=info.continent,
        states=list(groups.values()),
        total_nonnas=len(recipes),
    )


def state_nonnas(
    db: Session,
    *,
    roles: RoleChecker,
    country: str | None,
    state: str | None,
    viewer: Identity | None = None,
    published: bool = True,
) -> StateNonnas:
    """List the recipes of one state or region of a country."""
    if not country or not state:
        raise ValidationFailed("Country and state parameters are required")

    info = resolve_country(country)
    stmt = _base_query(
        select(Recipe), published=published, roles=roles, viewer=viewer
    ).where(_country_clause(info, country))

    if state.strip().lower() == UNKNOWN_REGION.lower():
        stmt = stmt.where(or_(Recipe.region.is_(None), func.trim(Recipe.region) == ""))
    else:
        stmt = stmt.where(func.lower(func.trim(Recipe.region)) == state.strip().lower())

    return StateNonnas(
        country=info.name,
        country_code=info.code,
        state=state,
        nonnas=list(db.scalars(stmt.order_by(Recipe.id.asc()))),
    )
