"""Service-level helpers for the recipe catalogue and its translations."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import and_, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.models import Recipe, RecipeTranslation
from nonna_kitchen.models.recipe import TRANSLATABLE_FIELDS
from nonna_kitchen.services.access import (
    RoleChecker,
    ensure_admin,
    ensure_owner_or_admin,
    is_admin,
)
from nonna_kitchen.services.errors import NotFound, ValidationFailed
from nonna_kitchen.services.moderation import ModerationGate
from nonna_kitchen.services.translation import TranslationClient

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "grandmother_title",
    "first_name",
    "last_name",
    "recipe_title",
    "country",
    "recipe",
    "directions",
    "history",
)

# Free-text fields screened by the moderation gate, in submission order.
MODERATED_FIELDS = (
    "grandmother_title",
    "first_name",
    "last_name",
    "recipe_title",
    "history",
    "geo_history",
    "recipe",
    "directions",
    "influences",
    "traditions",
)

EDITABLE_FIELDS = (
    *MODERATED_FIELDS,
    "country",
    "region",
    "photo",
    "recipe_image",
    "dish_image",
)


def moderation_text(fields: Mapping[str, Any]) -> str:
    """Join the non-empty free-text fields into one block for screening."""
    return "\n".join(str(fields[name]) for name in MODERATED_FIELDS if fields.get(name))


async def create_recipe(
    db: Session,
    *,
    gate: ModerationGate,
    roles: RoleChecker,
    author: Identity,
    data: Mapping[str, Any],
) -> Recipe:
    """Store a submitted recipe; admins' submissions are published at once."""
    if any(not data.get(name) for name in REQUIRED_FIELDS):
        raise ValidationFailed("Fill all required fields")

    if await gate.is_flagged(moderation_text(data)):
        raise ValidationFailed("Content flagged as inappropriate.")

    recipe = Recipe(
        user_id=author.id,
        grandmother_title=data["grandmother_title"],
        first_name=data["first_name"],
        last_name=data["last_name"],
        recipe_title=data["recipe_title"],
        country=data["country"],
        region=data.get("region") or None,
        history=data["history"],
        geo_history=data.get("geo_history") or None,
        recipe=data["recipe"],
        directions=data["directions"],
        traditions=data.get("traditions") or None,
        influences=data.get("influences") or None,
        photo=data.get("photo") or None,
        recipe_image=data.get("recipe_image") or None,
        dish_image=data.get("dish_image") or None,
        release_signature=bool(data.get("release_signature")),
        published=is_admin(author, roles),
    )
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    return recipe


def visible_to(stmt: Any, viewer: Identity | None, roles: RoleChecker) -> Any:
    """Restrict ``stmt`` to recipes ``viewer`` may see."""
    if is_admin(viewer, roles):
        return stmt
    if viewer is None:
        return stmt.where(Recipe.published.is_(True))
    return stmt.where(or_(Recipe.published.is_(True), Recipe.user_id == viewer.id))


def _search_clause(db: Session, search: str) -> Any:
    if db.get_bind().dialect.name == "postgresql":
        return func.to_tsvector("simple", Recipe.search_document).op("@@")(
            func.plainto_tsquery("simple", search)
        )
    # Other backends: every whitespace-separated term must appear somewhere.
    return and_(
        *(Recipe.search_document.icontains(term, autoescape=True) for term in search.split())
    )


def list_recipes(
    db: Session,
    *,
    roles: RoleChecker,
    viewer: Identity | None = None,
    published: bool | None = None,
    search: str | None = None,
    country: str | None = None,
    user_id: str | None = None,
) -> list[Recipe]:
    """Return recipes visible to ``viewer`` that match every given filter."""
    stmt = visible_to(select(Recipe), viewer, roles)

    if published is not None:
        stmt = stmt.where(Recipe.published.is_(published))
    if search and search.strip():
        stmt = stmt.where(_search_clause(db, search.strip()))
    if country:
        stmt = stmt.where(Recipe.country.icontains(country, autoescape=True))
    if user_id:
        stmt = stmt.where(Recipe.user_id == user_id)

    stmt = stmt.order_by(Recipe.recipe_title.asc(), Recipe.id.asc())
    return list(db.scalars(stmt))


def get_recipe(
    db: Session,
    recipe_id: int,
    *,
    roles: RoleChecker,
    viewer: Identity | None = None,
) -> Recipe:
    """Fetch one recipe; unpublished recipes are hidden from other users."""
    recipe = db.scalars(visible_to(select(Recipe), viewer, roles).where(Recipe.id == recipe_id)).first()
    if recipe is None:
        raise NotFound("Recipe not found")
    return recipe


def get_translation(db: Session, recipe_id: int, lang: str) -> RecipeTranslation | None:
    return db.scalars(
        select(RecipeTranslation).where(
            RecipeTranslation.recipe_id == recipe_id,
            RecipeTranslation.lang == lang,
        )
    ).first()


async def update_recipe(
    db: Session,
    *,
    gate: ModerationGate,
    roles: RoleChecker,
    actor: Identity,
    recipe_id: int,
    changes: Mapping[str, Any],
) -> Recipe:
    """Apply an owner edit or an admin publish toggle.

    Empty values leave the stored field untouched. Only admins may change the
    publication flag.
    """
    recipe = db.get(Recipe, recipe_id)
    if recipe is None:
        raise NotFound("Recipe not found")
    ensure_owner_or_admin(recipe.user_id, actor, roles)

    published = changes.get("published")
    if published is not None and published != recipe.published:
        ensure_admin(actor, roles)

    text = moderation_text(changes)
    if text and await gate.is_flagged(text):
        raise ValidationFailed("Content flagged as inappropriate.")

    for name in EDITABLE_FIELDS:
        value = changes.get(name)
        if value:
            setattr(recipe, name, value)
    if published is not None:
        recipe.published = published
    if changes.get("release_signature") is not None:
        recipe.release_signature = bool(changes["release_signature"])

    db.commit()
    db.refresh(recipe)
    return recipe


async def translate_recipe(
    db: Session,
    *,
    client: TranslationClient,
    roles: RoleChecker,
    actor: Identity,
    recipe_id: int,
    lang: str,
) -> RecipeTranslation:
    """Translate a recipe's narrative fields and store them for ``lang``.

    An existing translation for the same language is overwritten.
    """
    ensure_admin(actor, roles)
    recipe = db.get(Recipe, recipe_id)
    if recipe is None:
        raise NotFound("Recipe not found")

    translated: dict[str, str] = {}
    for name in TRANSLATABLE_FIELDS:
        value = getattr(recipe, name)
        translated[name] = await client.translate(value, lang) if value else ""

    translation = get_translation(db, recipe_id, lang)
    if translation is None:
        candidate = RecipeTranslation(recipe_id=recipe_id, lang=lang, **translated)
        try:
            with db.begin_nested():
                db.add(candidate)
        except IntegrityError:
            logger.info("Translation %s/%s stored concurrently; overwriting", recipe_id, lang)
            translation = get_translation(db, recipe_id, lang)
            if translation is None:
                raise
        else:
            translation = candidate

    for name, value in translated.items():
        setattr(translation, name, value)
    db.commit()
    db.refresh(translation)
    return translation
