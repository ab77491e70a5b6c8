"""Recipe catalogue endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Query, status

from nonna_kitchen.models import Recipe, RecipeTranslation
from nonna_kitchen.models.recipe import TRANSLATABLE_FIELDS
from nonna_kitchen.schemas.recipe import (
    RecipeCreate,
    RecipeListResponse,
    RecipeResponse,
    RecipeTranslationResponse,
    RecipeUpdate,
    TranslationRequest,
)
from nonna_kitchen.services import recipes as recipe_service
from nonna_kitchen.services.translation import TranslationError

from ..dependencies import (
    CurrentIdentityDep,
    ModerationGateDep,
    OptionalIdentityDep,
    RoleCheckerDep,
    SessionDep,
    TranslationClientDep,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


def _with_translation(recipe: Recipe, translation: RecipeTranslation | None) -> RecipeResponse:
    body = RecipeResponse.model_validate(recipe)
    if translation is None:
        return body
    overlay: dict[str, object] = {"lang": translation.lang}
    for name in TRANSLATABLE_FIELDS:
        value = getattr(translation, name)
        if value:
            overlay[name] = value
    return body.model_copy(update=overlay)


@router.get("/", response_model=RecipeListResponse)
async def list_recipes(
    db: SessionDep,
    roles: RoleCheckerDep,
    current_user: OptionalIdentityDep,
    id: int | None = Query(None, description="Return only this recipe"),
    published: bool | None = Query(None, description="Filter by publication state"),
    search: str | None = Query(None, description="Full-text search terms"),
    country: str | None = Query(None, description="Case-insensitive country match"),
    user_id: str | None = Query(None, description="Filter by submitting user"),
) -> RecipeListResponse:
    """List recipes visible to the caller."""
    if id is not None:
        recipe = recipe_service.get_recipe(db, id, roles=roles, viewer=current_user)
        return RecipeListResponse(recipes=[RecipeResponse.model_validate(recipe)])

    recipes = recipe_service.list_recipes(
        db,
        roles=roles,
        viewer=current_user,
        published=published,
        search=search,
        country=country,
        user_id=user_id,
    )
    return RecipeListResponse(recipes=[RecipeResponse.model_validate(r) for r in recipes])


@router.post("/", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipeCreate,
    db: SessionDep,
    current_user: CurrentIdentityDep,
    roles: RoleCheckerDep,
    gate: ModerationGateDep,
) -> Recipe:
    """Submit a family recipe for review."""
    return await recipe_service.create_recipe(
        db,
        gate=gate,
        roles=roles,
        author=current_user,
        data=payload.model_dump(),
    )


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: int,
    db: SessionDep,
    roles: RoleCheckerDep,
    current_user: OptionalIdentityDep,
    lang: str | None = Query(None, description="Overlay the stored translation"),
) -> RecipeResponse:
    """Get a recipe, optionally with its narrative fields translated."""
    recipe = recipe_service.get_recipe(db, recipe_id, roles=roles, viewer=current_user)
    translation = recipe_service.get_translation(db, recipe.id, lang) if lang else None
    return _with_translation(recipe, translation)


@router.patch("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(
    recipe_id: int,
    payload: RecipeUpdate,
    db: SessionDep,
    current_user: CurrentIdentityDep,
    roles: RoleCheckerDep,
    gate: ModerationGateDep,
) -> Recipe:
    """Edit an own recipe; admins may also publish or unpublish it."""
    return await recipe_service.update_recipe(
        db,
        gate=gate,
        roles=roles,
        actor=current_user,
        recipe_id=recipe_id,
        changes=payload.model_dump(exclude_unset=True),
    )


@router.post("/{recipe_id}/translate", response_model=RecipeTranslationResponse)
async def translate_recipe(
    recipe_id: int,
    payload: TranslationRequest,
    db: SessionDep,
    current_user: CurrentIdentityDep,
    roles: RoleCheckerDep,
    translator: TranslationClientDep,
) -> RecipeTranslation:
    """Translate a recipe into ``lang`` and store the result (admin only)."""
    try:
        return await recipe_service.translate_recipe(
            db,
            client=translator,
            roles=roles,
            actor=current_user,
            recipe_id=recipe_id,
            lang=payload.lang,
        )
    except TranslationError as err:
        logger.error("Translating recipe %s to %s failed: %s", recipe_id, payload.lang, err)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Translation failed",
        ) from err
