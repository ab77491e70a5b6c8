"""SQLAlchemy models for recipes, their translations and comments."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    event,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nonna_kitchen.db.session import Base
from nonna_kitchen.db.time import utcnow

# Fields concatenated, in order, into the full-text search document.
SEARCH_FIELDS = ("recipe_title", "country", "region", "history", "recipe", "geo_history")

# Fields carried by a RecipeTranslation.
TRANSLATABLE_FIELDS = ("history", "geo_history", "recipe", "influences")


class Recipe(Base):
    """Family recipe submitted by a user."""

    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str | None] = mapped_column(Text, nullable=True, index=True)

    grandmother_title: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    recipe_title: Mapped[str] = mapped_column(Text, nullable=False)

    country: Mapped[str] = mapped_column(Text, nullable=False)
    region: Mapped[str | None] = mapped_column(Text, nullable=True)

    history: Mapped[str] = mapped_column(Text, nullable=False)
    geo_history: Mapped[str | None] = mapped_column(Text, nullable=True)
    recipe: Mapped[str] = mapped_column(Text, nullable=False)
    directions: Mapped[str] = mapped_column(Text, nullable=False)
    traditions: Mapped[str | None] = mapped_column(Text, nullable=True)
    influences: Mapped[str | None] = mapped_column(Text, nullable=True)

    photo: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    recipe_image: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    dish_image: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    release_signature: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    # Derived from SEARCH_FIELDS on every insert/update.
    search_document: Mapped[str] = mapped_column(Text, nullable=False, default="")

    translations: Mapped[list[RecipeTranslation]] = relationship(
        "RecipeTranslation",
        back_populates="recipe_row",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def nonna_name(self) -> str:
        """Full name of the grandmother the recipe belongs to."""
        return f"{self.grandmother_title} {self.first_name} {self.last_name}".strip()

    def build_search_document(self) -> str:
        """Concatenate the classification and text fields used for search."""
        return " ".join(getattr(self, name) or "" for name in SEARCH_FIELDS)


@event.listens_for(Recipe, "before_insert")
@event.listens_for(Recipe, "before_update")
def _refresh_search_document(mapper: Any, connection: Any, target: Recipe) -> None:
    target.search_document = target.build_search_document()


class RecipeTranslation(Base):
    """Translated narrative fields of a recipe for one language."""

    __tablename__ = "recipe_translations"
    __table_args__ = (
        UniqueConstraint("recipe_id", "lang", name="uq_recipe_translations_recipe_lang"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipe_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
    )
    lang: Mapped[str] = mapped_column(String(16), nullable=False)
    history: Mapped[str | None] = mapped_column(Text, nullable=True)
    geo_history: Mapped[str | None] = mapped_column(Text, nullable=True)
    recipe: Mapped[str | None] = mapped_column(Text, nullable=True)
    influences: Mapped[str | None] = mapped_column(Text, nullable=True)

    recipe_row: Mapped[Recipe] = relationship("Recipe", back_populates="translations")


class RecipeComment(Base):
    """Comment on a recipe, optionally replying to another comment."""

    __tablename__ = "recipe_comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipe_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    parent_comment_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("recipe_comments.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    author_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    depth: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
