# src/nonna_kitchen/models/__init__.py
"""SQLAlchemy models for the Nonna Kitchen application."""

from .conversation import Conversation, Message
from .like import Like
from .payment import Payment
from .post import Post
from .recipe import Recipe, RecipeComment, RecipeTranslation
from .thread import Thread

__all__ = [
    "Conversation", "Message",
    "Like",
    "Payment",
    "Post",
    "Recipe", "RecipeComment", "RecipeTranslation",
    "Thread",
]
