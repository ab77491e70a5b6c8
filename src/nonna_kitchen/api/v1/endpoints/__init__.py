"""API endpoint modules for version 1."""

from .conversations import router as conversations_router
from .likes import router as likes_router
from .messages import router as messages_router
from .nonnas import router as nonnas_router
from .payments import router as payments_router
from .posts import router as posts_router
from .recipe_comments import router as recipe_comments_router
from .recipes import router as recipes_router
from .threads import router as threads_router

__all__ = [
    "conversations_router",
    "likes_router",
    "messages_router",
    "nonnas_router",
    "payments_router",
    "posts_router",
    "recipe_comments_router",
    "recipes_router",
    "threads_router",
]
