"""Version 1 API endpoints."""

from .endpoints import (
    conversations_router,
    likes_router,
    messages_router,
    nonnas_router,
    payments_router,
    posts_router,
    recipe_comments_router,
    recipes_router,
    threads_router,
)

__all__ = [
    "likes_router",
    "threads_router",
    "posts_router",
    "conversations_router",
    "messages_router",
    "recipes_router",
    "recipe_comments_router",
    "payments_router",
    "nonnas_router",
]
