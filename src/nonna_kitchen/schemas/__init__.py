"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .conversation import (
    ConversationCreate,
    ConversationResponse,
    MessageCreate,
    MessageResponse,
)
from .like import LikeSummary, LikeToggle, LikeToggleResponse
from .payment import CheckoutRequest, CheckoutResponse, PaymentVerifyRequest, PaymentVerifyResponse
from .post import PostCreate, PostResponse, PostUpdate
from .recipe import RecipeCreate, RecipeResponse, RecipeUpdate, TranslationRequest
from .recipe_comment import RecipeCommentCreate, RecipeCommentTree, RecipeCommentUpdate
from .thread import ThreadCreate, ThreadListItem, ThreadResponse

__all__ = [
    "ConversationCreate", "ConversationResponse", "MessageCreate", "MessageResponse",
    "LikeSummary", "LikeToggle", "LikeToggleResponse",
    "CheckoutRequest", "CheckoutResponse", "PaymentVerifyRequest", "PaymentVerifyResponse",
    "PostCreate", "PostResponse", "PostUpdate",
    "RecipeCreate", "RecipeResponse", "RecipeUpdate", "TranslationRequest",
    "RecipeCommentCreate", "RecipeCommentTree", "RecipeCommentUpdate",
    "ThreadCreate", "ThreadListItem", "ThreadResponse",
]
