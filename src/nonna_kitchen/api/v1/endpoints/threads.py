"""Regional discussion thread endpoints."""

from fastapi import APIRouter, Query, status

from nonna_kitchen.models import Post, Thread
from nonna_kitchen.schemas.common import StatusMessage
from nonna_kitchen.schemas.post import PostResponse
from nonna_kitchen.schemas.thread import ThreadCreate, ThreadListItem, ThreadResponse
from nonna_kitchen.services import posts as post_service
from nonna_kitchen.services import threads as thread_service
from nonna_kitchen.services.errors import NotFound
from nonna_kitchen.services.threads import ThreadSort

from ..dependencies import CurrentIdentityDep, ModerationGateDep, SessionDep

router = APIRouter(prefix="/threads", tags=["threads"])


@router.get("/", response_model=list[ThreadListItem])
async def list_threads(
    db: SessionDep,
    region: str | None = Query(None, description="Filter by region tag"),
    scope: str | None = Query(None, description='"country" or "state"'),
    category: str | None = Query(None, description="Filter by category"),
    sort: ThreadSort = Query("newest", description="newest, top or relevant"),
) -> list[ThreadListItem]:
    """List threads with their like counts."""
    rows = thread_service.list_threads(
        db, region=region, scope=scope, category=category, sort=sort
    )
    return [
        ThreadListItem.model_validate(thread).model_copy(update={"like_count": count})
        for thread, count in rows
    ]


@router.post("/", response_model=ThreadResponse, status_code=status.HTTP_201_CREATED)
async def create_thread(
    payload: ThreadCreate,
    db: SessionDep,
    current_user: CurrentIdentityDep,
    gate: ModerationGateDep,
) -> Thread:
    """Open a new thread."""
    return await thread_service.create_thread(
        db,
        gate=gate,
        author=current_user,
        region=payload.region,
        scope=payload.scope,
        category=payload.category,
        title=payload.title,
        content=payload.content,
    )


@router.get("/{thread_id}", response_model=ThreadResponse)
async def get_thread(thread_id: int, db: SessionDep) -> Thread:
    """Get a thread by ID; every call counts as a view."""
    return thread_service.view_thread(db, thread_id)


@router.get("/{thread_id}/posts", response_model=list[PostResponse])
async def list_thread_posts(thread_id: int, db: SessionDep) -> list[Post]:
    """List the posts of a thread in chronological order."""
    if db.get(Thread, thread_id) is None:
        raise NotFound("Thread not found")
    return post_service.list_thread_posts(db, thread_id)


@router.delete("/{thread_id}", response_model=StatusMessage)
async def delete_thread(
    thread_id: int,
    db: SessionDep,
    current_user: CurrentIdentityDep,
) -> StatusMessage:
    """Delete an own thread together with its posts."""
    thread_service.delete_thread(db, actor=current_user, thread_id=thread_id)
    return StatusMessage(message="Thread deleted")
