"""Post Routes — news feed listing and authorized create/modify/delete.

Invariants:
    - Listing is public; create/modify/delete require a valid username:token header
    - Authorization is checked before the body is applied and before any write
    - Posts listed newest publish_date first, filtered to [start, end] inclusive
    - createDate is written once at creation and never modified
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hardball.api.dependencies import get_db, require_authorization
from hardball.core.errors import ResourceNotFoundError
from hardball.models.post import Post
from hardball.schemas.post import PostCreate, PostUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/posts", tags=["posts"])

# Largest integer a browser client can represent exactly (Number.MAX_SAFE_INTEGER)
MAX_TIMESTAMP = 9_007_199_254_740_991
MIN_TIMESTAMP = -MAX_TIMESTAMP


@router.get("")
async def list_posts(
    start: int = Query(MIN_TIMESTAMP),
    end: int = Query(MAX_TIMESTAMP),
    db: AsyncSession = Depends(get_db),
):
    """List posts published between start and end (ms timestamps)."""
    result = await db.execute(
        select(Post)
        .where(Post.publish_date.between(start, end))
        .order_by(Post.publish_date.desc()),
    )
    return {
        "posts": [
            {
                "id": p.id,
                "title": p.title,
                "body": p.body,
                "publish_date": p.publish_date,
            }
            for p in result.scalars().all()
        ],
    }


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_post(
    body: PostCreate,
    username: str = Depends(require_authorization),
    db: AsyncSession = Depends(get_db),
):
    """Create a news feed post."""
    post = Post(
        title=body.title,
        body=body.body,
        publish_date=body.publish_date,
        create_date=body.create_date,
    )
    db.add(post)
    await db.commit()
    logger.info(
        "Post created", extra={"username": username, "post_id": post.id},
    )
    return {
        "status": 201,
        "post": {"id": post.id, **body.model_dump(by_alias=True)},
    }


@router.put("/modify/{post_id}")
async def modify_post(
    post_id: int,
    body: PostUpdate,
    username: str = Depends(require_authorization),
    db: AsyncSession = Depends(get_db),
):
    """Replace title, body and publishDate of an existing post."""
    result = await db.execute(
        update(Post)
        .where(Post.id == post_id)
        .values(
            title=body.title,
            body=body.body,
            publish_date=body.publish_date,
        ),
    )
    if result.rowcount == 0:
        raise ResourceNotFoundError("Post", str(post_id))
    await db.commit()
    logger.info(
        "Post modified", extra={"username": username, "post_id": post_id},
    )
    return {
        "status": 200,
        "post": body.model_dump(by_alias=True, exclude_none=True),
    }


@router.delete("/delete/{post_id}")
async def delete_post(
    post_id: int,
    username: str = Depends(require_authorization),
    db: AsyncSession = Depends(get_db),
):
    """Delete a post by id."""
    result = await db.execute(delete(Post).where(Post.id == post_id))
    if result.rowcount == 0:
        raise ResourceNotFoundError("Post", str(post_id))
    await db.commit()
    logger.info(
        "Post deleted", extra={"username": username, "post_id": post_id},
    )
    return {"status": 200, "post": post_id}
