"""Blog API endpoints"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.blog import BlogPost, BlogCategory
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.blog import (
    BlogPostCreate,
    BlogPostUpdate,
    BlogPublish,
    BlogPostResponse,
    BlogPostListResponse,
)
from app.api.auth import require_admin
from app.api.filters import paginate, text_search
from app.api.payload import read_payload, validate_payload
from app.services.storage import save_image

router = APIRouter()
logger = structlog.get_logger()

JSON_FIELDS = ("tags",)


async def get_post_or_404(db: AsyncSession, post_id: UUID) -> BlogPost:
    post = await db.get(BlogPost, post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Blog post not found")
    return post


@router.get("", response_model=BlogPostListResponse)
async def list_blog_posts(
    category: Optional[BlogCategory] = None,
    search: Optional[str] = None,
    limit: int = Query(10, ge=1, le=50),
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """List published posts, newest first"""
    query = select(BlogPost).where(BlogPost.published == True)

    if category:
        query = query.where(BlogPost.category == category.value)

    if search and search.strip():
        query = query.where(
            text_search([BlogPost.title, BlogPost.content, BlogPost.excerpt], search)
        )

    query = query.order_by(BlogPost.created_at.desc())
    posts, pagination = await paginate(db, query, page, limit)

    return BlogPostListResponse(posts=posts, pagination=pagination)


@router.get("/{post_id}", response_model=BlogPostResponse)
async def get_blog_post(
    post_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a published post and count the view.

    Drafts answer 404 exactly like unknown ids. The counter is a plain
    read-then-write, so concurrent readers may under-count.
    """
    post = await db.get(BlogPost, post_id)
    if not post or not post.published:
        raise HTTPException(status_code=404, detail="Blog post not found")

    post.view_count = (post.view_count or 0) + 1
    await db.commit()
    await db.refresh(post)

    return post


@router.post("", response_model=BlogPostResponse, status_code=201)
async def create_blog_post(
    request: Request,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Create a post (JSON or multipart with an optional image); drafts by default"""
    async with read_payload(request, json_fields=JSON_FIELDS) as (data, image):
        post_data = validate_payload(BlogPostCreate, data)

        post = BlogPost(**post_data.model_dump())
        if image is not None:
            post.image_url = save_image(image)

    db.add(post)
    await db.commit()
    await db.refresh(post)

    logger.info("blog_post_created", post_id=str(post.id), published=post.published)
    return post


@router.put("/{post_id}", response_model=BlogPostResponse)
async def update_blog_post(
    post_id: UUID,
    request: Request,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Update a post; only supplied fields change"""
    post = await get_post_or_404(db, post_id)

    async with read_payload(request, json_fields=JSON_FIELDS) as (data, image):
        post_data = validate_payload(BlogPostUpdate, data)

        for field, value in post_data.model_dump(exclude_unset=True).items():
            setattr(post, field, value)

        if image is not None:
            post.image_url = save_image(image)

    await db.commit()
    await db.refresh(post)

    logger.info("blog_post_updated", post_id=str(post.id), user_id=str(current_user.id))
    return post


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_blog_post(
    post_id: UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Delete a post"""
    post = await get_post_or_404(db, post_id)

    await db.delete(post)
    await db.commit()

    logger.info("blog_post_deleted", post_id=str(post_id), user_id=str(current_user.id))
    return MessageResponse(message="Blog post deleted successfully")


@router.patch("/{post_id}/publish", response_model=BlogPostResponse)
async def set_published(
    post_id: UUID,
    body: BlogPublish,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Publish or unpublish a post"""
    post = await get_post_or_404(db, post_id)

    post.published = body.published
    await db.commit()
    await db.refresh(post)

    logger.info("blog_post_published" if post.published else "blog_post_unpublished", post_id=str(post.id))
    return post
