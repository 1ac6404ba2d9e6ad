"""Customer review API endpoints"""

from typing import List, Optional, Sequence
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.menu import MenuItem
from app.models.review import Review
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.review import (
    ReviewCreate,
    ReviewApproval,
    ReviewResponse,
    ReviewListResponse,
    ReviewSubmitted,
    ReviewStats,
    MenuItemRef,
)
from app.api.auth import require_admin
from app.api.filters import flag_query, parse_flag, paginate
from app.services import stats

router = APIRouter()
logger = structlog.get_logger()


async def with_menu_items(db: AsyncSession, reviews: Sequence[Review]) -> List[ReviewResponse]:
    """Resolve each review's menu item reference, or None when it no longer exists"""
    item_ids = {review.menu_item_id for review in reviews if review.menu_item_id}
    names = {}
    if item_ids:
        result = await db.execute(
            select(MenuItem.id, MenuItem.name).where(MenuItem.id.in_(item_ids))
        )
        names = {row.id: row.name for row in result}

    responses = []
    for review in reviews:
        response = ReviewResponse.model_validate(review)
        if review.menu_item_id in names:
            response.menu_item = MenuItemRef(id=review.menu_item_id, name=names[review.menu_item_id])
        responses.append(response)
    return responses


@router.get("", response_model=ReviewListResponse)
async def list_reviews(
    approved: Optional[str] = flag_query("Approval state, defaults to approved only"),
    menu_item: Optional[UUID] = Query(None, alias="menuItem"),
    limit: int = Query(10, ge=1, le=100),
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """List reviews, newest first"""
    query = select(Review).where(Review.is_approved == parse_flag(approved or "true"))

    if menu_item:
        query = query.where(Review.menu_item_id == menu_item)

    query = query.order_by(Review.created_at.desc())
    reviews, pagination = await paginate(db, query, page, limit)

    return ReviewListResponse(
        reviews=await with_menu_items(db, reviews),
        pagination=pagination,
    )


@router.post("", response_model=ReviewSubmitted, status_code=201)
async def submit_review(
    review_data: ReviewCreate,
    db: AsyncSession = Depends(get_db),
):
    """Submit a review; it stays hidden until an admin approves it"""
    review = Review(**review_data.model_dump(), is_approved=False)

    db.add(review)
    await db.commit()
    await db.refresh(review)

    logger.info("review_submitted", review_id=str(review.id), rating=review.rating)

    responses = await with_menu_items(db, [review])
    return ReviewSubmitted(
        message="Review submitted successfully. It will be published after approval.",
        review=responses[0],
    )


@router.get("/stats", response_model=ReviewStats)
async def get_review_stats(
    db: AsyncSession = Depends(get_db),
):
    """Average rating, count and 1-5 histogram over approved reviews"""
    return await stats.approved_review_stats(db)


@router.patch("/{review_id}/approve", response_model=ReviewResponse)
async def approve_review(
    review_id: UUID,
    approval: ReviewApproval,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Approve or reject a review"""
    review = await db.get(Review, review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")

    review.is_approved = approval.is_approved
    await db.commit()
    await db.refresh(review)

    logger.info("review_approval_set", review_id=str(review.id), is_approved=review.is_approved)

    responses = await with_menu_items(db, [review])
    return responses[0]


@router.delete("/{review_id}", response_model=MessageResponse)
async def delete_review(
    review_id: UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Delete a review"""
    review = await db.get(Review, review_id)
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")

    await db.delete(review)
    await db.commit()

    logger.info("review_deleted", review_id=str(review_id), user_id=str(current_user.id))
    return MessageResponse(message="Review deleted successfully")
