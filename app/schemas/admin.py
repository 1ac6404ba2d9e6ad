"""Admin dashboard schemas"""

from datetime import datetime
from typing import List
from uuid import UUID

from app.schemas.common import APIModel
from app.schemas.contact import ContactStats


class MenuSummary(APIModel):
    total: int = 0
    available: int = 0
    unavailable: int = 0
    specials: int = 0


class ReviewSummary(APIModel):
    total: int = 0
    approved: int = 0
    pending: int = 0
    average_rating: float = 0


class BlogSummary(APIModel):
    total: int = 0
    published: int = 0
    drafts: int = 0
    total_views: int = 0


class DashboardResponse(APIModel):
    """Per-entity totals and state counts"""
    menu: MenuSummary
    reviews: ReviewSummary
    blog: BlogSummary
    contact: ContactStats


class PendingReview(APIModel):
    id: UUID
    customer_name: str
    rating: int
    comment: str
    created_at: datetime


class UnreadMessage(APIModel):
    id: UUID
    name: str
    subject: str
    created_at: datetime


class DraftPost(APIModel):
    id: UUID
    title: str
    author: str
    created_at: datetime


class RecentActivityResponse(APIModel):
    """Newest records still waiting for an admin"""
    pending_reviews: List[PendingReview]
    unread_messages: List[UnreadMessage]
    draft_posts: List[DraftPost]


class CategoryBreakdown(APIModel):
    category: str
    count: int
    available: int
    specials: int
    average_price: float


class ReviewTrendPoint(APIModel):
    date: str
    count: int
    average_rating: float
