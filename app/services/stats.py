"""Aggregate statistics over menu, reviews, blog and contact messages.

Every function takes an AsyncSession and runs a single query, so the admin
dashboard can fan them out concurrently, one session per query.
"""

import asyncio
from datetime import datetime, timedelta
from typing import Awaitable, Callable, List, Sequence, TypeVar

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.blog import BlogPost
from app.models.contact import ContactMessage
from app.models.menu import MenuItem
from app.models.review import Review
from app.schemas.admin import (
    MenuSummary,
    ReviewSummary,
    BlogSummary,
    DashboardResponse,
    PendingReview,
    UnreadMessage,
    DraftPost,
    RecentActivityResponse,
    CategoryBreakdown,
    ReviewTrendPoint,
)
from app.schemas.contact import ContactStats
from app.schemas.review import ReviewStats

T = TypeVar("T")

RECENT_ACTIVITY_LIMIT = 5
TREND_WINDOW_DAYS = 30


def count_where(condition):
    """COUNT of rows matching a condition, usable next to other aggregates"""
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


def _round(value, digits: int = 1) -> float:
    return round(float(value), digits) if value is not None else 0


async def menu_summary(db: AsyncSession) -> MenuSummary:
    result = await db.execute(
        select(
            func.count(MenuItem.id).label("total"),
            count_where(MenuItem.is_available == True).label("available"),
            count_where(MenuItem.is_available == False).label("unavailable"),
            count_where(MenuItem.is_special == True).label("specials"),
        )
    )
    row = result.one()
    return MenuSummary(
        total=row.total,
        available=row.available,
        unavailable=row.unavailable,
        specials=row.specials,
    )


async def review_summary(db: AsyncSession) -> ReviewSummary:
    result = await db.execute(
        select(
            func.count(Review.id).label("total"),
            count_where(Review.is_approved == True).label("approved"),
            count_where(Review.is_approved == False).label("pending"),
            func.avg(Review.rating).label("average_rating"),
        )
    )
    row = result.one()
    return ReviewSummary(
        total=row.total,
        approved=row.approved,
        pending=row.pending,
        average_rating=_round(row.average_rating),
    )


async def blog_summary(db: AsyncSession) -> BlogSummary:
    result = await db.execute(
        select(
            func.count(BlogPost.id).label("total"),
            count_where(BlogPost.published == True).label("published"),
            count_where(BlogPost.published == False).label("drafts"),
            func.coalesce(func.sum(BlogPost.view_count), 0).label("total_views"),
        )
    )
    row = result.one()
    return BlogSummary(
        total=row.total,
        published=row.published,
        drafts=row.drafts,
        total_views=row.total_views,
    )


async def contact_summary(db: AsyncSession) -> ContactStats:
    result = await db.execute(
        select(
            func.count(ContactMessage.id).label("total"),
            count_where(ContactMessage.is_read == True).label("read"),
            count_where(ContactMessage.is_read == False).label("unread"),
        )
    )
    row = result.one()
    return ContactStats(total=row.total, read=row.read, unread=row.unread)


async def approved_review_stats(db: AsyncSession) -> ReviewStats:
    """Average, total and per-star histogram over approved reviews"""
    result = await db.execute(
        select(Review.rating, func.count(Review.id))
        .where(Review.is_approved == True)
        .group_by(Review.rating)
    )
    distribution = {rating: 0 for rating in range(1, 6)}
    for rating, count in result.all():
        distribution[rating] = count

    total = sum(distribution.values())
    if total == 0:
        return ReviewStats(average_rating=0, total_reviews=0, rating_distribution=distribution)

    average = sum(rating * count for rating, count in distribution.items()) / total
    return ReviewStats(
        average_rating=round(average, 1),
        total_reviews=total,
        rating_distribution=distribution,
    )


async def pending_reviews(db: AsyncSession) -> List[PendingReview]:
    result = await db.execute(
        select(Review.id, Review.customer_name, Review.rating, Review.comment, Review.created_at)
        .where(Review.is_approved == False)
        .order_by(Review.created_at.desc())
        .limit(RECENT_ACTIVITY_LIMIT)
    )
    return [PendingReview.model_validate(row) for row in result]


async def unread_messages(db: AsyncSession) -> List[UnreadMessage]:
    result = await db.execute(
        select(ContactMessage.id, ContactMessage.name, ContactMessage.subject, ContactMessage.created_at)
        .where(ContactMessage.is_read == False)
        .order_by(ContactMessage.created_at.desc())
        .limit(RECENT_ACTIVITY_LIMIT)
    )
    return [UnreadMessage.model_validate(row) for row in result]


async def draft_posts(db: AsyncSession) -> List[DraftPost]:
    result = await db.execute(
        select(BlogPost.id, BlogPost.title, BlogPost.author, BlogPost.created_at)
        .where(BlogPost.published == False)
        .order_by(BlogPost.created_at.desc())
        .limit(RECENT_ACTIVITY_LIMIT)
    )
    return [DraftPost.model_validate(row) for row in result]


async def menu_categories(db: AsyncSession) -> List[CategoryBreakdown]:
    item_count = func.count(MenuItem.id).label("item_count")
    result = await db.execute(
        select(
            MenuItem.category,
            item_count,
            count_where(MenuItem.is_available == True).label("available"),
            count_where(MenuItem.is_special == True).label("specials"),
            func.avg(MenuItem.price).label("average_price"),
        )
        .group_by(MenuItem.category)
        .order_by(item_count.desc(), MenuItem.category)
    )
    return [
        CategoryBreakdown(
            category=row.category,
            count=row.item_count,
            available=row.available,
            specials=row.specials,
            average_price=_round(row.average_price, 2),
        )
        for row in result
    ]


async def review_trends(db: AsyncSession, now: datetime = None) -> List[ReviewTrendPoint]:
    """Daily review count and average rating over the trailing window"""
    since = (now or datetime.utcnow()) - timedelta(days=TREND_WINDOW_DAYS)
    day = func.date(Review.created_at).label("day")
    result = await db.execute(
        select(
            day,
            func.count(Review.id).label("review_count"),
            func.avg(Review.rating).label("average_rating"),
        )
        .where(Review.created_at >= since)
        .group_by(day)
        .order_by(day)
    )
    return [
        ReviewTrendPoint(
            date=str(row.day),
            count=row.review_count,
            average_rating=_round(row.average_rating, 2),
        )
        for row in result
    ]


async def _run(session_factory: async_sessionmaker, query: Callable[[AsyncSession], Awaitable[T]]) -> T:
    async with session_factory() as db:
        return await query(db)


async def fan_out(session_factory: async_sessionmaker, queries: Sequence[Callable]) -> list:
    """Run independent queries concurrently, each on its own session.

    The first failure propagates; no partial results are returned.
    """
    return await asyncio.gather(*(_run(session_factory, query) for query in queries))


async def dashboard(session_factory: async_sessionmaker) -> DashboardResponse:
    menu, reviews, blog, contact = await fan_out(
        session_factory, [menu_summary, review_summary, blog_summary, contact_summary]
    )
    return DashboardResponse(
        menu=menu,
        reviews=reviews,
        blog=blog,
        contact=contact,
    )


async def recent_activity(session_factory: async_sessionmaker) -> RecentActivityResponse:
    reviews, messages, posts = await fan_out(
        session_factory, [pending_reviews, unread_messages, draft_posts]
    )
    return RecentActivityResponse(
        pending_reviews=reviews,
        unread_messages=messages,
        draft_posts=posts,
    )
