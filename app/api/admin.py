"""Admin dashboard API endpoints"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import get_db, get_session_factory
from app.schemas.admin import (
    DashboardResponse,
    RecentActivityResponse,
    CategoryBreakdown,
    ReviewTrendPoint,
)
from app.api.auth import require_admin
from app.services import stats

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    session_factory: async_sessionmaker = Depends(get_session_factory),
):
    """Totals and state counts for every content type"""
    return await stats.dashboard(session_factory)


@router.get("/recent-activity", response_model=RecentActivityResponse)
async def get_recent_activity(
    session_factory: async_sessionmaker = Depends(get_session_factory),
):
    """Newest pending reviews, unread messages and draft posts"""
    return await stats.recent_activity(session_factory)


@router.get("/menu-categories", response_model=List[CategoryBreakdown])
async def get_menu_categories(
    db: AsyncSession = Depends(get_db),
):
    """Per-category menu breakdown, largest first"""
    return await stats.menu_categories(db)


@router.get("/review-trends", response_model=List[ReviewTrendPoint])
async def get_review_trends(
    db: AsyncSession = Depends(get_db),
):
    """Daily review counts and ratings for the last 30 days"""
    return await stats.review_trends(db)
