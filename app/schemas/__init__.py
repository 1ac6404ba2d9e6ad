"""Pydantic schemas for request/response validation"""

from app.schemas.common import APIModel, Pagination, MessageResponse
from app.schemas.auth import Token, LoginRequest, UserResponse
from app.schemas.menu import (
    NutritionInfo,
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemResponse,
)
from app.schemas.review import (
    ReviewCreate,
    ReviewApproval,
    ReviewResponse,
    ReviewListResponse,
    ReviewSubmitted,
    ReviewStats,
)
from app.schemas.blog import (
    BlogPostCreate,
    BlogPostUpdate,
    BlogPublish,
    BlogPostResponse,
    BlogPostListResponse,
)
from app.schemas.contact import (
    ContactMessageCreate,
    ContactSubmitted,
    ContactReadUpdate,
    ContactMessageResponse,
    ContactMessageListResponse,
    ContactStats,
)
from app.schemas.admin import (
    DashboardResponse,
    RecentActivityResponse,
    CategoryBreakdown,
    ReviewTrendPoint,
)

__all__ = [
    "APIModel",
    "Pagination",
    "MessageResponse",
    "Token",
    "LoginRequest",
    "UserResponse",
    "NutritionInfo",
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItemResponse",
    "ReviewCreate",
    "ReviewApproval",
    "ReviewResponse",
    "ReviewListResponse",
    "ReviewSubmitted",
    "ReviewStats",
    "BlogPostCreate",
    "BlogPostUpdate",
    "BlogPublish",
    "BlogPostResponse",
    "BlogPostListResponse",
    "ContactMessageCreate",
    "ContactSubmitted",
    "ContactReadUpdate",
    "ContactMessageResponse",
    "ContactMessageListResponse",
    "ContactStats",
    "DashboardResponse",
    "RecentActivityResponse",
    "CategoryBreakdown",
    "ReviewTrendPoint",
]
