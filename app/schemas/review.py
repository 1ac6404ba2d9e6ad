"""Review schemas"""

from datetime import datetime
from typing import Dict, Optional, List
from uuid import UUID
from pydantic import EmailStr, Field, field_validator

from app.schemas.common import APIModel, Pagination


class ReviewCreate(APIModel):
    """Public review submission. Approval is never accepted from the caller."""
    customer_name: str = Field(..., min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1, max_length=500)
    menu_item_id: Optional[UUID] = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v):
        return v.lower() if v else v


class ReviewApproval(APIModel):
    """Approve/reject request"""
    is_approved: bool


class MenuItemRef(APIModel):
    """Resolved menu item reference"""
    id: UUID
    name: str


class ReviewResponse(APIModel):
    """Review response"""
    id: UUID
    customer_name: str
    email: Optional[str]
    rating: int
    comment: str
    is_approved: bool
    menu_item_id: Optional[UUID]
    menu_item: Optional[MenuItemRef] = None
    created_at: datetime
    updated_at: datetime


class ReviewListResponse(APIModel):
    """Paginated review list"""
    reviews: List[ReviewResponse]
    pagination: Pagination


class ReviewSubmitted(APIModel):
    """Review submission confirmation"""
    message: str
    review: ReviewResponse


class ReviewStats(APIModel):
    """Aggregate over approved reviews"""
    average_rating: float
    total_reviews: int
    rating_distribution: Dict[int, int]
