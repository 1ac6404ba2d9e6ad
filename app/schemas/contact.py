"""Contact message schemas"""

from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import EmailStr, Field, field_validator

from app.schemas.common import APIModel, Pagination

PHONE_PATTERN = r"^\+?[1-9]\d{0,15}$"


class ContactMessageCreate(APIModel):
    """Public contact form submission"""
    name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=100)
    message: str = Field(..., min_length=1, max_length=1000)
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v):
        return v.lower()

    @field_validator("phone", mode="before")
    @classmethod
    def blank_phone_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ContactSubmitted(APIModel):
    """Contact submission confirmation"""
    message: str
    id: UUID


class ContactReadUpdate(APIModel):
    """Mark read/unread request"""
    is_read: bool


class ContactMessageResponse(APIModel):
    """Contact message response"""
    id: UUID
    name: str
    email: str
    subject: str
    message: str
    phone: Optional[str]
    is_read: bool
    created_at: datetime
    updated_at: datetime


class ContactMessageListResponse(APIModel):
    """Paginated contact message list"""
    messages: List[ContactMessageResponse]
    pagination: Pagination


class ContactStats(APIModel):
    """Read/unread counts"""
    total: int = 0
    read: int = 0
    unread: int = 0
