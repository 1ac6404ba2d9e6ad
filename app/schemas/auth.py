"""Authentication schemas"""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import EmailStr

from app.models.user import UserRole
from app.schemas.common import APIModel


class LoginRequest(APIModel):
    """Login request"""
    email: EmailStr
    password: str


class UserResponse(APIModel):
    """User response"""
    id: UUID
    username: str
    email: str
    role: UserRole
    is_active: bool
    created_at: datetime
    last_login: Optional[datetime]


class Token(APIModel):
    """JWT token response"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse
