"""Blog schemas"""

from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import Field, constr, field_validator

from app.models.blog import BlogCategory
from app.schemas.common import APIModel, Pagination, reject_null

Tag = constr(strip_whitespace=True, min_length=1, max_length=30)


class BlogPostCreate(APIModel):
    """Create blog post request"""
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    excerpt: str = Field(..., min_length=1, max_length=300)
    author: str = Field(..., min_length=1, max_length=50)
    category: BlogCategory = BlogCategory.NEWS
    tags: List[Tag] = []
    published: bool = False

    class Config:
        use_enum_values = True


class BlogPostUpdate(APIModel):
    """Update blog post request; only supplied fields are changed"""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = Field(None, min_length=1, max_length=300)
    author: Optional[str] = Field(None, min_length=1, max_length=50)
    category: Optional[BlogCategory] = None
    tags: Optional[List[Tag]] = None
    published: Optional[bool] = None

    class Config:
        use_enum_values = True

    @field_validator(
        "title", "content", "excerpt", "author", "category", "tags", "published"
    )
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class BlogPublish(APIModel):
    """Publish/unpublish request"""
    published: bool


class BlogPostResponse(APIModel):
    """Blog post response"""
    id: UUID
    title: str
    content: str
    excerpt: str
    author: str
    category: BlogCategory
    image_url: Optional[str]
    published: bool
    tags: List[str]
    view_count: int
    created_at: datetime
    updated_at: datetime


class BlogPostListResponse(APIModel):
    """Paginated blog post list"""
    posts: List[BlogPostResponse]
    pagination: Pagination
