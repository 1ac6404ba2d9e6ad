"""Blog post model"""

import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, JSON, Text, Uuid, Index

from app.database import Base


class BlogCategory(str, enum.Enum):
    """Fixed blog categories"""
    NEWS = "news"
    RECIPES = "recipes"
    EVENTS = "events"
    TIPS = "tips"
    SEASONAL = "seasonal"


class BlogPost(Base):
    """Blog posts; drafts are invisible to the public API"""
    __tablename__ = "blog_posts"
    __table_args__ = (
        Index("ix_blog_posts_published_created", "published", "created_at"),
        Index("ix_blog_posts_category_published", "category", "published"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(String(300), nullable=False)
    author = Column(String(50), nullable=False)
    category = Column(String(20), nullable=False, default=BlogCategory.NEWS.value)
    image_url = Column(Text)
    published = Column(Boolean, nullable=False, default=False)
    tags = Column(JSON, nullable=False, default=list)
    view_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
