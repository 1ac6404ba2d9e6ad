"""Customer review model"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Uuid, Index

from app.database import Base


class Review(Base):
    """Customer reviews, hidden until approved by an admin"""
    __tablename__ = "reviews"
    __table_args__ = (
        Index("ix_reviews_approved_created", "is_approved", "created_at"),
        Index("ix_reviews_rating", "rating"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_name = Column(String(50), nullable=False)
    email = Column(String(255))
    rating = Column(Integer, nullable=False)
    comment = Column(String(500), nullable=False)
    is_approved = Column(Boolean, nullable=False, default=False)
    # Plain id, not a foreign key: deleting the menu item leaves the review in place
    menu_item_id = Column(Uuid)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
