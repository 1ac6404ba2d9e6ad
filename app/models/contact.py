"""Contact form message model"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Uuid, Index

from app.database import Base


class ContactMessage(Base):
    """Messages submitted through the public contact form"""
    __tablename__ = "contact_messages"
    __table_args__ = (
        Index("ix_contact_messages_read_created", "is_read", "created_at"),
        Index("ix_contact_messages_email", "email"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(100), nullable=False)
    message = Column(String(1000), nullable=False)
    phone = Column(String(20))
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
