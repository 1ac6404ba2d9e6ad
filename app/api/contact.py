"""Contact form API endpoints"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.contact import ContactMessage
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.contact import (
    ContactMessageCreate,
    ContactSubmitted,
    ContactReadUpdate,
    ContactMessageResponse,
    ContactMessageListResponse,
    ContactStats,
)
from app.api.auth import require_admin
from app.api.filters import flag_query, parse_flag, paginate
from app.services import stats

router = APIRouter()
logger = structlog.get_logger()


async def get_message_or_404(db: AsyncSession, message_id: UUID) -> ContactMessage:
    message = await db.get(ContactMessage, message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Contact message not found")
    return message


@router.post("", response_model=ContactSubmitted, status_code=201)
async def submit_contact_message(
    message_data: ContactMessageCreate,
    db: AsyncSession = Depends(get_db),
):
    """Submit the public contact form"""
    message = ContactMessage(**message_data.model_dump(), is_read=False)

    db.add(message)
    await db.commit()
    await db.refresh(message)

    logger.info("contact_message_received", message_id=str(message.id))
    return ContactSubmitted(
        message="Thank you for your message. We will get back to you soon!",
        id=message.id,
    )


@router.get("", response_model=ContactMessageListResponse)
async def list_contact_messages(
    read: Optional[str] = flag_query("Filter on read state"),
    limit: int = Query(20, ge=1, le=100),
    page: int = Query(1, ge=1),
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """List contact messages, newest first"""
    query = select(ContactMessage)

    if read is not None:
        query = query.where(ContactMessage.is_read == parse_flag(read))

    query = query.order_by(ContactMessage.created_at.desc())
    messages, pagination = await paginate(db, query, page, limit)

    return ContactMessageListResponse(messages=messages, pagination=pagination)


@router.get("/stats/overview", response_model=ContactStats)
async def get_contact_stats(
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Read/unread counts"""
    return await stats.contact_summary(db)


@router.get("/{message_id}", response_model=ContactMessageResponse)
async def get_contact_message(
    message_id: UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Get a message; viewing it marks it read"""
    message = await get_message_or_404(db, message_id)

    if not message.is_read:
        message.is_read = True
        await db.commit()
        await db.refresh(message)
        logger.info("contact_message_read", message_id=str(message.id))

    return message


@router.patch("/{message_id}/read", response_model=ContactMessageResponse)
async def set_read(
    message_id: UUID,
    body: ContactReadUpdate,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Mark a message read or unread"""
    message = await get_message_or_404(db, message_id)

    message.is_read = body.is_read
    await db.commit()
    await db.refresh(message)

    return message


@router.delete("/{message_id}", response_model=MessageResponse)
async def delete_contact_message(
    message_id: UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Delete a message"""
    message = await get_message_or_404(db, message_id)

    await db.delete(message)
    await db.commit()

    logger.info("contact_message_deleted", message_id=str(message_id), user_id=str(current_user.id))
    return MessageResponse(message="Contact message deleted successfully")
