"""Menu management API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.menu import MenuItem, MenuCategory
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.menu import MenuItemCreate, MenuItemUpdate, MenuItemResponse
from app.api.auth import require_admin
from app.api.filters import flag_query, parse_flag, text_search
from app.api.payload import read_payload, validate_payload
from app.services.storage import save_image

router = APIRouter()
logger = structlog.get_logger()

JSON_FIELDS = ("allergens", "nutritionInfo", "nutrition_info")


async def get_menu_item_or_404(db: AsyncSession, item_id: UUID) -> MenuItem:
    item = await db.get(MenuItem, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found")
    return item


@router.get("", response_model=List[MenuItemResponse])
async def list_menu_items(
    category: Optional[MenuCategory] = None,
    available: Optional[str] = flag_query("Filter on availability"),
    special: Optional[str] = flag_query("Filter on specials"),
    search: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
):
    """List menu items, sorted by category then name"""
    query = select(MenuItem)

    if category:
        query = query.where(MenuItem.category == category.value)

    if available is not None:
        query = query.where(MenuItem.is_available == parse_flag(available))

    if special is not None:
        query = query.where(MenuItem.is_special == parse_flag(special))

    if search and search.strip():
        query = query.where(text_search([MenuItem.name, MenuItem.description], search))

    query = query.order_by(MenuItem.category, MenuItem.name)

    result = await db.execute(query)
    return result.scalars().all()


@router.get("/{item_id}", response_model=MenuItemResponse)
async def get_menu_item(
    item_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a specific menu item"""
    return await get_menu_item_or_404(db, item_id)


@router.post("", response_model=MenuItemResponse, status_code=201)
async def create_menu_item(
    request: Request,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Create a new menu item (JSON or multipart with an optional image)"""
    async with read_payload(request, json_fields=JSON_FIELDS) as (data, image):
        item_data = validate_payload(MenuItemCreate, data)

        item = MenuItem(**item_data.model_dump())
        if image is not None:
            item.image_url = save_image(image)

    db.add(item)
    await db.commit()
    await db.refresh(item)

    logger.info("menu_item_created", item_id=str(item.id), user_id=str(current_user.id))
    return item


@router.put("/{item_id}", response_model=MenuItemResponse)
async def update_menu_item(
    item_id: UUID,
    request: Request,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Update a menu item; only supplied fields change"""
    item = await get_menu_item_or_404(db, item_id)

    async with read_payload(request, json_fields=JSON_FIELDS) as (data, image):
        item_data = validate_payload(MenuItemUpdate, data)

        for field, value in item_data.model_dump(exclude_unset=True).items():
            setattr(item, field, value)

        if image is not None:
            item.image_url = save_image(image)

    await db.commit()
    await db.refresh(item)

    logger.info("menu_item_updated", item_id=str(item.id), user_id=str(current_user.id))
    return item


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_menu_item(
    item_id: UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Delete a menu item. Reviews pointing at it are left untouched."""
    item = await get_menu_item_or_404(db, item_id)

    await db.delete(item)
    await db.commit()

    logger.info("menu_item_deleted", item_id=str(item_id), user_id=str(current_user.id))
    return MessageResponse(message="Menu item deleted successfully")


@router.patch("/{item_id}/availability", response_model=MenuItemResponse)
async def toggle_availability(
    item_id: UUID,
    current_user: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Flip availability"""
    item = await get_menu_item_or_404(db, item_id)

    item.is_available = not item.is_available
    await db.commit()
    await db.refresh(item)

    logger.info("menu_item_availability_toggled", item_id=str(item.id), is_available=item.is_available)
    return item
