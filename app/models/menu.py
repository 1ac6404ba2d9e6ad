"""Menu-related models"""

import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, Float, JSON, Text, Uuid, Index

from app.database import Base


class MenuCategory(str, enum.Enum):
    """Fixed menu categories"""
    ICE_CREAM = "ice-cream"
    SNACKS = "snacks"
    BEVERAGES = "beverages"
    DESSERTS = "desserts"
    SPECIALTY = "specialty"


class Allergen(str, enum.Enum):
    """Allergen tags a menu item may carry"""
    DAIRY = "dairy"
    EGGS = "eggs"
    NUTS = "nuts"
    SOY = "soy"
    GLUTEN = "gluten"
    SULFITES = "sulfites"


class MenuItem(Base):
    """Menu items"""
    __tablename__ = "menu_items"
    __table_args__ = (
        Index("ix_menu_items_category_available", "category", "is_available"),
        Index("ix_menu_items_is_special", "is_special"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    price = Column(Float, nullable=False)
    category = Column(String(20), nullable=False, default=MenuCategory.ICE_CREAM.value)
    image_url = Column(Text)
    is_available = Column(Boolean, nullable=False, default=True)
    is_special = Column(Boolean, nullable=False, default=False)
    allergens = Column(JSON, nullable=False, default=list)  # ["dairy", "nuts", ...]
    nutrition_info = Column(JSON)  # {"calories": 250, "fat": 12, ...}
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
