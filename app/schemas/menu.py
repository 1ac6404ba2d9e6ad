"""Menu schemas"""

from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import Field, field_validator

from app.models.menu import MenuCategory, Allergen
from app.schemas.common import APIModel, reject_null


class NutritionInfo(APIModel):
    """Per-serving nutrition facts"""
    calories: Optional[float] = Field(None, ge=0)
    fat: Optional[float] = Field(None, ge=0)
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)


class MenuItemCreate(APIModel):
    """Create menu item request"""
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    price: float = Field(..., ge=0)
    category: MenuCategory = MenuCategory.ICE_CREAM
    is_available: bool = True
    is_special: bool = False
    allergens: List[Allergen] = []
    nutrition_info: Optional[NutritionInfo] = None

    class Config:
        use_enum_values = True


class MenuItemUpdate(APIModel):
    """Update menu item request; only supplied fields are changed"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    price: Optional[float] = Field(None, ge=0)
    category: Optional[MenuCategory] = None
    is_available: Optional[bool] = None
    is_special: Optional[bool] = None
    allergens: Optional[List[Allergen]] = None
    nutrition_info: Optional[NutritionInfo] = None

    class Config:
        use_enum_values = True

    @field_validator(
        "name", "description", "price", "category", "is_available", "is_special", "allergens"
    )
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class MenuItemResponse(APIModel):
    """Menu item response"""
    id: UUID
    name: str
    description: str
    price: float
    category: MenuCategory
    image_url: Optional[str]
    is_available: bool
    is_special: bool
    allergens: List[Allergen]
    nutrition_info: Optional[NutritionInfo]
    created_at: datetime
    updated_at: datetime
