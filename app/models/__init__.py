"""Database models"""

from app.models.menu import MenuItem, MenuCategory, Allergen
from app.models.review import Review
from app.models.blog import BlogPost, BlogCategory
from app.models.contact import ContactMessage
from app.models.user import User, UserRole

__all__ = [
    "MenuItem",
    "MenuCategory",
    "Allergen",
    "Review",
    "BlogPost",
    "BlogCategory",
    "ContactMessage",
    "User",
    "UserRole",
]
