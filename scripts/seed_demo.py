#!/usr/bin/env python3
"""
Seed script to create the admin account and demo menu, review and blog data
"""

import asyncio
import uuid

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

MENU_ITEMS = [
    # Ice cream
    {"name": "Vanilla Dream", "description": "Classic vanilla ice cream made with real vanilla beans", "price": 4.99, "category": "ice-cream", "allergens": ["dairy"], "nutrition_info": {"calories": 250, "fat": 12, "protein": 4, "carbs": 32}},
    {"name": "Chocolate Fudge", "description": "Rich chocolate ice cream with fudge swirls", "price": 5.49, "category": "ice-cream", "is_special": True, "allergens": ["dairy"], "nutrition_info": {"calories": 280, "fat": 15, "protein": 5, "carbs": 35}},
    {"name": "Strawberry Swirl", "description": "Creamy strawberry ice cream with real fruit pieces", "price": 5.29, "category": "ice-cream", "allergens": ["dairy"], "nutrition_info": {"calories": 260, "fat": 13, "protein": 4, "carbs": 33}},
    {"name": "Mint Chocolate Chip", "description": "Refreshing mint ice cream with chocolate chips", "price": 5.79, "category": "ice-cream", "allergens": ["dairy"], "nutrition_info": {"calories": 270, "fat": 14, "protein": 4, "carbs": 34}},
    {"name": "Cookies & Cream", "description": "Vanilla ice cream loaded with chocolate cookie pieces", "price": 5.99, "category": "ice-cream", "is_special": True, "allergens": ["dairy", "gluten"], "nutrition_info": {"calories": 290, "fat": 16, "protein": 5, "carbs": 36}},

    # Snacks
    {"name": "Waffle Cone", "description": "Freshly made crispy waffle cone", "price": 1.99, "category": "snacks", "allergens": ["gluten", "eggs"], "nutrition_info": {"calories": 120, "fat": 3, "protein": 3, "carbs": 22}},
    {"name": "Chocolate Chip Cookies", "description": "Soft and chewy chocolate chip cookies", "price": 2.49, "category": "snacks", "allergens": ["gluten", "eggs", "dairy"], "nutrition_info": {"calories": 180, "fat": 8, "protein": 2, "carbs": 26}},
    {"name": "Brownie Sundae", "description": "Warm brownie topped with ice cream and chocolate sauce", "price": 7.99, "category": "snacks", "is_special": True, "allergens": ["gluten", "eggs", "dairy"], "nutrition_info": {"calories": 450, "fat": 22, "protein": 6, "carbs": 58}},

    # Beverages
    {"name": "Milkshake - Vanilla", "description": "Thick and creamy vanilla milkshake", "price": 4.49, "category": "beverages", "allergens": ["dairy"], "nutrition_info": {"calories": 320, "fat": 12, "protein": 8, "carbs": 45}},
    {"name": "Milkshake - Chocolate", "description": "Rich chocolate milkshake with whipped cream", "price": 4.99, "category": "beverages", "allergens": ["dairy"], "nutrition_info": {"calories": 380, "fat": 16, "protein": 9, "carbs": 52}},
    {"name": "Fresh Lemonade", "description": "Refreshing freshly squeezed lemonade", "price": 2.99, "category": "beverages", "allergens": [], "nutrition_info": {"calories": 120, "fat": 0, "protein": 0, "carbs": 32}},
]

REVIEWS = [
    {"customer_name": "Sarah Johnson", "email": "sarah.j@email.com", "rating": 5, "comment": "Amazing ice cream! The vanilla dream is absolutely perfect. Will definitely come back!", "is_approved": True},
    {"customer_name": "Mike Chen", "email": "mike.chen@email.com", "rating": 4, "comment": "Great variety of flavors. The chocolate fudge is my favorite. Service was excellent.", "is_approved": True},
    {"customer_name": "Emily Davis", "email": "emily.davis@email.com", "rating": 5, "comment": "Love the mint chocolate chip! Perfect balance of mint and chocolate. Highly recommended!", "is_approved": True},
    {"customer_name": "David Wilson", "email": "david.w@email.com", "rating": 4, "comment": "Good ice cream, reasonable prices. The waffle cones are fresh and crispy.", "is_approved": True},
    {"customer_name": "Lisa Brown", "email": "lisa.brown@email.com", "rating": 5, "comment": "The brownie sundae is to die for! Perfect for a special treat. Staff is very friendly.", "is_approved": True},
    {"customer_name": "John Smith", "email": "john.smith@email.com", "rating": 3, "comment": "Ice cream is good but a bit pricey. Would like to see more variety in flavors.", "is_approved": False},
]

BLOG_POSTS = [
    {
        "title": "Welcome to Our Ice Cream Parlour!",
        "content": "We are excited to welcome you to our new ice cream parlour! Our mission is to bring you the finest quality ice cream made with the freshest ingredients. From classic vanilla to unique seasonal flavors, we have something for everyone.",
        "excerpt": "Welcome to our new ice cream parlour! Discover our mission and commitment to quality ice cream.",
        "author": "Admin",
        "category": "news",
        "tags": ["welcome", "announcement", "ice-cream"],
    },
    {
        "title": "The Perfect Summer Treat: Homemade Ice Cream Recipe",
        "content": "Summer is here and what better way to cool down than with homemade ice cream? You'll need fresh cream, whole milk, sugar, and vanilla extract. The key is to use high-quality ingredients and to churn slowly for the perfect texture.",
        "excerpt": "Learn how to make the perfect vanilla ice cream at home with our secret recipe.",
        "author": "Chef Maria",
        "category": "recipes",
        "tags": ["recipe", "homemade", "vanilla", "summer"],
    },
    {
        "title": "New Seasonal Flavors Coming Soon!",
        "content": "We're working on some exciting new seasonal flavors for fall! Get ready for pumpkin spice, apple cinnamon, and maple pecan. These limited-time flavors will be available starting next month.",
        "excerpt": "Exciting new seasonal flavors are coming this fall. Discover what we have in store!",
        "author": "Admin",
        "category": "seasonal",
        "tags": ["seasonal", "fall", "new-flavors", "limited-time"],
    },
    {
        "title": "Ice Cream History: A Sweet Journey",
        "content": "Ice cream has a rich history dating back thousands of years. From ancient China where ice and milk were mixed with rice, to the modern ice cream we know today, this frozen treat has evolved significantly.",
        "excerpt": "Discover the fascinating history of ice cream from ancient times to modern day.",
        "author": "History Buff",
        "category": "tips",
        "tags": ["history", "ice-cream", "education", "fun-facts"],
    },
]


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select

    from app.config import settings
    from app.database import SessionLocal, engine, Base
    from app.models.menu import MenuItem
    from app.models.review import Review
    from app.models.blog import BlogPost
    from app.models.user import User, UserRole

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        result = await db.execute(select(User).where(User.email == settings.admin_email))
        if result.scalar_one_or_none():
            print("Demo data already exists. Skipping...")
            return

        print("Creating admin user...")
        db.add(User(
            id=uuid.uuid4(),
            username=settings.admin_username,
            email=settings.admin_email,
            hashed_password=pwd_context.hash(settings.admin_password),
            role=UserRole.ADMIN,
            is_active=True,
        ))

        print("Creating menu items...")
        for item in MENU_ITEMS:
            db.add(MenuItem(**item))

        print("Creating reviews...")
        for review in REVIEWS:
            db.add(Review(**review))

        print("Creating blog posts...")
        for post in BLOG_POSTS:
            db.add(BlogPost(published=True, **post))

        await db.commit()

        print(f"""
Demo data created successfully!

Admin:
  Email: {settings.admin_email}
  Password: {settings.admin_password}

Menu: {len(MENU_ITEMS)} items
Reviews: {len(REVIEWS)} ({sum(1 for r in REVIEWS if r["is_approved"])} approved)
Blog posts: {len(BLOG_POSTS)}
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
