"""Test configuration and fixtures"""

import os
from datetime import datetime, timedelta

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from uuid import uuid4

from app.main import app
from app.config import settings
from app.database import Base, get_db, get_session_factory
from app.models.user import User, UserRole
from app.models.menu import MenuItem
from app.models.review import Review
from app.models.blog import BlogPost
from app.models.contact import ContactMessage
from app.api.auth import get_password_hash, create_access_token


API = settings.api_prefix


@pytest.fixture
async def session_factory(tmp_path):
    """File-backed SQLite so concurrent sessions see the same data"""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def test_db(session_factory):
    """Session for arranging test data"""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def admin_user(test_db):
    """Create an admin user"""
    user = User(
        id=uuid4(),
        username="admin",
        email="admin@icecreamparlour.com",
        hashed_password=get_password_hash("admin123"),
        role=UserRole.ADMIN,
        is_active=True,
    )
    test_db.add(user)
    await test_db.commit()

    return user


@pytest.fixture
async def staff_user(test_db):
    """Create a non-admin user"""
    user = User(
        id=uuid4(),
        username="scooper",
        email="staff@icecreamparlour.com",
        hashed_password=get_password_hash("staff123"),
        role=UserRole.STAFF,
        is_active=True,
    )
    test_db.add(user)
    await test_db.commit()

    return user


@pytest.fixture
async def menu_items(test_db):
    """Create test menu items"""
    items = [
        MenuItem(
            name="Vanilla Dream",
            description="Classic vanilla ice cream made with real vanilla beans",
            price=4.99,
            category="ice-cream",
            allergens=["dairy"],
        ),
        MenuItem(
            name="Chocolate Fudge",
            description="Rich chocolate ice cream with fudge swirls",
            price=5.49,
            category="ice-cream",
            is_special=True,
            allergens=["dairy"],
        ),
        MenuItem(
            name="Waffle Cone",
            description="Freshly made crispy waffle cone",
            price=1.99,
            category="snacks",
            allergens=["gluten", "eggs"],
        ),
        MenuItem(
            name="Fresh Lemonade",
            description="Refreshing freshly squeezed lemonade",
            price=2.99,
            category="beverages",
            is_available=False,
        ),
    ]

    for item in items:
        test_db.add(item)

    await test_db.commit()
    return items


@pytest.fixture
async def reviews(test_db, menu_items):
    """Three approved reviews and one pending, oldest first"""
    now = datetime.utcnow()
    items = [
        Review(customer_name="Sarah Johnson", rating=5, comment="Absolutely perfect vanilla",
               is_approved=True, menu_item_id=menu_items[0].id, created_at=now - timedelta(hours=4)),
        Review(customer_name="Mike Chen", rating=4, comment="Great fudge swirls",
               is_approved=True, created_at=now - timedelta(hours=3)),
        Review(customer_name="Emily Davis", rating=3, comment="Cone was fine",
               is_approved=True, created_at=now - timedelta(hours=2)),
        Review(customer_name="John Smith", rating=2, comment="A bit pricey",
               is_approved=False, created_at=now - timedelta(hours=1)),
    ]

    for review in items:
        test_db.add(review)

    await test_db.commit()
    return items


@pytest.fixture
async def blog_posts(test_db):
    """Two published posts and one draft"""
    now = datetime.utcnow()
    posts = [
        BlogPost(title="Welcome to Our Ice Cream Parlour!", content="We are excited to welcome you.",
                 excerpt="Welcome!", author="Admin", category="news", published=True,
                 tags=["welcome"], created_at=now - timedelta(days=2)),
        BlogPost(title="Homemade Ice Cream Recipe", content="You need fresh cream, milk and vanilla.",
                 excerpt="Make vanilla at home", author="Chef Maria", category="recipes",
                 published=True, tags=["recipe", "vanilla"], created_at=now - timedelta(days=1)),
        BlogPost(title="Secret Autumn Flavours", content="Pumpkin spice is coming.",
                 excerpt="Coming soon", author="Admin", category="seasonal", published=False,
                 created_at=now),
    ]

    for post in posts:
        test_db.add(post)

    await test_db.commit()
    return posts


@pytest.fixture
async def contact_messages(test_db):
    """Two unread messages and one already read"""
    now = datetime.utcnow()
    messages = [
        ContactMessage(name="Ann", email="ann@email.com", subject="Party booking",
                       message="Can we book for 12?", is_read=True, created_at=now - timedelta(hours=3)),
        ContactMessage(name="Ben", email="ben@email.com", subject="Vegan options",
                       message="Do you have sorbet?", created_at=now - timedelta(hours=2)),
        ContactMessage(name="Cid", email="cid@email.com", subject="Opening hours",
                       message="Open on Sunday?", phone="+15551234567", created_at=now - timedelta(hours=1)),
    ]

    for message in messages:
        test_db.add(message)

    await test_db.commit()
    return messages


@pytest.fixture
async def client(session_factory, tmp_path, monkeypatch):
    """Anonymous client with the database overridden"""
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path / "uploads"))

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


def _client_for(user: User) -> AsyncClient:
    token = create_access_token(user)
    return AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Authorization": f"Bearer {token}"},
    )


@pytest.fixture
async def admin_client(client, admin_user):
    """Client authenticated as an admin"""
    async with _client_for(admin_user) as authed:
        yield authed


@pytest.fixture
async def staff_client(client, staff_user):
    """Client authenticated as a non-admin user"""
    async with _client_for(staff_user) as authed:
        yield authed
