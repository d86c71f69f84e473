"""Pytest configuration and fixtures."""
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

from app.database import Base, get_db
from app.models.enums import GameType, OAuthProvider
from app.models.game_item import GameItem
from app.models.user import User
from main import app


@pytest.fixture
async def test_db():
    """Create test database."""
    TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    AsyncSessionLocal = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    
    async with AsyncSessionLocal() as session:
        yield session
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    
    await engine.dispose()


@pytest.fixture
def client(test_db):
    """Create test client."""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
async def test_user(test_db):
    """Create a Google-authenticated user."""
    user = User(
        email="user@gmail.com",
        name="John Doe",
        avatar_url=None,
        oauth_provider=OAuthProvider.GOOGLE,
        oauth_id="google_123456",
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def test_item(test_db):
    """Create an available GoStop item."""
    item = GameItem(
        title="Golden Dragon Card",
        description="Rare golden card with dragon design",
        detailed_description="A legendary artifact in the world of Gostop.",
        price=Decimal("29.99"),
        game_type=GameType.GOSTOP,
        image_url="https://example.com/dragon.png",
        is_available=True,
    )
    test_db.add(item)
    await test_db.commit()
    await test_db.refresh(item)
    return item


@pytest.fixture
async def unavailable_item(test_db):
    """Create a Poker item that has been withdrawn from sale."""
    item = GameItem(
        title="Retired Chips",
        description="No longer sold",
        detailed_description="These chips have been withdrawn from the catalog.",
        price=Decimal("9.99"),
        game_type=GameType.POKER,
        image_url=None,
        is_available=False,
    )
    test_db.add(item)
    await test_db.commit()
    await test_db.refresh(item)
    return item
