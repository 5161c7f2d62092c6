import os
import sys
from typing import AsyncGenerator

# Add project root to path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy_utils import create_database, database_exists, drop_database
from alembic import command
from alembic.config import Config as AlembicConfig

from src.main import app as fastapi_app
from src.config import Settings
from src.database import get_async_session, to_sync_url
from src.tweets.models import Tweet
from src.users.models import User


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test-specific settings"""
    return Settings()


@pytest.fixture(scope="session")
def alembic_config(test_settings: Settings) -> AlembicConfig:
    """Alembic configuration for test database"""
    config = AlembicConfig(os.path.join(project_root, "alembic.ini"))
    config.set_main_option("sqlalchemy.url", to_sync_url(test_settings.TEST_DATABASE_URL))
    return config


@pytest.fixture(scope="session", autouse=True)
def setup_test_database(test_settings: Settings, alembic_config: AlembicConfig):
    """Create and teardown test database for the entire test session"""
    sync_url = to_sync_url(test_settings.TEST_DATABASE_URL)

    # Start from a clean database every session
    if database_exists(sync_url):
        drop_database(sync_url)
    create_database(sync_url)

    try:
        command.upgrade(alembic_config, "head")
        yield
    finally:
        drop_database(sync_url)


@pytest_asyncio.fixture
async def db_engine(test_settings: Settings):
    """Create an async database engine for tests"""
    engine = create_async_engine(test_settings.TEST_DATABASE_URL)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for tests with transaction rollback"""
    session_factory = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with session_factory() as session:
        transaction = await session.begin()
        try:
            yield session
        finally:
            # Always rollback to keep tests isolated
            await transaction.rollback()


@pytest_asyncio.fixture
async def app(db_session: AsyncSession) -> FastAPI:
    """FastAPI app whose requests share the test's rolled-back session"""

    async def get_test_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    fastapi_app.dependency_overrides[get_async_session] = get_test_db

    yield fastapi_app

    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest_asyncio.fixture
async def create_tweets(db_session: AsyncSession):
    """Helper fixture to insert tweets with explicit ids for one author"""

    async def _create_tweets(ids=range(1, 11), email: str = "author@example.com"):
        user = User(email=email, name="Author")
        tweets = [Tweet(id=tweet_id, text=f"Tweet number {tweet_id}", user=user) for tweet_id in ids]
        db_session.add_all([user, *tweets])
        await db_session.flush()
        return tweets

    return _create_tweets
