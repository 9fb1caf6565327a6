"""Shared test fixtures for async database, sessions, and content factories."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import UTC, datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from portal_api.core.config import Settings
from portal_api.models.base import Base
from portal_api.models.contact_info import ContactInfo
from portal_api.models.information_page import InformationPage
from portal_api.models.news_article import NewsArticle, NewsCategory
from portal_api.schemas.contact_info import ContactInfoCreateRequest
from portal_api.schemas.information_page import InformationPageCreateRequest
from portal_api.schemas.news_article import NewsArticleCreateRequest
from portal_api.services.contact_info_service import create_contact
from portal_api.services.information_page_service import create_page
from portal_api.services.news_article_service import create_article

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(database_url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory async SQLite engine with all tables."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(async_engine, expire_on_commit=False)


@pytest.fixture
async def async_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession]:
    """Create a per-test async session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_article(async_session: AsyncSession) -> Callable[..., Awaitable[NewsArticle]]:
    """Factory that persists a news article with sensible defaults."""

    async def _make(**overrides: object) -> NewsArticle:
        fields: dict[str, object] = {
            "title": "Road Closure",
            "content": "Main Street will be closed for repairs.",
            "summary": None,
            "published_at": BASE_TIME,
            "is_featured": False,
            "category": NewsCategory.NEWS,
        }
        fields.update(overrides)
        return await create_article(async_session, NewsArticleCreateRequest(**fields))

    return _make


@pytest.fixture
def make_page(async_session: AsyncSession) -> Callable[..., Awaitable[InformationPage]]:
    """Factory that persists an information page with sensible defaults."""

    async def _make(**overrides: object) -> InformationPage:
        fields: dict[str, object] = {
            "title": "Waste Collection",
            "slug": "waste-collection",
            "content": "Bins are collected every Tuesday.",
            "page_type": "service",
            "meta_description": None,
        }
        fields.update(overrides)
        return await create_page(async_session, InformationPageCreateRequest(**fields))

    return _make


@pytest.fixture
def make_contact(async_session: AsyncSession) -> Callable[..., Awaitable[ContactInfo]]:
    """Factory that persists a contact entry with sensible defaults."""

    async def _make(**overrides: object) -> ContactInfo:
        fields: dict[str, object] = {
            "department": "Administration",
            "contact_type": "phone",
            "label": "Main Office",
            "value": "(555) 010-1000",
        }
        fields.update(overrides)
        return await create_contact(async_session, ContactInfoCreateRequest(**fields))

    return _make
