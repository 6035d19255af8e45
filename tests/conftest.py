"""Shared test fixtures for jpashop."""

import httpx
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from jpashop.db.base import Base, get_db
from jpashop.domain import Member, Order, OrderStatus  # registers all models on Base.metadata
from jpashop.main import create_app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def make_engine():
    # One shared connection so every session sees the same in-memory database
    return create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine with the schema created."""
    engine = make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def shop(session):
    """Three members and three orders:

    1: ORDERED  Alice
    2: CANCELED Bob
    3: ORDERED  Bobby
    """
    alice, bob, bobby = Member(name="Alice"), Member(name="Bob"), Member(name="Bobby")
    session.add_all([alice, bob, bobby])
    session.add_all(
        [
            Order(member=alice, status=OrderStatus.ORDERED),
            Order(member=bob, status=OrderStatus.CANCELED),
            Order(member=bobby, status=OrderStatus.ORDERED),
        ]
    )
    await session.flush()
    return session


def override_db(session_factory):
    """Build a get_db replacement bound to the given session factory."""

    async def _get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return _get_db


async def _client_for(session_factory):
    app = create_app()
    app.dependency_overrides[get_db] = override_db(session_factory)
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client for the app, wired to the in-memory database."""
    async with await _client_for(session_factory) as c:
        yield c


@pytest_asyncio.fixture
async def broken_client():
    """HTTP client whose database has no tables, so every query fails."""
    engine = make_engine()
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with await _client_for(factory) as c:
        yield c
    await engine.dispose()
