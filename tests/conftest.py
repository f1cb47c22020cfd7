"""
Pytest configuration for PocketBot.

Provides fixtures for:
- An in-memory SQLite database with all tables created
- Handler modules wired to that database
- Fake Discord interactions
"""

from __future__ import annotations

from typing import AsyncGenerator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pocketbot.database.models import Base
from pocketbot.bot.handlers import ledger as ledger_handlers
from pocketbot.bot.handlers import todo as todo_handlers

from helpers import make_interaction


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[sessionmaker, None]:
    """
    Session factory bound to a fresh in-memory database.

    StaticPool keeps the single connection alive so every session sees the
    same database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    try:
        yield factory
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory: sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as db_session:
        yield db_session


@pytest.fixture
def handler_db(monkeypatch: pytest.MonkeyPatch, session_factory: sessionmaker) -> sessionmaker:
    """Point the command handlers at the test database."""
    monkeypatch.setattr(todo_handlers, "AsyncSessionLocal", session_factory)
    monkeypatch.setattr(ledger_handlers, "AsyncSessionLocal", session_factory)
    return session_factory


@pytest.fixture
def interaction() -> MagicMock:
    return make_interaction()

