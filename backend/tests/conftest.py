"""Shared test fixtures for pitchcraft."""

import os

# Configure before any pitchcraft module builds its settings/engine.
os.environ["MODE"] = "testing"
os.environ["OPENAI_API_KEY"] = ""
os.environ["ASYNC_DATABASE_URI"] = "sqlite+aiosqlite://"

import pytest
import pytest_asyncio
from sqlmodel import SQLModel

import pitchcraft.models  # noqa: F401  registers tables
from helpers import ACME, FakeGenerationClient
from pitchcraft.core.generation_client import QuotaExceeded
from pitchcraft.db.database import build_engine, build_sessionmaker
from pitchcraft.db.gateway import DocumentGateway
from pitchcraft.schemas.idea import Industry, StartupIdeaBase


@pytest.fixture
def acme() -> StartupIdeaBase:
    return StartupIdeaBase(**ACME)


@pytest.fixture
def full_idea() -> StartupIdeaBase:
    return StartupIdeaBase(
        **{**ACME, "industry": Industry.SAAS},
        market_size="$4B global widget market",
        team_overview="Two ex-WidgetCo engineers",
    )


@pytest.fixture
def fake_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def failing_client() -> FakeGenerationClient:
    return FakeGenerationClient(default=QuotaExceeded(detail="HTTP 429"))


@pytest_asyncio.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    async with build_sessionmaker(engine)() as session:
        yield session


@pytest.fixture
def gateway(session) -> DocumentGateway:
    return DocumentGateway(session)

