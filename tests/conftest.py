import json
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from site_service.api.deps import get_site_service
from site_service.data.repository import InMemorySiteRepository
from site_service.db.database import create_tables
from site_service.main import app
from site_service.services.site_service import SiteService

FIXED_MILLIS = 1700000000000


class StepClock:
    """Deterministic clock advancing one second per call"""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def config_dict() -> dict:
    return {
        "bannerUrl": "https://cdn.example.com/banner.jpg",
        "name": "Maison Lumiere",
        "title": "Handmade candles",
        "subtitle": "Since 1998",
        "heroDescription": "Small-batch candles poured in Lyon.",
        "logoUrl": "https://cdn.example.com/logo.png",
        "aboutPortraitOneUrl": "https://cdn.example.com/p1.jpg",
        "aboutLandscapeUrl": "https://cdn.example.com/l.jpg",
        "aboutPortraitTwoUrl": "https://cdn.example.com/p2.jpg",
        "history": "Founded by two sisters.",
        "values": ["Craft", "Sustainability"],
        "contactHeading": "Get in touch",
        "contactDescription": "We answer within a day.",
        "contactDetails": "hello@example.com",
        "primaryColor": "#1a1a1a",
        "secondaryColor": "#f5e6c8",
    }


@pytest.fixture
def config_json(config_dict) -> str:
    return json.dumps(config_dict)


@pytest.fixture
def clock() -> StepClock:
    return StepClock()


@pytest.fixture
def repository() -> InMemorySiteRepository:
    return InMemorySiteRepository()


@pytest.fixture
def service(repository, clock) -> SiteService:
    return SiteService(repository, clock=clock, millis=lambda: FIXED_MILLIS)


@pytest.fixture
def client(service):
    # Not entered as a context manager: the lifespan would create the SQL tables
    app.dependency_overrides[get_site_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sql_session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await create_tables(engine)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()
