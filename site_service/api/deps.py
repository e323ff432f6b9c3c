"""FastAPI dependencies shared by the REST and GraphQL surfaces"""

from typing import AsyncIterator, Optional

from fastapi import Request

from site_service.data.repository import InMemorySiteRepository, SqlSiteRepository
from site_service.db.database import get_session_factory
from site_service.services.site_service import SiteService

_memory_repository: Optional[InMemorySiteRepository] = None


def get_memory_repository() -> InMemorySiteRepository:
    """Get in-memory repository instance (singleton)"""
    global _memory_repository
    if _memory_repository is None:
        _memory_repository = InMemorySiteRepository()
    return _memory_repository


async def get_site_service(request: Request) -> AsyncIterator[SiteService]:
    """Request-scoped SiteService; the SQL backend gets one session per request."""
    settings = request.app.state.settings
    if settings.repository_backend == "memory":
        yield SiteService(get_memory_repository(), max_slug_attempts=settings.max_slug_attempts)
        return

    async with get_session_factory()() as session:
        yield SiteService(SqlSiteRepository(session), max_slug_attempts=settings.max_slug_attempts)
