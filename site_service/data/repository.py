"""Site data repositories: relational (SQLAlchemy) and in-memory"""

import uuid
from typing import Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from site_service.core.exceptions import SlugTakenError
from site_service.db.models import Site


class SqlSiteRepository:
    """Site repository backed by an async SQLAlchemy session.

    Every write commits its own unit of work. A violation of the unique
    slug constraint is reported as ``SlugTakenError``; any other database
    error propagates after rollback.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, site: Site) -> Site:
        self.session.add(site)
        await self._commit(site)
        return site

    async def update(self, site: Site) -> Site:
        self.session.add(site)
        await self._commit(site)
        return site

    async def delete(self, site_id: uuid.UUID) -> None:
        try:
            await self.session.execute(delete(Site).where(Site.id == site_id))
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

    async def get_by_id(self, site_id: uuid.UUID) -> Optional[Site]:
        return await self.session.get(Site, site_id)

    async def get_by_slug(self, slug: str) -> Optional[Site]:
        result = await self.session.execute(select(Site).where(Site.slug == slug))
        return result.scalar_one_or_none()

    async def get_by_owner(self, owner_id: uuid.UUID) -> List[Site]:
        stmt = select(Site).where(Site.owner_id == owner_id).order_by(Site.created_at)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_owner(self, owner_id: uuid.UUID) -> int:
        stmt = select(func.count()).select_from(Site).where(Site.owner_id == owner_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def exists_by_slug(self, slug: str) -> bool:
        result = await self.session.execute(select(Site.id).where(Site.slug == slug).limit(1))
        return result.scalar_one_or_none() is not None

    async def exists_by_id(self, site_id: uuid.UUID) -> bool:
        result = await self.session.execute(select(Site.id).where(Site.id == site_id))
        return result.scalar_one_or_none() is not None

    async def _commit(self, site: Site) -> None:
        # read before commit: rollback expires the instance
        slug = site.slug
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            # SQLite: "UNIQUE constraint failed: sites.slug"; PostgreSQL: "sites_slug_key"
            if "slug" in str(e.orig):
                raise SlugTakenError(slug) from e
            raise
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(site)


class InMemorySiteRepository:
    """Site repository keeping detached copies in a dict (development and tests)"""

    def __init__(self):
        self.sites: Dict[uuid.UUID, Site] = {}

    @staticmethod
    def _copy(site: Site) -> Site:
        return Site(**{column.key: getattr(site, column.key) for column in Site.__table__.columns})

    def _check_slug(self, site: Site) -> None:
        if any(s.slug == site.slug and s.id != site.id for s in self.sites.values()):
            raise SlugTakenError(site.slug)

    async def create(self, site: Site) -> Site:
        if site.id is None:
            site.id = uuid.uuid4()
        self._check_slug(site)
        self.sites[site.id] = self._copy(site)
        return self._copy(site)

    async def update(self, site: Site) -> Site:
        self._check_slug(site)
        self.sites[site.id] = self._copy(site)
        return self._copy(site)

    async def delete(self, site_id: uuid.UUID) -> None:
        self.sites.pop(site_id, None)

    async def get_by_id(self, site_id: uuid.UUID) -> Optional[Site]:
        site = self.sites.get(site_id)
        return self._copy(site) if site else None

    async def get_by_slug(self, slug: str) -> Optional[Site]:
        site = next((s for s in self.sites.values() if s.slug == slug), None)
        return self._copy(site) if site else None

    async def get_by_owner(self, owner_id: uuid.UUID) -> List[Site]:
        owned = sorted((s for s in self.sites.values() if s.owner_id == owner_id), key=lambda s: s.created_at)
        return [self._copy(s) for s in owned]

    async def count_by_owner(self, owner_id: uuid.UUID) -> int:
        return sum(1 for s in self.sites.values() if s.owner_id == owner_id)

    async def exists_by_slug(self, slug: str) -> bool:
        return any(s.slug == slug for s in self.sites.values())

    async def exists_by_id(self, site_id: uuid.UUID) -> bool:
        return site_id in self.sites

    def get_count(self) -> int:
        """Get total site count"""
        return len(self.sites)
