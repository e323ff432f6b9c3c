"""GraphQL queries for Site Service"""

from typing import List, Optional
from uuid import UUID

import strawberry

from site_service.core.exceptions import NotFoundError
from site_service.schema.types import Site, SlugAvailability, SlugSuggestion
from site_service.services.site_service import SiteService


@strawberry.type
class Query:
    """Site service queries"""

    @strawberry.field(description="Get single site by ID")
    async def site(self, id: strawberry.ID, info: strawberry.Info) -> Optional[Site]:
        service = info.context["service"]
        try:
            return Site.from_response(await service.get_site_by_id(UUID(str(id))))
        except NotFoundError:
            return None

    @strawberry.field(description="Get single site by slug")
    async def site_by_slug(self, slug: str, info: strawberry.Info) -> Optional[Site]:
        service = info.context["service"]
        try:
            return Site.from_response(await service.get_site_by_slug(slug))
        except NotFoundError:
            return None

    @strawberry.field(description="Get all sites owned by an owner")
    async def sites_by_owner(self, owner_id: strawberry.ID, info: strawberry.Info) -> List[Site]:
        service = info.context["service"]
        sites = await service.get_sites_by_owner(UUID(str(owner_id)))
        return [Site.from_response(s) for s in sites]

    @strawberry.field(description="Check if a slug is available")
    async def check_slug(self, slug: str, info: strawberry.Info) -> SlugAvailability:
        service = info.context["service"]
        return SlugAvailability(slug=slug, available=await service.is_slug_available(slug))

    @strawberry.field(description="Suggest an alternative slug if the requested one is taken")
    async def suggest_slug(self, slug: str, info: strawberry.Info) -> SlugSuggestion:
        service = info.context["service"]
        return SlugSuggestion.from_response(await service.suggest_alternative_slug(slug))

    @strawberry.field(description="Supported language codes")
    def languages(self) -> List[str]:
        return SiteService.list_languages()

    @strawberry.field(description="Supported currency codes")
    def currencies(self) -> List[str]:
        return SiteService.list_currencies()
