"""GraphQL types for Site Service"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID

import strawberry

from site_service.core.exceptions import NotFoundError
from site_service.models.site import AlternativeSlugSuggestion, SiteResponse

if TYPE_CHECKING:
    from strawberry.types import Info


@strawberry.federation.type(keys=["id"])
class Site:
    """Site GraphQL type with Federation support"""

    id: strawberry.ID
    name: str
    slug: str
    currency: str
    language: str
    status: str
    owner_id: strawberry.ID
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    config: Optional[str] = None

    @classmethod
    def from_response(cls, site: SiteResponse) -> "Site":
        """Create Site from a service response"""
        return cls(
            id=strawberry.ID(str(site.id)),
            name=site.name,
            slug=site.slug,
            description=site.description,
            currency=site.currency.value,
            language=site.language.value,
            status=site.status.value,
            owner_id=strawberry.ID(str(site.owner_id)),
            config=site.config,
            created_at=site.created_at,
            updated_at=site.updated_at,
        )

    @classmethod
    async def resolve_reference(cls, id: strawberry.ID, info: "Info") -> Optional["Site"]:
        """Resolve Federation reference"""
        service = info.context["service"]
        try:
            return cls.from_response(await service.get_site_by_id(UUID(str(id))))
        except NotFoundError:
            return None


@strawberry.type
class SlugSuggestion:
    original_slug: str
    suggested_slug: str
    message: str

    @classmethod
    def from_response(cls, suggestion: AlternativeSlugSuggestion) -> "SlugSuggestion":
        return cls(
            original_slug=suggestion.original_slug,
            suggested_slug=suggestion.suggested_slug,
            message=suggestion.message,
        )


@strawberry.type
class SlugAvailability:
    slug: str
    available: bool


@strawberry.input
class CreateSiteInput:
    name: str
    currency: str
    language: str
    config: str
    slug: Optional[str] = None
    description: Optional[str] = None
