"""GraphQL mutations for Site Service"""

from uuid import UUID

import strawberry

from site_service.models.site import CreateSiteRequest
from site_service.schema.types import CreateSiteInput, Site


@strawberry.type
class Mutation:
    """Site service mutations"""

    @strawberry.mutation(description="Create a site in DRAFT status")
    async def create_site(
        self, owner_id: strawberry.ID, input: CreateSiteInput, info: strawberry.Info
    ) -> Site:
        service = info.context["service"]
        request = CreateSiteRequest(
            name=input.name,
            slug=input.slug,
            description=input.description,
            currency=input.currency,
            language=input.language,
            config=input.config,
        )
        return Site.from_response(await service.create_site(request, UUID(str(owner_id))))

    @strawberry.mutation(description="Change the lifecycle status of a site")
    async def update_site_status(self, id: strawberry.ID, status: str, info: strawberry.Info) -> Site:
        service = info.context["service"]
        return Site.from_response(await service.update_site_status(UUID(str(id)), status))

    @strawberry.mutation(description="Delete a site")
    async def delete_site(self, id: strawberry.ID, info: strawberry.Info) -> bool:
        service = info.context["service"]
        await service.delete_site(UUID(str(id)))
        return True
