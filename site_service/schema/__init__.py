"""GraphQL schema"""

import strawberry
from fastapi import Depends
from strawberry.fastapi import GraphQLRouter

from site_service.api.deps import get_site_service
from site_service.schema.types import Site
from site_service.schema.queries import Query
from site_service.schema.mutations import Mutation
from site_service.services.site_service import SiteService


schema = strawberry.federation.Schema(
    query=Query,
    mutation=Mutation,
    types=[Site],
)


async def get_context(service: SiteService = Depends(get_site_service)):
    """Request-scoped context: each request gets its own SiteService"""
    return {"service": service}


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter:
    return GraphQLRouter(schema, graphiql=graphiql, context_getter=get_context)


__all__ = ["schema", "create_graphql_router", "Site", "Query", "Mutation"]
