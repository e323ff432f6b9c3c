"""
Site Service

FastAPI service managing owner sites: slugs, JSON site configuration and
lifecycle status. Serves a REST API and a GraphQL (federation) endpoint.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from site_service.api import register_exception_handlers, router
from site_service.api.deps import get_memory_repository
from site_service.core.config import Settings, get_settings
from site_service.core.logging import setup_logger
from site_service.db.database import create_tables, dispose_engine, get_engine
from site_service.schema import create_graphql_router


settings = get_settings()
logger = setup_logger("site_service", "DEBUG" if settings.debug else settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Creates database tables on startup when the SQL backend is used.
    """
    settings = app.state.settings
    logger.info(f"🚀 {settings.service_name} starting up...")
    logger.info(f"📊 Environment: {settings.environment}")
    logger.info(f"🗄️ Repository backend: {settings.repository_backend}")
    if settings.repository_backend == "sql":
        await create_tables(get_engine(settings))
    yield
    if settings.repository_backend == "sql":
        await dispose_engine()
    logger.info(f"🛑 {settings.service_name} shutting down...")


def create_app(settings: Settings = settings) -> FastAPI:
    app = FastAPI(
        title="Site Service",
        description="Site management REST + GraphQL API",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)

    if settings.graphql_enabled:
        app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="/graphql")

    if settings.enable_metrics:
        Instrumentator().instrument(app).expose(app)

    @app.get("/health")
    async def health_check():
        health = {
            "status": "healthy",
            "service": settings.service_name,
            "backend": settings.repository_backend,
        }
        if settings.repository_backend == "memory":
            health["total_sites"] = get_memory_repository().get_count()
        return health

    @app.get("/")
    async def root():
        return {
            "service": settings.service_name,
            "version": "1.0.0",
            "graphql": "/graphql" if settings.graphql_enabled else None,
            "endpoints": [
                f"{settings.api_prefix}/sites",
                f"{settings.api_prefix}/sites/{{id}}",
                f"{settings.api_prefix}/sites/slug/{{slug}}",
                f"{settings.api_prefix}/sites/{{id}}/slug",
                f"{settings.api_prefix}/sites/{{id}}/status",
                f"{settings.api_prefix}/sites/count",
                f"{settings.api_prefix}/sites/suggest-slug",
                f"{settings.api_prefix}/sites/check-slug",
                f"{settings.api_prefix}/sites/languages",
                f"{settings.api_prefix}/sites/currencies",
            ],
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("site_service.main:app", host=settings.host, port=settings.port, reload=settings.debug)
