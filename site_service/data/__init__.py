from .repository import InMemorySiteRepository, SqlSiteRepository

__all__ = ["InMemorySiteRepository", "SqlSiteRepository"]
