from .config_validator import SiteConfigValidator
from .site_service import SiteService, SiteStore
from .slug import SlugNormalizer

__all__ = ["SiteConfigValidator", "SiteService", "SiteStore", "SlugNormalizer"]
