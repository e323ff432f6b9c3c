from .enums import Currency, Language, SiteStatus
from .site_config import SiteConfig
from .site import (
    AlternativeSlugSuggestion,
    CreateSiteRequest,
    CurrenciesResponse,
    ErrorResponse,
    LanguagesResponse,
    OwnerSiteCountResponse,
    SiteResponse,
    SiteSlugResponse,
    SlugAvailabilityResponse,
    UpdateSiteRequest,
    UpdateSiteStatusRequest,
)

__all__ = [
    "Currency",
    "Language",
    "SiteStatus",
    "SiteConfig",
    "AlternativeSlugSuggestion",
    "CreateSiteRequest",
    "CurrenciesResponse",
    "ErrorResponse",
    "LanguagesResponse",
    "OwnerSiteCountResponse",
    "SiteResponse",
    "SiteSlugResponse",
    "SlugAvailabilityResponse",
    "UpdateSiteRequest",
    "UpdateSiteStatusRequest",
]
