"""Site request/response models (DTO)"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from site_service.models.enums import Currency, Language, SiteStatus


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase, serializes camelCase"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


REQUIRED_MESSAGES = {
    "name": "Site name is required",
    "currency": "Currency is required",
    "language": "Language is required",
    "config": "Config is required",
    "status": "Status is required",
}


def require_text(value: str, info: ValidationInfo) -> str:
    if not value.strip():
        raise PydanticCustomError("blank", REQUIRED_MESSAGES[info.field_name])
    return value


class CreateSiteRequest(CamelModel):
    name: str = Field(..., max_length=255)
    slug: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    currency: str = Field(..., max_length=10)
    language: str = Field(..., max_length=10)
    config: str = Field(..., description="Site configuration as JSON text")

    @field_validator("name", "currency", "language", "config")
    @classmethod
    def check_required(cls, value: str, info: ValidationInfo) -> str:
        return require_text(value, info)


class UpdateSiteRequest(CamelModel):
    """Partial update; only fields the client actually sent are considered."""

    name: Optional[str] = Field(None, max_length=255)
    slug: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    currency: Optional[str] = Field(None, max_length=10)
    language: Optional[str] = Field(None, max_length=10)
    config: Optional[str] = None

    def provided(self, field: str) -> Optional[Any]:
        """Value of ``field`` if the client sent it, else None.

        An explicit null is treated the same as an absent field.
        """
        if field not in self.model_fields_set:
            return None
        return getattr(self, field)

    def provided_text(self, field: str) -> Optional[str]:
        """Like ``provided`` but blank strings count as absent."""
        value = self.provided(field)
        if value is None or not value.strip():
            return None
        return value


class UpdateSiteStatusRequest(CamelModel):
    status: str

    @field_validator("status")
    @classmethod
    def check_required(cls, value: str, info: ValidationInfo) -> str:
        return require_text(value, info)


class SiteResponse(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: UUID
    name: str
    slug: str
    description: Optional[str] = None
    currency: Currency
    language: Language
    status: SiteStatus
    owner_id: UUID
    config: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SiteSlugResponse(CamelModel):
    slug: str


class SlugAvailabilityResponse(CamelModel):
    slug: str
    available: bool


class AlternativeSlugSuggestion(CamelModel):
    original_slug: str
    suggested_slug: str
    message: str


class LanguagesResponse(CamelModel):
    languages: list[str]
    count: int


class CurrenciesResponse(CamelModel):
    currencies: list[str]
    count: int


class OwnerSiteCountResponse(CamelModel):
    owner_id: UUID
    count: int


class ErrorResponse(CamelModel):
    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    errors: Optional[dict[str, str]] = None
