"""Site management use cases"""

import logging
from typing import List, Optional, Protocol
from uuid import UUID

from site_service.core.clock import Clock, MillisClock, current_millis, utc_now
from site_service.core.exceptions import (
    InvalidConfigError,
    InvalidEnumError,
    InvalidTransitionError,
    NotFoundError,
    SiteServiceError,
    SlugTakenError,
    StorageError,
)
from site_service.db.models import Site
from site_service.models.enums import Currency, Language, LookupEnum, SiteStatus
from site_service.models.site import (
    AlternativeSlugSuggestion,
    CreateSiteRequest,
    SiteResponse,
    SiteSlugResponse,
    UpdateSiteRequest,
)
from site_service.services.config_validator import SiteConfigValidator
from site_service.services.slug import SlugNormalizer

logger = logging.getLogger(__name__)

MAX_SLUG_GENERATION_ATTEMPTS = 100
MAX_SLUG_LENGTH = 255
DEFAULT_STATUS = SiteStatus.DRAFT


class SiteStore(Protocol):
    """Persistence operations the service relies on"""

    async def create(self, site: Site) -> Site: ...
    async def update(self, site: Site) -> Site: ...
    async def delete(self, site_id: UUID) -> None: ...
    async def get_by_id(self, site_id: UUID) -> Optional[Site]: ...
    async def get_by_slug(self, slug: str) -> Optional[Site]: ...
    async def get_by_owner(self, owner_id: UUID) -> List[Site]: ...
    async def count_by_owner(self, owner_id: UUID) -> int: ...
    async def exists_by_slug(self, slug: str) -> bool: ...
    async def exists_by_id(self, site_id: UUID) -> bool: ...


def _with_suffix(base_slug: str, suffix) -> str:
    # trim the base so the suffixed slug still fits the column
    head = base_slug[: MAX_SLUG_LENGTH - len(str(suffix)) - 1].rstrip("-")
    return f"{head}-{suffix}"


def resolve_enum(enum_cls: type[LookupEnum], field: str, value: Optional[str]) -> LookupEnum:
    member = enum_cls.lookup(value)
    if member is None:
        logger.warning(f"Invalid {field}: {value}")
        raise InvalidEnumError(field, value)
    return member


class SiteService:
    """Creates, updates, transitions and deletes sites on top of a SiteStore."""

    def __init__(
        self,
        repository: SiteStore,
        slugs: Optional[SlugNormalizer] = None,
        config_validator: Optional[SiteConfigValidator] = None,
        clock: Optional[Clock] = None,
        millis: Optional[MillisClock] = None,
        max_slug_attempts: int = MAX_SLUG_GENERATION_ATTEMPTS,
    ):
        self.repository = repository
        self.millis = millis or current_millis
        self.slugs = slugs or SlugNormalizer(self.millis)
        self.config_validator = config_validator or SiteConfigValidator()
        self.clock = clock or utc_now
        self.max_slug_attempts = max_slug_attempts

    async def create_site(self, request: CreateSiteRequest, owner_id: UUID) -> SiteResponse:
        logger.info(f"Creating site for owner: {owner_id}")

        if request.slug is None or not request.slug.strip():
            slug = self.slugs.generate(request.name)
            logger.debug(f"Generated slug from name: {slug}")
        else:
            slug = self.slugs.normalize(request.slug)

        await self._ensure_slug_free(slug)

        if not request.config:
            logger.warning("Config is empty")
            raise InvalidConfigError("Config is empty")
        self.config_validator.validate_and_parse(request.config)

        currency = resolve_enum(Currency, "currency", request.currency)
        language = resolve_enum(Language, "language", request.language)

        now = self.clock()
        site = Site(
            name=request.name,
            slug=slug,
            description=request.description,
            currency=currency,
            language=language,
            status=DEFAULT_STATUS,
            owner_id=owner_id,
            config=request.config,
            created_at=now,
            updated_at=now,
        )

        saved = await self._write(self.repository.create, site, "create site")
        logger.info(f"Site created successfully with ID: {saved.id}")
        return SiteResponse.model_validate(saved)

    async def get_site_by_id(self, site_id: UUID) -> SiteResponse:
        logger.debug(f"Fetching site with ID: {site_id}")
        return SiteResponse.model_validate(await self._get_site(site_id))

    async def get_site_by_slug(self, slug: str) -> SiteResponse:
        logger.debug(f"Fetching site with slug: {slug}")
        site = await self.repository.get_by_slug(slug)
        if site is None and slug and slug.strip():
            site = await self.repository.get_by_slug(self.slugs.normalize(slug))
        if site is None:
            raise NotFoundError("Site", "slug", slug)
        return SiteResponse.model_validate(site)

    async def get_site_slug(self, site_id: UUID) -> SiteSlugResponse:
        logger.debug(f"Fetching slug for site with ID: {site_id}")
        site = await self._get_site(site_id)
        return SiteSlugResponse(slug=site.slug)

    async def update_site(self, site_id: UUID, request: UpdateSiteRequest) -> SiteResponse:
        logger.info(f"Updating site: {site_id}")
        site = await self._get_site(site_id)

        name = request.provided_text("name")
        if name is not None:
            site.name = name

        slug = request.provided_text("slug")
        if slug is not None:
            normalized = self.slugs.normalize(slug)
            if normalized != site.slug:
                await self._ensure_slug_free(normalized)
            site.slug = normalized

        description = request.provided("description")
        if description is not None:
            site.description = description

        currency = request.provided_text("currency")
        if currency is not None:
            site.currency = resolve_enum(Currency, "currency", currency)

        language = request.provided_text("language")
        if language is not None:
            site.language = resolve_enum(Language, "language", language)

        config = request.provided("config")
        if config is not None:
            if not config:
                logger.warning("Config is empty")
                raise InvalidConfigError("Config cannot be empty")
            self.config_validator.validate_and_parse(config)
            site.config = config

        site.updated_at = self.clock()

        updated = await self._write(self.repository.update, site, "update site")
        logger.info(f"Site updated successfully with ID: {site_id}")
        return SiteResponse.model_validate(updated)

    async def update_site_status(self, site_id: UUID, status: str) -> SiteResponse:
        logger.info(f"Updating status for site: {site_id} to {status}")
        site = await self._get_site(site_id)

        new_status = resolve_enum(SiteStatus, "status", status)
        current = SiteStatus(site.status)
        if not current.can_transition_to(new_status):
            logger.warning(f"Rejected status change for site {site_id}: {current.value} -> {new_status.value}")
            raise InvalidTransitionError(current.value, new_status.value)

        site.status = new_status
        site.updated_at = self.clock()

        updated = await self._write(self.repository.update, site, "update site status")
        logger.info(f"Site status updated successfully for site: {site_id}")
        return SiteResponse.model_validate(updated)

    async def get_sites_by_owner(self, owner_id: UUID) -> List[SiteResponse]:
        logger.debug(f"Fetching sites for owner: {owner_id}")
        sites = await self.repository.get_by_owner(owner_id)
        return [SiteResponse.model_validate(site) for site in sites]

    async def count_sites_by_owner(self, owner_id: UUID) -> int:
        return await self.repository.count_by_owner(owner_id)

    async def suggest_alternative_slug(self, requested_slug: str) -> AlternativeSlugSuggestion:
        logger.debug(f"Suggesting alternative slug for: {requested_slug}")
        normalized = self.slugs.normalize(requested_slug)
        suggested = await self._find_available_slug(normalized)

        if suggested == normalized:
            message = f"The slug '{normalized}' is available."
        else:
            message = (
                f"The slug '{normalized}' is already taken. "
                f"Suggested alternative: '{suggested}'"
            )
        return AlternativeSlugSuggestion(original_slug=normalized, suggested_slug=suggested, message=message)

    async def is_slug_available(self, slug: str) -> bool:
        return not await self.repository.exists_by_slug(self.slugs.normalize(slug))

    async def delete_site(self, site_id: UUID) -> None:
        logger.info(f"Deleting site with ID: {site_id}")
        if not await self.repository.exists_by_id(site_id):
            logger.warning(f"Site not found with ID: {site_id}")
            raise NotFoundError("Site", "ID", site_id)

        await self._write(self.repository.delete, site_id, "delete site")
        logger.info(f"Site deleted successfully with ID: {site_id}")

    @staticmethod
    def list_languages() -> List[str]:
        return Language.names()

    @staticmethod
    def list_currencies() -> List[str]:
        return Currency.names()

    async def _get_site(self, site_id: UUID) -> Site:
        site = await self.repository.get_by_id(site_id)
        if site is None:
            raise NotFoundError("Site", "ID", site_id)
        return site

    async def _ensure_slug_free(self, slug: str) -> None:
        # Advisory only; the store's unique constraint has the final word
        if await self.repository.exists_by_slug(slug):
            logger.warning(f"Slug already taken: {slug}")
            raise SlugTakenError(slug)

    async def _find_available_slug(self, base_slug: str) -> str:
        if not await self.repository.exists_by_slug(base_slug):
            return base_slug

        for i in range(1, self.max_slug_attempts + 1):
            candidate = _with_suffix(base_slug, i)
            if not await self.repository.exists_by_slug(candidate):
                return candidate

        return _with_suffix(base_slug, self.millis())

    async def _write(self, operation, argument, action: str):
        """Run a store write, reporting unexpected failures as StorageError."""
        try:
            return await operation(argument)
        except SiteServiceError:
            raise
        except Exception as e:
            logger.error(f"Error trying to {action}", exc_info=True)
            raise StorageError(f"Failed to {action} due to database error") from e
