"""REST API routes for Site Service"""

import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Header, Query, Response, status

from site_service.api.deps import get_site_service
from site_service.models.site import (
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
from site_service.services.site_service import SiteService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sites",
    tags=["sites"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Site not found"}}


@router.post("", response_model=SiteResponse, status_code=status.HTTP_201_CREATED)
async def create_site(
    request: CreateSiteRequest,
    owner_id: UUID = Header(..., alias="X-Owner-Id"),
    service: SiteService = Depends(get_site_service),
):
    """Create a new site owned by the caller (X-Owner-Id header)"""
    logger.info(f"Received request to create site: {request.name}")
    return await service.create_site(request, owner_id)


@router.get("", response_model=List[SiteResponse])
async def get_sites_by_owner(
    owner_id: UUID = Query(..., alias="ownerId", description="Owner ID"),
    service: SiteService = Depends(get_site_service),
):
    """Get all sites owned by an owner"""
    return await service.get_sites_by_owner(owner_id)


# Static routes MUST come before parameterized routes

@router.get("/count", response_model=OwnerSiteCountResponse)
async def count_sites_by_owner(
    owner_id: UUID = Query(..., alias="ownerId", description="Owner ID"),
    service: SiteService = Depends(get_site_service),
):
    """Number of sites owned by an owner"""
    count = await service.count_sites_by_owner(owner_id)
    return OwnerSiteCountResponse(owner_id=owner_id, count=count)


@router.get("/suggest-slug", response_model=AlternativeSlugSuggestion)
async def suggest_alternative_slug(
    slug: str = Query(..., description="Requested slug"),
    service: SiteService = Depends(get_site_service),
):
    """Suggest an alternative slug if the requested one is taken"""
    return await service.suggest_alternative_slug(slug)


@router.get("/check-slug", response_model=SlugAvailabilityResponse)
async def check_slug_availability(
    slug: str = Query(..., description="Slug to check"),
    service: SiteService = Depends(get_site_service),
):
    """Check if a slug is available"""
    available = await service.is_slug_available(slug)
    return SlugAvailabilityResponse(slug=slug, available=available)


@router.get("/languages", response_model=LanguagesResponse)
async def get_all_languages():
    """All supported language codes"""
    languages = SiteService.list_languages()
    return LanguagesResponse(languages=languages, count=len(languages))


@router.get("/currencies", response_model=CurrenciesResponse)
async def get_all_currencies():
    """All supported currency codes"""
    currencies = SiteService.list_currencies()
    return CurrenciesResponse(currencies=currencies, count=len(currencies))


@router.get("/slug/{slug}", response_model=SiteResponse, responses=_NOT_FOUND)
async def get_site_by_slug(slug: str, service: SiteService = Depends(get_site_service)):
    """Get single site by slug"""
    return await service.get_site_by_slug(slug)


@router.get("/{site_id}", response_model=SiteResponse, responses=_NOT_FOUND)
async def get_site(site_id: UUID, service: SiteService = Depends(get_site_service)):
    """Get single site by ID"""
    return await service.get_site_by_id(site_id)


@router.get("/{site_id}/slug", response_model=SiteSlugResponse, responses=_NOT_FOUND)
async def get_site_slug(site_id: UUID, service: SiteService = Depends(get_site_service)):
    """Get only the slug of a site"""
    return await service.get_site_slug(site_id)


@router.patch("/{site_id}", response_model=SiteResponse, responses=_NOT_FOUND)
async def update_site(
    site_id: UUID,
    request: UpdateSiteRequest,
    service: SiteService = Depends(get_site_service),
):
    """
    Update site fields (name, slug, description, currency, language, config)

    Fields missing from the body are left unchanged.
    """
    return await service.update_site(site_id, request)


@router.patch("/{site_id}/status", response_model=SiteResponse, responses=_NOT_FOUND)
async def update_site_status(
    site_id: UUID,
    request: UpdateSiteStatusRequest,
    service: SiteService = Depends(get_site_service),
):
    """Update only the status of a site"""
    return await service.update_site_status(site_id, request.status)


@router.delete("/{site_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
async def delete_site(site_id: UUID, service: SiteService = Depends(get_site_service)):
    """Delete a site"""
    logger.info(f"Received request to delete site: {site_id}")
    await service.delete_site(site_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
