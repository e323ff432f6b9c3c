"""Site configuration document embedded in a site as JSON text"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


REQUIRED_MESSAGES = {
    "banner_url": "Banner URL is required",
    "name": "Name is required",
    "title": "Title is required",
    "subtitle": "Subtitle is required",
    "hero_description": "Hero description is required",
    "logo_url": "Logo URL is required",
    "about_portrait_one_url": "About portrait one URL is required",
    "about_landscape_url": "About landscape URL is required",
    "about_portrait_two_url": "About portrait two URL is required",
    "history": "History is required",
    "values": "Values list is required",
    "contact_heading": "Contact heading is required",
    "contact_description": "Contact description is required",
    "contact_details": "Contact details is required",
    "primary_color": "Primary color is required",
    "secondary_color": "Secondary color is required",
}


class SiteConfig(BaseModel):
    """Presentational content of a site; JSON keys are camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "bannerUrl": "https://cdn.example.com/banner.jpg",
                "name": "Maison Lumière",
                "title": "Handmade candles",
                "subtitle": "Since 1998",
                "heroDescription": "Small-batch candles poured in Lyon.",
                "logoUrl": "https://cdn.example.com/logo.png",
                "aboutPortraitOneUrl": "https://cdn.example.com/p1.jpg",
                "aboutLandscapeUrl": "https://cdn.example.com/l.jpg",
                "aboutPortraitTwoUrl": "https://cdn.example.com/p2.jpg",
                "history": "Founded by two sisters.",
                "values": ["Craft", "Sustainability"],
                "contactHeading": "Get in touch",
                "contactDescription": "We answer within a day.",
                "contactDetails": "hello@example.com",
                "primaryColor": "#1a1a1a",
                "secondaryColor": "#f5e6c8",
            }
        },
    )

    banner_url: str
    name: str
    title: str
    subtitle: str
    hero_description: str
    logo_url: str
    about_portrait_one_url: str
    about_landscape_url: str
    about_portrait_two_url: str
    history: str
    values: list[str]
    contact_heading: str
    contact_description: str
    contact_details: str
    contact_extra_note: Optional[str] = None
    primary_color: str
    secondary_color: str

    @field_validator(*(f for f in REQUIRED_MESSAGES if f != "values"))
    @classmethod
    def check_not_blank(cls, value: str, info: ValidationInfo) -> str:
        if not value.strip():
            raise PydanticCustomError("blank", REQUIRED_MESSAGES[info.field_name])
        return value
