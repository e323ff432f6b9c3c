"""Validation of the site configuration JSON document"""

import logging
from typing import Optional

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from site_service.core.exceptions import InvalidConfigError
from site_service.models.site_config import REQUIRED_MESSAGES, SiteConfig

logger = logging.getLogger(__name__)

_ALIAS_MESSAGES = {
    SiteConfig.model_fields[name].alias: message for name, message in REQUIRED_MESSAGES.items()
}


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error["loc"])
    message = error["msg"]
    if error["type"] == "missing":
        message = _ALIAS_MESSAGES.get(location, message)
    return f"{location}: {message}"


class SiteConfigValidator:
    """Parses config JSON into ``SiteConfig`` and enforces its required fields."""

    def validate_and_parse(self, json_config: Optional[str]) -> SiteConfig:
        """
        Validate and parse site configuration JSON.

        Args:
            json_config: JSON text

        Returns:
            Parsed SiteConfig

        Raises:
            InvalidConfigError: blank input, malformed JSON, missing or blank
                required fields, or an empty values list
        """
        if json_config is None or not json_config.strip():
            raise InvalidConfigError("Site configuration JSON cannot be null or empty")

        try:
            config = SiteConfig.model_validate_json(json_config)
        except ValidationError as e:
            errors = e.errors()
            if any(err["type"] in ("json_invalid", "model_type") for err in errors):
                logger.error(f"Failed to parse site configuration JSON: {e}")
                raise InvalidConfigError(f"Invalid JSON format: {errors[0]['msg']}") from e
            message = ", ".join(_describe(err) for err in errors)
            logger.warning(f"Site configuration validation failed: {message}")
            raise InvalidConfigError(f"Site configuration validation failed: {message}") from e

        if not config.values:
            raise InvalidConfigError("Values list cannot be empty")
        return config

    def to_json(self, config: SiteConfig) -> str:
        try:
            return config.model_dump_json(by_alias=True)
        except PydanticSerializationError as e:
            logger.error(f"Failed to convert SiteConfig to JSON: {e}")
            raise InvalidConfigError(f"Failed to convert configuration to JSON: {e}") from e

    def is_valid(self, json_config: Optional[str]) -> bool:
        try:
            self.validate_and_parse(json_config)
        except InvalidConfigError:
            return False
        return True
