"""Domain exceptions raised by the site service.

Services raise these to signal rejected requests. The handlers in
``api/errors.py`` turn them into the standard error body
``{timestamp, status, error, message, path}``.
"""

from typing import Any


class SiteServiceError(Exception):
    """Base class for all site service errors."""

    status_code: int = 400
    error: str = "Bad Request"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(SiteServiceError):
    """Malformed input, e.g. a blank slug or name."""


class InvalidConfigError(SiteServiceError):
    """Site configuration JSON is missing, malformed or incomplete."""


class InvalidEnumError(SiteServiceError):
    """Unknown currency, language or status token."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value}")


class SlugTakenError(SiteServiceError):
    """Another site already uses the slug."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"Slug already taken: {slug}")


class InvalidTransitionError(SiteServiceError):
    """Status change not allowed from the current status."""

    def __init__(self, current: Any, target: Any) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot update status from {current} to {target}")


class NotFoundError(SiteServiceError):
    status_code = 404
    error = "Not Found"

    def __init__(self, entity: str, field: str, identifier: Any) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found with {field}: {identifier}")


class StorageError(SiteServiceError):
    """The underlying store failed; never retried."""

    status_code = 500
    error = "Internal Server Error"
