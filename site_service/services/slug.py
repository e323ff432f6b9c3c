"""Slug generation and normalization"""

import re
import unicodedata
from typing import Optional

from site_service.core.clock import MillisClock, current_millis
from site_service.core.exceptions import InvalidInputError

_NON_SLUG = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATORS = re.compile(r"[\s_]+")
_DASHES = re.compile(r"-+")


class SlugNormalizer:
    """Turns free text into a lowercase, dash-separated slug.

    Output only contains ``[a-z0-9-]`` with no leading, trailing or doubled
    dashes. Text that normalizes to nothing (e.g. only symbols) falls back
    to ``site-<epoch millis>``, which is the one non-deterministic branch;
    pass ``clock`` to pin it.
    """

    def __init__(self, clock: Optional[MillisClock] = None):
        self.clock = clock or current_millis

    def generate(self, text: Optional[str]) -> str:
        """Derive a slug from a display name."""
        if text is None or not text.strip():
            raise InvalidInputError("Text cannot be null or blank")
        return self.normalize(text)

    def normalize(self, slug: Optional[str]) -> str:
        if slug is None or not slug.strip():
            raise InvalidInputError("Slug cannot be null or blank")

        # NFD splits accents off their letters so they get stripped below
        normalized = unicodedata.normalize("NFD", slug)
        normalized = _NON_SLUG.sub("", normalized)
        normalized = _SEPARATORS.sub("-", normalized.strip())
        normalized = _DASHES.sub("-", normalized).strip("-").lower()

        if not normalized:
            normalized = f"site-{self.clock()}"
        return normalized
