"""Enumerations stored on a site"""

from enum import Enum
from typing import Any, Optional


class LookupEnum(str, Enum):
    """String enum resolvable from client tokens, case-insensitively."""

    @classmethod
    def lookup(cls, value: Any) -> Optional["LookupEnum"]:
        """Return the member named ``value`` (any casing), or None if there is none."""
        if not isinstance(value, str):
            return None
        return cls.__members__.get(value.upper())

    @classmethod
    def names(cls) -> list[str]:
        return [member.name for member in cls]


class Currency(LookupEnum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CAD = "CAD"
    AUD = "AUD"
    CHF = "CHF"
    CNY = "CNY"


class Language(LookupEnum):
    EN = "EN"
    FR = "FR"
    DE = "DE"
    ES = "ES"
    IT = "IT"
    PT = "PT"
    NL = "NL"
    JA = "JA"
    ZH = "ZH"  # Simplified


class SiteStatus(LookupEnum):
    """Site lifecycle state"""

    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    DISABLED = "DISABLED"

    def can_transition_to(self, target: "SiteStatus") -> bool:
        """Published or disabled sites never go back to draft."""
        return not (target is SiteStatus.DRAFT and self in (SiteStatus.ACTIVE, SiteStatus.DISABLED))
