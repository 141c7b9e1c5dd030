# src/adzuna/enums.py
"""
Closed sets of values Adzuna accepts in URLs and query strings.

Each member's value is the exact string sent on the wire.
"""

from __future__ import annotations
from enum import Enum


class Country(str, Enum):
    """Countries served by Adzuna, valued by their URL path code."""

    UNITED_KINGDOM = "gb"
    UNITED_STATES = "us"
    AUSTRIA = "at"
    AUSTRALIA = "au"
    BELGIUM = "be"
    BRAZIL = "br"
    CANADA = "ca"
    SWITZERLAND = "ch"
    GERMANY = "de"
    SPAIN = "es"
    FRANCE = "fr"
    INDIA = "in"
    ITALY = "it"
    MEXICO = "mx"
    NETHERLANDS = "nl"
    NEW_ZEALAND = "nz"
    POLAND = "pl"
    RUSSIA = "ru"
    SINGAPORE = "sg"
    SOUTH_AFRICA = "za"

    @property
    def code(self) -> str:
        return self.value


class SortBy(str, Enum):
    DEFAULT = "default"
    HYBRID = "hybrid"
    DATE = "date"
    SALARY = "salary"
    RELEVANCE = "relevance"


class SortDirection(str, Enum):
    UP = "up"
    DOWN = "down"


class ContractType(str, Enum):
    PERMANENT = "permanent"
    CONTRACT = "contract"


class ContractTime(str, Enum):
    FULL_TIME = "full_time"
    PART_TIME = "part_time"
