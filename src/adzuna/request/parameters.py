# src/adzuna/request/parameters.py
"""
The bag of optional query-string parameters shared by every endpoint.

Everything starts unset; `to_query()` only emits what was explicitly set.
Adzuna wants a hierarchical location as separate keys location0..location7,
so locations are kept as an ordered list and expanded at serialization time.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, List, Optional

from adzuna.enums import SortBy, SortDirection

MAX_LOCATIONS = 8


@dataclass
class Parameters:
    # keyword filters
    what: Optional[str] = None
    what_and: Optional[str] = None
    what_phrase: Optional[str] = None
    what_or: Optional[str] = None
    what_exclude: Optional[str] = None
    title_only: Optional[str] = None

    # place filters
    where: Optional[str] = None
    locations: List[str] = field(default_factory=list)
    distance: Optional[int] = None

    category: Optional[str] = None
    company: Optional[str] = None

    results_per_page: Optional[int] = None
    max_days_old: Optional[int] = None
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    months: Optional[int] = None

    # flags: sent as "1" when True, omitted otherwise
    salary_include_unknown: bool = False
    full_time: bool = False
    part_time: bool = False
    contract: bool = False
    permanent: bool = False

    sort_by: Optional[SortBy] = None
    sort_dir: Optional[SortDirection] = None

    def add_location(self, location: str) -> bool:
        """Append one location level. Returns False (and drops it) once all 8 slots are used."""
        if len(self.locations) >= MAX_LOCATIONS:
            return False
        self.locations.append(location)
        return True

    def to_query(self) -> Dict[str, str]:
        out: Dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "locations":
                for i, loc in enumerate(value):
                    out[f"location{i}"] = loc
            elif value is None or value is False:
                continue
            elif value is True:
                out[f.name] = "1"
            elif isinstance(value, Enum):
                out[f.name] = value.value
            else:
                out[f.name] = str(value)
        return out
