# src/adzuna/models.py
"""
Typed models for the JSON bodies Adzuna returns, one per endpoint.

Validation is done by Pydantic: a 200 reply that is missing a required key
fails loudly instead of producing a half-empty object. Fields the API does not
always send are Optional. Unknown keys (e.g. Adzuna's "__CLASS__") are ignored.
"""

from __future__ import annotations
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from adzuna.enums import ContractTime, ContractType


class ApiException(BaseModel):
    """Error envelope Adzuna sends alongside non-200 replies."""

    # Machine-readable class of the exception, e.g. "AUTH_FAIL"
    exception: str
    # Human-readable message in English
    doc: Optional[str] = None
    # URL of the relevant documentation
    display: Optional[str] = None


class Version(BaseModel):
    """Reply of /version."""

    api_version: int
    software_version: str


class Category(BaseModel):
    # Value to pass to the `category` query parameter
    tag: str
    # Display label, e.g. "IT Jobs"
    label: str


class Categories(BaseModel):
    results: List[Category]


class Company(BaseModel):
    """
    A company as it appears in search results or on the top-companies board.

    `count` and `average_salary` are normally only present on statistics
    queries (top_companies), not on search results.
    """

    display_name: Optional[str] = None
    # Normalised name; can be fed back to search via `company(...)`
    canonical_name: Optional[str] = None
    count: Optional[int] = None
    average_salary: Optional[float] = None


class TopCompanies(BaseModel):
    # Ordered by number of ads in the database
    leaderboard: List[Company] = Field(default_factory=list)


class HistoricalSalary(BaseModel):
    # "YYYY-MM" -> average salary for that month
    month: Dict[str, float] = Field(default_factory=dict)


class SalaryHistogram(BaseModel):
    # lower bound of the salary bucket -> number of live ads in it
    histogram: Dict[str, int] = Field(default_factory=dict)


class LocationDetail(BaseModel):
    """
    A location, as a list of progressively finer areas, e.g.
    ["UK", "South East England", "Surrey", "Reigate"].

    The `area` entries can be passed back one by one to `location(...)`.
    """

    area: List[str] = Field(default_factory=list)
    display_name: Optional[str] = None


class LocationJobs(BaseModel):
    count: Optional[int] = None
    location: Optional[LocationDetail] = None


class JobGeoData(BaseModel):
    locations: List[LocationJobs] = Field(default_factory=list)


class Job(BaseModel):
    """A single advertisement from /search."""

    id: str
    title: str
    # Advertiser link; Adzuna's terms require sending users through it
    redirect_url: str
    # ISO 8601, e.g. "2025-09-26T07:20:13Z"
    created: Optional[str] = None
    # Truncated to 500 characters by Adzuna
    description: Optional[str] = None
    adref: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    category: Optional[Category] = None
    location: Optional[LocationDetail] = None
    company: Optional[Company] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    # True when Adzuna estimated the salary itself
    salary_is_predicted: bool = False
    contract_type: Optional[ContractType] = None
    contract_time: Optional[ContractTime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_text(cls, value):
        # Adzuna sends numeric ids as strings, but not always
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("salary_is_predicted", mode="before")
    @classmethod
    def _decode_flag(cls, value):
        # Sent as the literal "1" / "0", not a JSON boolean
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip() == "1"
        return value

    @field_validator("contract_type", "contract_time", mode="before")
    @classmethod
    def _unknown_as_none(cls, value, info):
        enum = ContractType if info.field_name == "contract_type" else ContractTime
        if value in [m.value for m in enum]:
            return value
        return None


class JobSearchResults(BaseModel):
    """Reply of /search/{page}."""

    results: List[Job]
    # Total number of matching ads (not just this page)
    count: int
    # Mean salary across all matches
    mean: Optional[float] = None
