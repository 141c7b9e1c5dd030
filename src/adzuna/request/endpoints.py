# src/adzuna/request/endpoints.py
"""
One request builder per Adzuna route.

All builders share `RequestBuilder` (URL assembly, auth, fetch). The setters are
grouped in small mixins and every route only mixes in the ones Adzuna accepts for it,
e.g. `months()` exists on HistoryRequest only and `what_or()` on SearchRequest only.

Setters mutate the builder and return it, so calls chain:

    client.search().what("data engineer").location("UK").location("London").fetch()
"""

from __future__ import annotations
from typing import TYPE_CHECKING, ClassVar, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel

from adzuna.enums import Country, SortBy, SortDirection
from adzuna.io.http import build_url, get_model
from adzuna.models import (
    Categories,
    HistoricalSalary,
    JobGeoData,
    JobSearchResults,
    SalaryHistogram,
    TopCompanies,
    Version,
)
from adzuna.request.parameters import Parameters

if TYPE_CHECKING:
    from typing import Self

    from adzuna.client import Client

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class RequestBuilder(Generic[ResponseT]):
    endpoint: ClassVar[str]
    response_model: ClassVar[Type[BaseModel]]
    # False for /version, which lives outside /jobs/{country}
    country_scoped: ClassVar[bool] = True

    def __init__(self, client: Client) -> None:
        self.client = client
        self.parameters = Parameters()
        self.search_country: Optional[str] = (
            Country.UNITED_STATES.code if self.country_scoped else None
        )

    def request_path(self) -> str:
        if self.search_country is None:
            return f"/{self.endpoint}"
        return f"/jobs/{self.search_country}/{self.endpoint}"

    def url(self) -> str:
        return build_url(self.request_path())

    def query_params(self) -> Dict[str, str]:
        params = {"app_id": self.client.app_id, "app_key": self.client.app_key}
        params.update(self.parameters.to_query())
        return params

    def fetch(self) -> ResponseT:
        """
        Send the request and return the decoded reply.

        Can be called again; it simply re-sends the same request.
        """
        return get_model(
            self.url(),
            self.query_params(),
            self.response_model,
            http_client=self.client.http_client,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.request_path()} {self.parameters.to_query()}>"


# ---- Setter groups ------------------------------------------------------------

class _CountryMixin:
    def country(self, country: Country) -> Self:
        """Filter with a country of interest."""
        self.search_country = Country(country).code
        return self


class _LocationMixin:
    def location(self, location: str) -> Self:
        """
        Narrow by one more level of a location, in the form of LocationDetail.area.

        Up to 8 levels; extra calls are ignored.
        """
        self.parameters.add_location(location)
        return self


class _CategoryMixin:
    def category(self, category: str) -> Self:
        """Filter with a category tag, as returned by the categories endpoint."""
        self.parameters.category = category
        return self


class _WhatMixin:
    def what(self, what: str) -> Self:
        """Filter by keywords. Multiple terms may be space separated."""
        self.parameters.what = what
        return self


# ---- Endpoints ----------------------------------------------------------------

class VersionRequest(RequestBuilder[Version]):
    endpoint = "version"
    response_model = Version
    country_scoped = False


class CategoriesRequest(_CountryMixin, RequestBuilder[Categories]):
    endpoint = "categories"
    response_model = Categories


class HistogramRequest(
    _CountryMixin, _WhatMixin, _LocationMixin, _CategoryMixin, RequestBuilder[SalaryHistogram]
):
    endpoint = "histogram"
    response_model = SalaryHistogram


class TopCompaniesRequest(
    _CountryMixin, _WhatMixin, _LocationMixin, _CategoryMixin, RequestBuilder[TopCompanies]
):
    endpoint = "top_companies"
    response_model = TopCompanies


class GeodataRequest(_CountryMixin, _LocationMixin, _CategoryMixin, RequestBuilder[JobGeoData]):
    endpoint = "geodata"
    response_model = JobGeoData


class HistoryRequest(
    _CountryMixin, _LocationMixin, _CategoryMixin, RequestBuilder[HistoricalSalary]
):
    endpoint = "history"
    response_model = HistoricalSalary

    def months(self, months: int) -> Self:
        """Number of months back to retrieve data for."""
        self.parameters.months = months
        return self


class SearchRequest(
    _CountryMixin, _WhatMixin, _LocationMixin, _CategoryMixin, RequestBuilder[JobSearchResults]
):
    endpoint = "search"
    response_model = JobSearchResults

    def __init__(self, client: Client) -> None:
        super().__init__(client)
        self.search_page = 1

    def request_path(self) -> str:
        return f"{super().request_path()}/{self.search_page}"

    def page(self, page: int) -> Self:
        """Results page, starting at 1. Values below 1 are ignored."""
        if page > 0:
            self.search_page = page
        return self

    def what_and(self, what_and: str) -> Self:
        """All of these keywords must be found."""
        self.parameters.what_and = what_and
        return self

    def what_phrase(self, what_phrase: str) -> Self:
        """This exact phrase must appear in the title or description."""
        self.parameters.what_phrase = what_phrase
        return self

    def what_or(self, what_or: str) -> Self:
        """Any of these keywords may be found."""
        self.parameters.what_or = what_or
        return self

    def what_exclude(self, what_exclude: str) -> Self:
        self.parameters.what_exclude = what_exclude
        return self

    def title_only(self, title_only: str) -> Self:
        """Keywords searched in the title only."""
        self.parameters.title_only = title_only
        return self

    def where(self, where: str) -> Self:
        """Geographic centre of the search: place name, postcode, etc."""
        self.parameters.where = where
        return self

    def distance(self, distance: int) -> Self:
        """Radius in km around `where`. Adzuna defaults to 5."""
        self.parameters.distance = distance
        return self

    def company(self, company: str) -> Self:
        """Canonical company name, as in Company.canonical_name."""
        self.parameters.company = company
        return self

    def results_per_page(self, results_per_page: int) -> Self:
        if results_per_page > 0:
            self.parameters.results_per_page = results_per_page
        return self

    def max_days_old(self, max_days_old: int) -> Self:
        self.parameters.max_days_old = max_days_old
        return self

    def salary_min(self, salary_min: int) -> Self:
        self.parameters.salary_min = salary_min
        return self

    def salary_max(self, salary_max: int) -> Self:
        self.parameters.salary_max = salary_max
        return self

    def salary_include_unknown(self) -> Self:
        """Keep jobs without a salary when filtering on salary."""
        self.parameters.salary_include_unknown = True
        return self

    def full_time(self) -> Self:
        self.parameters.full_time = True
        return self

    def part_time(self) -> Self:
        self.parameters.part_time = True
        return self

    def contract(self) -> Self:
        self.parameters.contract = True
        return self

    def permanent(self) -> Self:
        self.parameters.permanent = True
        return self

    def sort_by(self, sort_by: SortBy) -> Self:
        self.parameters.sort_by = SortBy(sort_by)
        return self

    def sort_dir(self, sort_dir: SortDirection) -> Self:
        self.parameters.sort_dir = SortDirection(sort_dir)
        return self
