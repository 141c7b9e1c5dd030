# src/adzuna/client.py
"""
Entry point of the library.

    client = Client(app_id, app_key)
    jobs = client.search().what("backend").where("austin").full_time().fetch()

The client only holds the two credentials (and optionally a shared httpx.Client);
every method returns a fresh builder, so builders can be used independently.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

import httpx

from adzuna.config import load_credentials
from adzuna.request.endpoints import (
    CategoriesRequest,
    GeodataRequest,
    HistogramRequest,
    HistoryRequest,
    SearchRequest,
    TopCompaniesRequest,
    VersionRequest,
)


@dataclass(frozen=True)
class Client:
    app_id: str
    app_key: str = field(repr=False)
    # Reused for every fetch when given (pooling, custom transports); otherwise
    # each fetch opens and closes its own connection.
    http_client: Optional[httpx.Client] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_env(cls, http_client: Optional[httpx.Client] = None) -> "Client":
        creds = load_credentials()
        return cls(creds.app_id, creds.app_key, http_client=http_client)

    def api_version(self) -> VersionRequest:
        return VersionRequest(self)

    def categories(self) -> CategoriesRequest:
        return CategoriesRequest(self)

    def histogram(self) -> HistogramRequest:
        return HistogramRequest(self)

    def top_companies(self) -> TopCompaniesRequest:
        return TopCompaniesRequest(self)

    def geodata(self) -> GeodataRequest:
        return GeodataRequest(self)

    def history(self) -> HistoryRequest:
        return HistoryRequest(self)

    def search(self) -> SearchRequest:
        return SearchRequest(self)
