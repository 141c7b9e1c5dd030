import json

import httpx
import pytest

from adzuna.client import Client


class StubServer:
    """Records requests and answers every one with the same canned reply."""

    def __init__(self):
        self.requests = []
        self.status = 200
        self.body = b"{}"
        self.error = None

    def reply(self, status=200, payload=None, text=None):
        self.status = status
        if text is not None:
            self.body = text.encode()
        else:
            self.body = json.dumps(payload if payload is not None else {}).encode()

    def fail_with(self, error):
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(f"stubbed failure for {request.url}", request=request)
        return httpx.Response(self.status, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def server():
    return StubServer()


@pytest.fixture
def client(server):
    with httpx.Client(transport=httpx.MockTransport(server)) as http:
        yield Client("test-id", "test-key", http_client=http)


def make_job(i, **overrides):
    job = {
        "__CLASS__": "Adzuna::API::Response::Job",
        "id": str(4000000000 + i),
        "title": f"Software Engineer {i}",
        "description": "Build and ship things.",
        "redirect_url": f"https://www.adzuna.com/land/ad/{i}",
        "created": "2025-09-26T07:20:13Z",
        "adref": "eyJhbGciOiJIUzI1NiJ9",
        "latitude": 30.2672,
        "longitude": -97.7431,
        "category": {"tag": "it-jobs", "label": "IT Jobs"},
        "location": {"area": ["US", "Texas", "Travis County", "Austin"], "display_name": "Austin, Travis County"},
        "company": {"display_name": "Acme Corp"},
        "salary_min": 120000,
        "salary_max": 150000.5,
        "salary_is_predicted": "0",
        "contract_time": "full_time",
    }
    job.update(overrides)
    return job


@pytest.fixture
def job_factory():
    return make_job
