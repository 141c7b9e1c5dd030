import dataclasses
import logging

import httpx
import pytest

from adzuna.client import Client
from adzuna.enums import ContractTime, ContractType
from adzuna.errors import (
    AdzunaAPIError,
    AdzunaDecodeError,
    AdzunaRequestError,
    AdzunaTransportError,
)
from adzuna.models import Categories, JobSearchResults, Version


def test_search_returns_typed_results(client, server, job_factory):
    server.reply(payload={"count": 1234, "mean": 98765.43, "results": [job_factory(i) for i in range(7)]})

    results = client.search().what("software engineer").results_per_page(7).fetch()

    assert isinstance(results, JobSearchResults)
    assert len(results.results) == 7
    assert results.count == 1234
    assert results.mean == pytest.approx(98765.43)

    sent = server.last
    assert sent.method == "GET"
    assert sent.url.path == "/v1/api/jobs/us/search/1"
    assert sent.url.params["what"] == "software engineer"
    assert sent.url.params["results_per_page"] == "7"
    assert sent.url.params["app_id"] == "test-id"
    assert sent.url.params["app_key"] == "test-key"


def test_job_fields_are_decoded(client, server, job_factory):
    server.reply(payload={
        "count": 2,
        "results": [
            job_factory(1, salary_is_predicted="1", contract_type="permanent"),
            job_factory(2, contract_type="freelance", contract_time=None),
        ],
    })

    first, second = client.search().fetch().results

    assert first.salary_is_predicted is True
    assert first.salary_min == 120000.0
    assert first.contract_type is ContractType.PERMANENT
    assert first.contract_time is ContractTime.FULL_TIME
    assert first.location.area[-1] == "Austin"
    assert first.category.tag == "it-jobs"
    assert first.company.display_name == "Acme Corp"

    assert second.salary_is_predicted is False
    assert second.contract_type is None
    assert second.contract_time is None


def test_version(client, server):
    server.reply(payload={"api_version": 1, "software_version": "1.0.0"})
    version = client.api_version().fetch()
    assert version == Version(api_version=1, software_version="1.0.0")
    assert dict(server.last.url.params) == {"app_id": "test-id", "app_key": "test-key"}


def test_categories(client, server):
    server.reply(payload={"results": [{"tag": "it-jobs", "label": "IT Jobs", "__CLASS__": "Category"}]})
    categories = client.categories().fetch()
    assert isinstance(categories, Categories)
    assert categories.results[0].label == "IT Jobs"


def test_statistics_endpoints(client, server):
    server.reply(payload={"histogram": {"20000": 12, "40000": 31}})
    assert client.histogram().what("excel").fetch().histogram["40000"] == 31

    server.reply(payload={"month": {"2024-01": 51234.12, "2024-02": 52000}})
    assert client.history().months(2).fetch().month["2024-02"] == 52000.0

    server.reply(payload={"leaderboard": [{"canonical_name": "acme", "count": 50, "average_salary": 81000.5}]})
    board = client.top_companies().what("frontend").fetch().leaderboard
    assert board[0].average_salary == pytest.approx(81000.5)

    server.reply(payload={"locations": [{"count": 9, "location": {"area": ["US", "Texas"], "display_name": "Texas"}}]})
    assert client.geodata().fetch().locations[0].location.display_name == "Texas"


def test_401_carries_status_and_envelope(client, server):
    server.reply(401, {
        "exception": "ImmediateHttpResponse",
        "doc": "Authorisation failed",
        "display": "https://developer.adzuna.com/docs/authentication",
    })

    with pytest.raises(AdzunaAPIError) as excinfo:
        client.search().what("engineer").fetch()

    err = excinfo.value
    assert err.http_status == 401
    assert err.api_error is not None
    assert err.api_error.exception == "ImmediateHttpResponse"
    assert err.api_error.display.startswith("https://")
    assert "401" in str(err)


def test_error_without_envelope_still_has_status(client, server):
    server.reply(502, text="<html>Bad Gateway</html>")
    with pytest.raises(AdzunaAPIError) as excinfo:
        client.categories().fetch()
    assert excinfo.value.http_status == 502
    assert excinfo.value.api_error is None


def test_missing_required_field_is_a_decode_error(client, server, job_factory):
    server.reply(payload={"results": [job_factory(1)]})  # no "count"

    with pytest.raises(AdzunaDecodeError) as excinfo:
        client.search().fetch()

    assert isinstance(excinfo.value, AdzunaRequestError)
    assert not isinstance(excinfo.value, AdzunaAPIError)
    assert excinfo.value.http_status is None


def test_malformed_json_is_a_decode_error(client, server):
    server.reply(200, text="{not json")
    with pytest.raises(AdzunaDecodeError):
        client.api_version().fetch()


def test_transport_failure(client, server):
    server.fail_with(httpx.ConnectError)
    with pytest.raises(AdzunaTransportError) as excinfo:
        client.geodata().fetch()
    assert excinfo.value.http_status is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_fetch_twice_sends_the_same_request(client, server):
    server.reply(payload={"api_version": 1, "software_version": "x"})
    req = client.api_version()
    req.fetch()
    req.fetch()
    assert len(server.requests) == 2
    assert server.requests[0].url == server.requests[1].url


def test_app_key_is_not_logged(client, server, caplog):
    server.reply(payload={"api_version": 1, "software_version": "x"})
    with caplog.at_level(logging.DEBUG, logger="adzuna.io.http"):
        client.api_version().fetch()
    assert "test-id" in caplog.text
    assert "test-key" not in caplog.text


def test_client_without_http_client_uses_its_own(monkeypatch):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"api_version": 1, "software_version": "x"})

    real_client = httpx.Client

    def patched(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", patched)

    version = Client("id", "key").api_version().fetch()
    assert version.api_version == 1
    assert seen[0].headers["User-Agent"].startswith("adzuna-client/")


def test_client_is_immutable():
    client = Client("id", "s3cret")
    with pytest.raises(dataclasses.FrozenInstanceError):
        client.app_id = "other"
    assert "s3cret" not in repr(client)
