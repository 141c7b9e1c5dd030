# src/adzuna/cli.py
"""
Command-line interface for the Adzuna client.

One command per endpoint; every option maps onto one builder setter.
Output is JSON on stdout so it can be piped into jq & co.
"""

from dotenv import load_dotenv
load_dotenv()  # picks up ADZUNA_APP_ID / ADZUNA_APP_KEY from a .env in the working dir

import json
import logging
from typing import List, Optional

import typer
from pydantic import BaseModel

from adzuna.client import Client
from adzuna.enums import Country, SortBy, SortDirection
from adzuna.errors import AdzunaAPIError, AdzunaRequestError, MissingCredentialsError
from adzuna.pipeline.normalize import flatten_jobs
from adzuna.request.endpoints import RequestBuilder

# Typer app instance for CLI commands
app = typer.Typer(help="Query the Adzuna job search API")

COUNTRY_OPTION = typer.Option(Country.UNITED_STATES, "--country", "-c", help="Two-letter country code")
LOCATION_OPTION = typer.Option(
    None, "--location", "-l", help="Location level, repeat from broadest to finest (max 8)"
)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests to stderr")):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _client() -> Client:
    try:
        return Client.from_env()
    except MissingCredentialsError as e:
        raise SystemExit(str(e))


def _fetch(builder: RequestBuilder) -> BaseModel:
    try:
        return builder.fetch()
    except AdzunaAPIError as e:
        typer.echo(f"Adzuna API error: {e}", err=True)
        if e.api_error is not None and e.api_error.display:
            typer.echo(f"See {e.api_error.display}", err=True)
        raise typer.Exit(code=1)
    except AdzunaRequestError as e:
        typer.echo(f"Request failed: {e}", err=True)
        raise typer.Exit(code=1)


def _emit(model: BaseModel) -> None:
    typer.echo(model.model_dump_json(indent=2, exclude_none=True))


def _apply_locations(builder, locations: Optional[List[str]]):
    for loc in locations or []:
        builder.location(loc)
    return builder


@app.command()
def version():
    """Show the API and software version."""
    _emit(_fetch(_client().api_version()))


@app.command()
def categories(country: Country = COUNTRY_OPTION):
    """List the category tags usable with --category."""
    _emit(_fetch(_client().categories().country(country)))


@app.command()
def histogram(
    what: Optional[str] = typer.Option(None, help="Keywords"),
    country: Country = COUNTRY_OPTION,
    location: Optional[List[str]] = LOCATION_OPTION,
    category: Optional[str] = typer.Option(None, help="Category tag"),
):
    """Current distribution of live jobs by salary."""
    req = _client().histogram().country(country)
    if what:
        req.what(what)
    if category:
        req.category(category)
    _emit(_fetch(_apply_locations(req, location)))


@app.command()
def top_companies(
    what: Optional[str] = typer.Option(None, help="Keywords"),
    country: Country = COUNTRY_OPTION,
    location: Optional[List[str]] = LOCATION_OPTION,
    category: Optional[str] = typer.Option(None, help="Category tag"),
):
    """Companies with the most live ads."""
    req = _client().top_companies().country(country)
    if what:
        req.what(what)
    if category:
        req.category(category)
    _emit(_fetch(_apply_locations(req, location)))


@app.command()
def geodata(
    country: Country = COUNTRY_OPTION,
    location: Optional[List[str]] = LOCATION_OPTION,
    category: Optional[str] = typer.Option(None, help="Category tag"),
):
    """Number of live jobs per sub-location."""
    req = _client().geodata().country(country)
    if category:
        req.category(category)
    _emit(_fetch(_apply_locations(req, location)))


@app.command()
def history(
    months: Optional[int] = typer.Option(None, help="How many months back"),
    country: Country = COUNTRY_OPTION,
    location: Optional[List[str]] = LOCATION_OPTION,
    category: Optional[str] = typer.Option(None, help="Category tag"),
):
    """Average advertised salary per month."""
    req = _client().history().country(country)
    if months is not None:
        req.months(months)
    if category:
        req.category(category)
    _emit(_fetch(_apply_locations(req, location)))


@app.command()
def search(
    what: Optional[str] = typer.Argument(None, help="Keywords, e.g. 'data engineer'"),
    country: Country = COUNTRY_OPTION,
    page: int = typer.Option(1, help="Results page (1-based)"),
    results_per_page: int = typer.Option(0, "--results-per-page", "-n", help="0 = Adzuna default"),
    where: Optional[str] = typer.Option(None, help="Place name or postcode"),
    distance: Optional[int] = typer.Option(None, help="Radius in km around --where"),
    location: Optional[List[str]] = LOCATION_OPTION,
    category: Optional[str] = typer.Option(None, help="Category tag"),
    company: Optional[str] = typer.Option(None, help="Canonical company name"),
    what_and: Optional[str] = typer.Option(None, "--what-and"),
    what_or: Optional[str] = typer.Option(None, "--what-or"),
    what_phrase: Optional[str] = typer.Option(None, "--what-phrase"),
    what_exclude: Optional[str] = typer.Option(None, "--what-exclude"),
    title_only: Optional[str] = typer.Option(None, "--title-only"),
    max_days_old: Optional[int] = typer.Option(None, "--max-days-old"),
    salary_min: Optional[int] = typer.Option(None, "--salary-min"),
    salary_max: Optional[int] = typer.Option(None, "--salary-max"),
    salary_include_unknown: bool = typer.Option(False, "--salary-include-unknown"),
    full_time: bool = typer.Option(False, "--full-time"),
    part_time: bool = typer.Option(False, "--part-time"),
    contract: bool = typer.Option(False, "--contract"),
    permanent: bool = typer.Option(False, "--permanent"),
    sort_by: Optional[SortBy] = typer.Option(None, "--sort-by"),
    sort_dir: Optional[SortDirection] = typer.Option(None, "--sort-dir"),
    raw: bool = typer.Option(False, "--raw", help="Print the full API reply instead of flat rows"),
):
    """
    Search job ads. Prints flat rows (id, title, company, url, ...) unless --raw.
    """
    req = _client().search().country(country).page(page).results_per_page(results_per_page)
    _apply_locations(req, location)

    # string / numeric filters: only the ones actually given
    setters = {
        req.what: what,
        req.where: where,
        req.distance: distance,
        req.category: category,
        req.company: company,
        req.what_and: what_and,
        req.what_or: what_or,
        req.what_phrase: what_phrase,
        req.what_exclude: what_exclude,
        req.title_only: title_only,
        req.max_days_old: max_days_old,
        req.salary_min: salary_min,
        req.salary_max: salary_max,
        req.sort_by: sort_by,
        req.sort_dir: sort_dir,
    }
    for setter, value in setters.items():
        if value is not None:
            setter(value)

    # flags
    for setter, enabled in (
        (req.salary_include_unknown, salary_include_unknown),
        (req.full_time, full_time),
        (req.part_time, part_time),
        (req.contract, contract),
        (req.permanent, permanent),
    ):
        if enabled:
            setter()

    results = _fetch(req)
    if raw:
        _emit(results)
        return

    typer.echo(json.dumps({
        "count": results.count,
        "mean": results.mean,
        "page": req.search_page,
        "jobs": flatten_jobs(results),
    }, indent=2))


if __name__ == "__main__":
    app()
