# src/adzuna/io/http.py

"""
The only place this package touches the network.

- Build full URLs from the API root.
- Do ONE GET per call (no retries, transport default timeout).
- Turn the reply into a validated model, or raise one of the errors in adzuna.errors.
"""

from __future__ import annotations
import logging
from typing import Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from adzuna.errors import AdzunaAPIError, AdzunaDecodeError, AdzunaTransportError
from adzuna.models import ApiException

LOGGER = logging.getLogger(__name__)

ROOT_URL = "https://api.adzuna.com/v1/api"

# Never logged
_SECRET_PARAMS = {"app_key"}

ModelT = TypeVar("ModelT", bound=BaseModel)


# ---- Internal helpers ---------------------------------------------------------

def build_url(path: str) -> str:
    """
    Join the API root and an endpoint path such as "/jobs/us/search/1".
    """
    return f"{ROOT_URL}{path}"


def _default_headers() -> Dict[str, str]:
    return {
        "User-Agent": "adzuna-client/0.1",
        "Accept": "application/json",
    }


def _redacted(params: Dict[str, str]) -> Dict[str, str]:
    return {k: ("***" if k in _SECRET_PARAMS else v) for k, v in params.items()}


def _send(url: str, params: Dict[str, str], http_client: Optional[httpx.Client]) -> httpx.Response:
    if http_client is not None:
        return http_client.get(url, params=params, headers=_default_headers())
    with httpx.Client(headers=_default_headers()) as client:
        return client.get(url, params=params)


def _parse_api_error(resp: httpx.Response) -> Optional[ApiException]:
    # Best effort: plenty of proxies answer with HTML instead of the envelope.
    try:
        return ApiException.model_validate_json(resp.content)
    except ValidationError:
        return None


# ---- Public API ---------------------------------------------------------------

def get_model(
    url: str,
    params: Dict[str, str],
    model: Type[ModelT],
    *,
    http_client: Optional[httpx.Client] = None,
) -> ModelT:
    """
    GET `url` with `params` and validate a 200 body into `model`.

    Raises:
    - AdzunaTransportError: no response at all.
    - AdzunaAPIError: any status other than 200 (with the parsed envelope if there was one).
    - AdzunaDecodeError: 200, but the body is not valid JSON or does not fit `model`.
    """
    LOGGER.debug("GET %s params=%s", url, _redacted(params))
    try:
        resp = _send(url, params, http_client)
    except httpx.HTTPError as exc:
        LOGGER.warning("Request to %s failed: %s", url, exc)
        raise AdzunaTransportError(f"Request to {url} failed: {exc}") from exc

    if resp.status_code != httpx.codes.OK:
        api_error = _parse_api_error(resp)
        LOGGER.warning(
            "Adzuna answered %s for %s (%s)",
            resp.status_code,
            url,
            api_error.exception if api_error else "no error envelope",
        )
        raise AdzunaAPIError(resp.status_code, api_error)

    try:
        return model.model_validate_json(resp.content)
    except ValidationError as exc:
        LOGGER.warning("Could not decode %s reply from %s: %s", model.__name__, url, exc)
        raise AdzunaDecodeError(f"Unexpected {model.__name__} body from {url}") from exc
