# src/adzuna/errors.py
"""
Exceptions raised by the client.

Two families, so callers can tell "Adzuna said no" from "we never got a usable answer":
- AdzunaAPIError: the server replied with a non-200 status (carries the status
  and, when the body was a proper envelope, the parsed ApiException).
- AdzunaRequestError: generic client-side failure with no meaningful status
  (network failure, or a 200 body we could not decode).
"""

from __future__ import annotations
from typing import Optional

from adzuna.models import ApiException


class AdzunaError(Exception):
    """Base class for everything this package raises."""


class MissingCredentialsError(AdzunaError):
    pass


class AdzunaRequestError(AdzunaError):
    # No HTTP status is meaningful for these
    http_status: Optional[int] = None


class AdzunaTransportError(AdzunaRequestError):
    """No response was obtained (DNS, connect, timeout, ...)."""


class AdzunaDecodeError(AdzunaRequestError):
    """HTTP 200, but the body does not match the expected model."""


class AdzunaAPIError(AdzunaError):
    def __init__(self, http_status: int, api_error: Optional[ApiException] = None):
        self.http_status = http_status
        self.api_error = api_error
        message = f"Adzuna returned HTTP {http_status}"
        if api_error is not None:
            message += f": {api_error.exception}"
            if api_error.doc:
                message += f" ({api_error.doc})"
        super().__init__(message)
