from __future__ import annotations

from dataclasses import dataclass
import os

from adzuna.errors import MissingCredentialsError


ENV_APP_ID = "ADZUNA_APP_ID"
ENV_APP_KEY = "ADZUNA_APP_KEY"


@dataclass(frozen=True)
class Credentials:
    app_id: str
    app_key: str


def load_credentials() -> Credentials:
    # Reads the process environment only; the CLI loads .env before calling this.
    app_id = os.getenv(ENV_APP_ID, "").strip()
    app_key = os.getenv(ENV_APP_KEY, "").strip()
    if not app_id or not app_key:
        raise MissingCredentialsError(f"Set {ENV_APP_ID} and {ENV_APP_KEY} env vars (in .env).")
    return Credentials(app_id=app_id, app_key=app_key)
