"""Dashboard settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_BASE_URL = "http://127.0.0.1:8000"
DEFAULT_DB_PATH = Path(".prox/prox.db")
DEFAULT_SESSION_PATH = Path(".prox/session.json")
DEFAULT_MOBILE_BREAKPOINT = 1024
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0


@dataclass(slots=True)
class DashboardSettings:
    """Runtime configuration for the dashboard and the projects API."""

    api_base_url: str = DEFAULT_API_BASE_URL
    db_path: Path = DEFAULT_DB_PATH
    session_path: Path = DEFAULT_SESSION_PATH
    mobile_breakpoint: int = DEFAULT_MOBILE_BREAKPOINT
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DashboardSettings:
        env = os.environ if environ is None else environ
        return cls(
            api_base_url=env.get("PROX_API_BASE_URL", DEFAULT_API_BASE_URL),
            db_path=Path(env.get("PROX_DB_PATH", str(DEFAULT_DB_PATH))),
            session_path=Path(env.get("PROX_SESSION_PATH", str(DEFAULT_SESSION_PATH))),
            mobile_breakpoint=int(env.get("PROX_MOBILE_BREAKPOINT", DEFAULT_MOBILE_BREAKPOINT)),
            request_timeout_seconds=float(
                env.get("PROX_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS)
            ),
        )
