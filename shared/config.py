"""
Environment-based configuration for the storefront search audit.

Values are read from environment variables with defaults that point at the
public storefront the audit was written for. Local runs can keep overrides
in a `.env` file; the CLI loads it with python-dotenv before calling
`get_config()`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Optional

Environment = Literal["local", "dev", "staging", "prod"]
Viewport = Literal["desktop", "mobile"]

DEFAULT_BASE_URL = "https://www.webstaurantstore.com/"
DEFAULT_SEARCH_TERM = "stainless steel table"
DEFAULT_AUDIT_KEYWORD = "table"
DEFAULT_IMPLICIT_WAIT_MS = 10_000
MIN_IMPLICIT_WAIT_MS = 1  # Playwright treats a 0 ms timeout as "wait forever"
MAX_IMPLICIT_WAIT_MS = 60_000


@dataclass(frozen=True)
class AppConfig:
    """
    Top-level configuration for an audit run.

    One instance is built at startup and passed down explicitly; components
    never read the environment themselves.
    """

    environment: Environment
    log_level: str

    # Optional file path for JSON logs; stdout is used as well when log_stdout.
    log_file: Optional[str]
    log_stdout: bool

    base_url: str
    search_term: str
    audit_keyword: str

    # How long the driver waits for an element before reporting it absent.
    implicit_wait_ms: int
    headless: bool
    viewport: Viewport

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Construct configuration from environment variables."""

        environment = os.getenv("APP_ENV", "local")
        if environment not in {"local", "dev", "staging", "prod"}:
            raise ValueError(f"Unsupported APP_ENV value: {environment!r}")

        viewport = os.getenv("VIEWPORT", "desktop").strip().lower()
        if viewport not in {"desktop", "mobile"}:
            raise ValueError(f"Unsupported VIEWPORT value: {viewport!r}")

        def _bool_env(name: str, default: bool) -> bool:
            raw = (os.getenv(name) or str(default)).strip().lower()
            return raw in ("true", "1", "yes")

        def _implicit_wait_ms() -> int:
            raw = os.getenv("IMPLICIT_WAIT_MS", str(DEFAULT_IMPLICIT_WAIT_MS)).strip()
            try:
                wait_ms = int(raw)
            except ValueError:
                return DEFAULT_IMPLICIT_WAIT_MS
            return max(MIN_IMPLICIT_WAIT_MS, min(MAX_IMPLICIT_WAIT_MS, wait_ms))

        return cls(
            environment=environment,  # type: ignore[arg-type]
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            log_stdout=_bool_env("LOG_STDOUT", True),
            base_url=os.getenv("STOREFRONT_BASE_URL", DEFAULT_BASE_URL),
            search_term=os.getenv("SEARCH_TERM", DEFAULT_SEARCH_TERM),
            audit_keyword=os.getenv("AUDIT_KEYWORD", DEFAULT_AUDIT_KEYWORD),
            implicit_wait_ms=_implicit_wait_ms(),
            headless=_bool_env("HEADLESS", True),
            viewport=viewport,  # type: ignore[arg-type]
        )


def get_config() -> AppConfig:
    """
    Helper to obtain the current configuration.

    Long-running callers should build one `AppConfig` at startup and pass it
    explicitly instead of calling this repeatedly.
    """

    return AppConfig.from_env()
