"""
Structured logging setup for the storefront search audit.

All runtime logging goes through structlog. Events are rendered as JSON
lines with an ISO timestamp and level, and carry whatever run context was
bound with `bind_run_context` (run id, search term, keyword, page number).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

import structlog


def _build_shared_processors() -> list[structlog.types.Processor]:
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        timestamper,
        structlog.processors.EventRenamer("message"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def _plain_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def configure_logging(
    level: int | str = logging.INFO,
    log_file: Optional[str] = None,
    log_stdout: bool = True,
) -> None:
    """
    Configure structlog and the standard logging module.

    Call once at process startup. Handlers on the root logger are replaced,
    so calling it again reconfigures rather than duplicates output.

    - When log_stdout is True (default), logs go to stdout.
    - When log_file is set, logs also go to that file (parent dir created).
    - If neither is enabled, stdout is used so the process never runs silent.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    if log_stdout:
        root.addHandler(_plain_handler(logging.StreamHandler(sys.stdout), level))

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(_plain_handler(logging.FileHandler(log_file, encoding="utf-8"), level))

    if not root.handlers:
        root.addHandler(_plain_handler(logging.StreamHandler(sys.stdout), level))

    structlog.configure(
        processors=_build_shared_processors(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Obtain a structured logger.

    Usage:
        from shared.logging import get_logger

        logger = get_logger(__name__)
        logger.info("audit.page_scanned", page=2, missing=0)
    """

    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_run_context(
    *,
    run_id: Optional[str] = None,
    search_term: Optional[str] = None,
    keyword: Optional[str] = None,
    scenario: Optional[str] = None,
    **extra: Any,
) -> Mapping[str, Any]:
    """
    Bind audit-run fields into the logging context.

    Keys with None values are dropped. Returns the mapping that was bound.
    """

    context: dict[str, Any] = {
        "run_id": run_id,
        "search_term": search_term,
        "keyword": keyword,
        "scenario": scenario,
        **extra,
    }
    filtered_context = {k: v for k, v in context.items() if v is not None}

    structlog.contextvars.bind_contextvars(**filtered_context)
    return filtered_context


def clear_run_context() -> None:
    """Drop every field bound with `bind_run_context`."""
    structlog.contextvars.clear_contextvars()


def reset_run_context(**fields: Any) -> Mapping[str, Any]:
    """
    Replace the bound context with `fields`, keeping only the run id.

    Scenarios call this on entry so fields bound by an earlier scenario in
    the same run (a keyword, say) do not leak into the next one.
    """

    run_id = structlog.contextvars.get_contextvars().get("run_id")
    structlog.contextvars.clear_contextvars()
    return bind_run_context(run_id=run_id, **fields)
