"""
Structured logging for aggregation runs.

Responsibilities:
- route structlog events through stdlib logging on stderr
- render one JSON object per event, keeping Bengali names readable
- hand out module loggers
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List

import structlog


def _processors() -> List[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=False),
        structlog.processors.format_exc_info,
        # constituency and symbol names stay as written, not \u escapes
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]


def configure_logging(level: str = "INFO") -> None:
    """
    Configure structlog for one run.

    Rules:
    - stdout is reserved for the CLI's own output; events go to stderr.
    - Unknown level names fall back to INFO.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=_processors(),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name)
