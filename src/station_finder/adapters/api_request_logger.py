"""Utility for logging dataset requests when SF_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via SF_LOG_REQUESTS environment variable."""
    return os.getenv("SF_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    status: int | None = None,
    detail: Any = None,
) -> None:
    """Log request details if SF_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.) or "READ" for local files.
        url: Request URL or file path.
        headers: Request headers (optional, sensitive headers are redacted).
        status: Response status code (optional).
        detail: Extra detail such as the number of entries received (optional).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(_redact_sensitive_headers(headers), indent=2)}")
    if status is not None:
        log_parts.append(f"Status: {status}")
    if detail is not None:
        log_parts.append(f"Detail: {detail}")

    logger.info("Dataset Request:\n" + "\n".join(log_parts))
