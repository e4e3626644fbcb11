"""Utility for logging trip requests when WL_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "WL_LOG_REQUESTS"


def should_log_requests() -> bool:
    """Check if request logging is enabled via the WL_LOG_REQUESTS environment variable."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def build_request_url(url: str, params: dict[str, Any] | None) -> str:
    """Build the full request URL with encoded query parameters, in insertion order."""
    if not params:
        return url
    query = urlencode({k: str(v) for k, v in params.items()})
    return f"{url}&{query}" if "?" in url else f"{url}?{query}"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log request details if WL_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional).
        headers: Request headers (optional, sensitive headers are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {build_request_url(url, params)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(_redact_sensitive_headers(headers), indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
