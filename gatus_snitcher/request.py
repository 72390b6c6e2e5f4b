"""Assembly of the Gatus external endpoint URL and request headers.

The endpoint has the shape::

    {base-url}/{endpoint-path}/{quote(key)}{endpoint-suffix}?success=..&error=..&duration=..
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from urllib.parse import quote

import httpx

from gatus_snitcher.config import STATUS_ERROR, STATUS_SUCCESS, Config
from gatus_snitcher.environment import JobEnvironment

# Characters encodeURIComponent leaves alone besides the unreserved set
_URI_COMPONENT_SAFE = "!*'()"


@dataclass(frozen=True)
class ReportRequest:
    url: str
    status: str
    headers: dict[str, str] = field(default_factory=dict)


def join_url(base: str, path: str | None) -> str:
    if not path:
        return base
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def build_endpoint(config: Config, key: str) -> str:
    """Endpoint URL without the query string."""
    segment = quote(key, safe=_URI_COMPONENT_SAFE) + config.endpoint_suffix
    return join_url(join_url(config.base_url, config.endpoint_path), segment)


def resolve_duration(
    config: Config,
    environment: JobEnvironment,
    timer_var: str,
    now_ms: Callable[[], int],
) -> str | None:
    """Explicit duration if given, else the time elapsed since ``start`` mode.

    A stored timestamp that is missing, not numeric or not positive is
    ignored, and so is a negative elapsed time (clock moved backwards).
    """
    if config.duration:
        return config.duration

    stored = environment.get(timer_var)
    if not stored:
        return None
    try:
        start_ms = float(stored)
    except ValueError:
        return None
    if not math.isfinite(start_ms) or start_ms <= 0:
        return None

    elapsed = now_ms() - start_ms
    if elapsed < 0:
        return None
    return f"{int(elapsed)}ms"


def build_report_url(
    endpoint: str,
    status: str,
    error_message: str | None = None,
    duration: str | None = None,
) -> str:
    url = httpx.URL(endpoint).copy_set_param(
        "success", "true" if status == STATUS_SUCCESS else "false"
    )
    if status == STATUS_ERROR and error_message:
        url = url.copy_set_param("error", error_message)
    if duration:
        url = url.copy_set_param("duration", duration)
    return str(url)


def build_headers(config: Config, extra: dict[str, str]) -> dict[str, str]:
    """Auth header first; extra headers may override it."""
    if config.auth_scheme:
        auth_value = f"{config.auth_scheme} {config.token}"
    else:
        auth_value = config.token

    headers = {config.auth_header: auth_value}
    headers.update(extra)
    return headers
