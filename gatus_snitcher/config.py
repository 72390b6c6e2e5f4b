"""Action inputs loaded from ``INPUT_*`` environment variables.

The Actions runner exposes every input as ``INPUT_<NAME>`` with the input
name upper-cased (``INPUT_BASE-URL``). Composite actions cannot export names
containing ``-`` from every shell, so the underscored spelling
(``INPUT_BASE_URL``) is accepted as well.

Usage:
    from gatus_snitcher.config import ActionInputs, resolve_config
    config = resolve_config(ActionInputs())
    print(config.base_url)

``ActionInputs`` holds the raw strings; ``resolve_config`` applies defaults,
coerces types and enforces required inputs, producing an immutable Config.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gatus_snitcher.errors import ConfigError
from gatus_snitcher.log import get_logger

MODE_START = "start"
MODE_REPORT = "report"
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"

DEFAULT_AUTH_HEADER = "Authorization"
DEFAULT_AUTH_SCHEME = "Bearer"
DEFAULT_ENDPOINT_PATH = "/api/v1/endpoints"
DEFAULT_ENDPOINT_SUFFIX = "/external"
DEFAULT_TIMEOUT_MS = 15000

_TRUE_TOKENS = {"1", "true", "yes", "y", "on"}


def _input(name: str, default: str | None = "") -> Any:
    return Field(
        default=default,
        validation_alias=AliasChoices(
            f"input_{name}", f"input_{name.replace('-', '_')}"
        ),
    )


class ActionInputs(BaseSettings):
    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
    )

    mode: str = _input("mode")
    timer_id: str = _input("timer-id")
    base_url: str = _input("base-url")
    group: str = _input("group")
    name: str = _input("name")
    token: str = _input("token")
    status: str = _input("status")
    duration: str = _input("duration")
    error_message: str = _input("error-message")
    auth_header: str = _input("auth-header")
    # None when the input is absent; "" explicitly disables the scheme prefix
    auth_scheme: str | None = _input("auth-scheme", default=None)
    endpoint_path: str = _input("endpoint-path")
    endpoint_suffix: str = _input("endpoint-suffix")
    timeout_ms: str = _input("timeout-ms")
    dry_run: str = _input("dry-run")
    extra_headers: str = _input("extra-headers")

    # --- General ---
    log_level: str = _input("log-level", default="INFO")
    log_format: str = _input("log-format", default="auto")  # auto|console|json|github


@dataclass(frozen=True)
class Config:
    """Validated configuration for one invocation."""

    mode: str
    group: str
    name: str
    base_url: str = ""
    token: str = ""
    status: str = STATUS_SUCCESS
    duration: str | None = None
    error_message: str | None = None
    auth_header: str = DEFAULT_AUTH_HEADER
    auth_scheme: str | None = DEFAULT_AUTH_SCHEME  # None sends the raw token
    endpoint_path: str = DEFAULT_ENDPOINT_PATH
    endpoint_suffix: str = DEFAULT_ENDPOINT_SUFFIX
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    dry_run: bool = False
    extra_headers_raw: str = ""
    timer_id: str | None = None


def parse_boolean(value: str | None, default: bool = False) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in _TRUE_TOKENS


def normalize_status(value: str) -> str:
    """Only the literal ``success`` counts as success.

    Upstream job statuses such as ``failure``, ``cancelled`` or ``skipped``
    all map to ``error``.
    """
    return STATUS_SUCCESS if value.strip().lower() == STATUS_SUCCESS else STATUS_ERROR


def _required(value: str, input_name: str) -> str:
    if not value:
        raise ConfigError(f"Input required and not supplied: {input_name}")
    return value


def _parse_timeout(value: str) -> int:
    if not value:
        return DEFAULT_TIMEOUT_MS
    try:
        timeout = int(value)
    except ValueError:
        raise ConfigError(f"Invalid timeout-ms: {value!r} is not an integer") from None
    if timeout <= 0:
        raise ConfigError(f"Invalid timeout-ms: {timeout} must be positive")
    return timeout


def _check_base_url(value: str) -> str:
    parts = urlsplit(value)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError(f"Invalid base-url: {value!r} is not an absolute http(s) URL")
    return value


def resolve_config(inputs: ActionInputs) -> Config:
    """Apply defaults and validation to the raw inputs."""
    raw = {
        field: value.strip() if isinstance(value, str) else value
        for field, value in inputs.model_dump().items()
    }

    mode_in = (raw["mode"] or MODE_REPORT).lower()
    if mode_in not in (MODE_START, MODE_REPORT):
        get_logger("config").warning("unknown_mode", mode=mode_in, using=MODE_REPORT)
    mode = MODE_START if mode_in == MODE_START else MODE_REPORT
    reporting = mode == MODE_REPORT

    base_url = _required(raw["base_url"], "base-url") if reporting else raw["base_url"]
    group = _required(raw["group"], "group")
    name = _required(raw["name"], "name")
    token = _required(raw["token"], "token") if reporting else raw["token"]
    if reporting:
        _check_base_url(base_url)

    auth_scheme = raw["auth_scheme"]
    if auth_scheme is None:
        auth_scheme = DEFAULT_AUTH_SCHEME
    elif auth_scheme == "":
        auth_scheme = None

    return Config(
        mode=mode,
        group=group,
        name=name,
        base_url=base_url,
        token=token,
        status=normalize_status(raw["status"] or STATUS_SUCCESS),
        duration=raw["duration"] or None,
        error_message=raw["error_message"] or None,
        auth_header=raw["auth_header"] or DEFAULT_AUTH_HEADER,
        auth_scheme=auth_scheme,
        endpoint_path=raw["endpoint_path"] or DEFAULT_ENDPOINT_PATH,
        endpoint_suffix=raw["endpoint_suffix"] or DEFAULT_ENDPOINT_SUFFIX,
        timeout_ms=_parse_timeout(raw["timeout_ms"]),
        dry_run=parse_boolean(raw["dry_run"]),
        extra_headers_raw=raw["extra_headers"],
        timer_id=raw["timer_id"] or None,
    )
