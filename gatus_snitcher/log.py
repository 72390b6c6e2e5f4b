"""Structured logging setup.

Usage:
    from gatus_snitcher.log import get_logger
    logger = get_logger("client")
    logger.info("report_sent", http_status=200)

Inside a GitHub Actions job the output is rendered as workflow commands so
errors and warnings show up as annotations on the run. Pass ``notice=True``
to turn an info line into a ``::notice::`` annotation.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

_COMMANDS = {
    "critical": "error",
    "error": "error",
    "warning": "warning",
    "debug": "debug",
}


def _normalize_log_event(_logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Normalize logs to: timestamp, level, service, msg, context."""
    if "msg" not in event_dict and "event" in event_dict:
        event_dict["msg"] = event_dict.pop("event")

    reserved = {"timestamp", "level", "service", "msg", "context"}
    context = event_dict.get("context")
    if not isinstance(context, dict):
        context = {} if context is None else {"value": context}

    extras = {}
    for key in list(event_dict.keys()):
        if key not in reserved:
            extras[key] = event_dict.pop(key)

    if extras:
        context.update(extras)
    event_dict["context"] = context

    return event_dict


def escape_command_data(text: str) -> str:
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def render_github_command(_logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]) -> str:
    """Render a normalized event as a GitHub workflow command line."""
    level = event_dict.get("level", "info")
    context = dict(event_dict.get("context") or {})
    notice = context.pop("notice", False)

    text = str(event_dict.get("msg", ""))
    if context:
        text += " " + " ".join(f"{key}={value}" for key, value in context.items())

    command = _COMMANDS.get(level)
    if command is None and notice:
        command = "notice"
    if command is None:
        return text
    return f"::{command}::{escape_command_data(text)}"


def _pick_renderer(log_format: str) -> Any:
    fmt = (log_format or "auto").lower()
    if fmt == "auto":
        if os.environ.get("GITHUB_ACTIONS") == "true":
            fmt = "github"
        elif not sys.stdout.isatty():
            fmt = "json"
        else:
            fmt = "console"

    if fmt == "github":
        return render_github_command
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(level: str = "INFO", log_format: str = "auto") -> None:
    """Configure structlog for workflow commands, JSON or console output."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            _normalize_log_event,
            _pick_renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, (level or "INFO").upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


_initialized = False


def get_logger(service_name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with the component name."""
    global _initialized
    if not _initialized:
        from gatus_snitcher.config import ActionInputs

        inputs = ActionInputs()
        setup_logging(inputs.log_level, inputs.log_format)
        _initialized = True

    return structlog.get_logger(service=service_name)
