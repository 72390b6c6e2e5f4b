"""Gatus snitcher: report a CI job's result to a Gatus external endpoint.

Two modes, usually run as two steps of the same job:

  start   record the current time in the job environment
  report  POST success/error (plus duration and error message) to Gatus

Usage:
    python -m gatus_snitcher

Inputs are read from ``INPUT_*`` environment variables (see action.yml).
Outputs: ``status``, ``endpoint`` and ``http-status``.
"""

from __future__ import annotations

import asyncio
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass

from gatus_snitcher.client import GatusClient
from gatus_snitcher.config import MODE_START, STATUS_SUCCESS, ActionInputs, Config, resolve_config
from gatus_snitcher.environment import GithubActionsEnvironment, JobEnvironment
from gatus_snitcher.errors import ConfigError, HeaderParseError, SnitcherError
from gatus_snitcher.headers import parse_extra_headers, redact_headers
from gatus_snitcher.keys import derive_key, timer_variable
from gatus_snitcher.log import get_logger
from gatus_snitcher.request import (
    ReportRequest,
    build_endpoint,
    build_headers,
    build_report_url,
    resolve_duration,
)


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class Outcome:
    status: str
    endpoint: str = ""
    http_status: int = 0


class Snitcher:
    """One invocation of the reporter."""

    name = "gatus-snitcher"

    def __init__(
        self,
        config: Config,
        environment: JobEnvironment,
        client: GatusClient | None = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.config = config
        self.environment = environment
        self.client = client or GatusClient(timeout_ms=config.timeout_ms)
        self.clock = clock
        self.logger = get_logger(self.name)

        self.key = derive_key(config.group, config.name)
        self.timer_var = timer_variable(config.timer_id or self.key)

    async def run(self) -> Outcome:
        try:
            extra_headers = parse_extra_headers(self.config.extra_headers_raw)
        except HeaderParseError as e:
            raise ConfigError(f"Invalid extra-headers: {e}") from e

        if self.config.mode == MODE_START:
            outcome = self.start_timer()
        else:
            outcome = await self.report(extra_headers)

        self.publish(outcome)
        return outcome

    def start_timer(self) -> Outcome:
        started = self.clock()
        self.environment.export(self.timer_var, str(started))
        self.logger.info(
            f"Timer started ({self.timer_var}) at {started}", notice=True
        )
        return Outcome(status=STATUS_SUCCESS)

    def build_request(self, extra_headers: dict[str, str]) -> ReportRequest:
        duration = resolve_duration(
            self.config, self.environment, self.timer_var, self.clock
        )
        url = build_report_url(
            build_endpoint(self.config, self.key),
            self.config.status,
            error_message=self.config.error_message,
            duration=duration,
        )
        return ReportRequest(
            url=url,
            status=self.config.status,
            headers=build_headers(self.config, extra_headers),
        )

    async def report(self, extra_headers: dict[str, str]) -> Outcome:
        request = self.build_request(extra_headers)
        self.logger.info(
            f"Reporting {request.status} to {request.url}", notice=True
        )

        if self.config.dry_run:
            self.logger.info("Dry run enabled. Would send:")
            self.logger.info("Headers (redacted):", headers=redact_headers(request.headers))
            self.logger.info("Body: (empty)")
            return Outcome(status=request.status, endpoint=request.url)

        response = await self.client.post_report(request)
        self.logger.info("Report sent successfully.", http_status=response.status_code)
        return Outcome(
            status=request.status,
            endpoint=request.url,
            http_status=response.status_code,
        )

    def publish(self, outcome: Outcome) -> None:
        self.environment.set_output("status", outcome.status)
        self.environment.set_output("endpoint", outcome.endpoint)
        self.environment.set_output("http-status", str(outcome.http_status))


def run(config: Config, environment: JobEnvironment) -> Outcome:
    return asyncio.run(Snitcher(config, environment).run())


def main() -> int:
    logger = get_logger("main")
    try:
        config = resolve_config(ActionInputs())
        run(config, GithubActionsEnvironment())
    except SnitcherError as e:
        logger.error(str(e))
        return 1
    except Exception as e:
        logger.error(f"Unhandled error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
