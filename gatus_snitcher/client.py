"""Gatus external endpoint API client.

Usage:
    from gatus_snitcher.client import GatusClient

    client = GatusClient(timeout_ms=15000)
    response = await client.post_report(request)
    print(response.status_code)
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import httpx

from gatus_snitcher.errors import RemoteRejection, TransportError
from gatus_snitcher.log import get_logger
from gatus_snitcher.request import ReportRequest

logger = get_logger("client")


@dataclass(frozen=True)
class ReportResponse:
    status_code: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class GatusClient:
    """Async client pushing results to Gatus external endpoints."""

    def __init__(
        self,
        timeout_ms: int,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout_ms = timeout_ms
        self._transport = transport

    async def post_report(self, request: ReportRequest) -> ReportResponse:
        """POST the report with an empty body.

        Raises TransportError when no response arrives within the timeout
        and RemoteRejection for a non-2xx answer.
        """
        timeout = self.timeout_ms / 1000
        async with httpx.AsyncClient(
            timeout=timeout, transport=self._transport
        ) as client:
            outgoing = client.build_request(
                "POST", request.url, headers=request.headers, content=b""
            )
            try:
                resp = await asyncio.wait_for(
                    client.send(outgoing, stream=True), timeout=timeout
                )
            except asyncio.TimeoutError:
                raise TransportError(
                    f"Request failed: no response within {self.timeout_ms} ms"
                ) from None
            except httpx.HTTPError as e:
                raise TransportError(f"Request failed: {e}") from e

            try:
                text = await self._read_text(resp)
            finally:
                await resp.aclose()

        response = ReportResponse(status_code=resp.status_code, text=text)
        if not response.ok:
            if response.text:
                logger.error("gatus_response_body", body=response.text)
            raise RemoteRejection(response.status_code, response.text)
        return response

    @staticmethod
    async def _read_text(resp: httpx.Response) -> str:
        """Best-effort body read; the status code alone decides the outcome."""
        try:
            await resp.aread()
            return resp.text
        except (httpx.HTTPError, UnicodeDecodeError) as e:
            logger.debug("response_body_unreadable", error=str(e))
            return ""
