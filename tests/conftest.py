from __future__ import annotations

import os
from collections.abc import Callable

import httpx
import pytest

from gatus_snitcher.config import Config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.upper().startswith(("INPUT_", "GATUS_SNITCHER_")) or key in ("GITHUB_ENV", "GITHUB_OUTPUT"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def make_config() -> Callable[..., Config]:
    def factory(**overrides: object) -> Config:
        values: dict[str, object] = {
            "mode": "report",
            "group": "ci",
            "name": "nightly",
            "base_url": "https://s.example.com",
            "token": "xyz",
        }
        values.update(overrides)
        return Config(**values)  # type: ignore[arg-type]

    return factory


@pytest.fixture()
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture()
def mock_transport(recorded_requests: list[httpx.Request]) -> Callable[..., httpx.MockTransport]:
    def factory(status_code: int = 200, text: str = "") -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return httpx.Response(status_code, text=text)

        return httpx.MockTransport(handler)

    return factory
