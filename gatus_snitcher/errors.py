"""Exception types raised by the reporting pipeline.

Every error is terminal for the invocation. They propagate up to
``gatus_snitcher.main.main`` which turns them into a failed exit.
"""

from __future__ import annotations


class SnitcherError(Exception):
    """Base class for all expected failures."""


class ConfigError(SnitcherError):
    """A required input is missing or an input value is malformed."""


class HeaderParseError(ConfigError):
    """An ``extra-headers`` line is not in ``Key: Value`` form."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(
            f'Invalid header line: "{line}". '
            'Expected "Key: Value" or provide JSON object.'
        )


class TransportError(SnitcherError):
    """The request never produced a response (DNS, connect, timeout)."""


class RemoteRejection(SnitcherError):
    """Gatus answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Gatus responded with HTTP {status_code}")
