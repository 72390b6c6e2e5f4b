"""The job environment shared between invocations, and step outputs.

A ``start`` invocation exports its timestamp into the job environment and a
later ``report`` invocation reads it back. On GitHub Actions this goes
through the ``$GITHUB_ENV`` and ``$GITHUB_OUTPUT`` files; tests use
``MemoryEnvironment``.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import MutableMapping

from gatus_snitcher.log import get_logger

logger = get_logger("environment")


class JobEnvironment:
    """Key-value store scoped to the calling job, plus named step outputs."""

    def get(self, name: str) -> str | None:
        raise NotImplementedError

    def export(self, name: str, value: str) -> None:
        raise NotImplementedError

    def set_output(self, name: str, value: str) -> None:
        raise NotImplementedError


class MemoryEnvironment(JobEnvironment):
    def __init__(self, variables: dict[str, str] | None = None) -> None:
        self.variables: dict[str, str] = dict(variables or {})
        self.outputs: dict[str, str] = {}

    def get(self, name: str) -> str | None:
        return self.variables.get(name)

    def export(self, name: str, value: str) -> None:
        self.variables[name] = value

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value


def format_file_command(name: str, value: str) -> str:
    """Build a ``name<<delimiter`` block for the GitHub file commands."""
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name:
        raise ValueError(f"Unexpected input: name should not contain the delimiter {delimiter!r}")
    if delimiter in value:
        raise ValueError(f"Unexpected input: value should not contain the delimiter {delimiter!r}")
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class GithubActionsEnvironment(JobEnvironment):
    """Job environment backed by the Actions runner's file commands."""

    def __init__(self, environ: MutableMapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> str | None:
        return self._environ.get(name)

    def export(self, name: str, value: str) -> None:
        self._environ[name] = value
        path = self._environ.get("GITHUB_ENV")
        if not path:
            logger.warning(
                "github_env_not_set",
                hint="are you running outside GitHub Actions?",
                variable=name,
            )
            return
        self._append(path, format_file_command(name, value))

    def set_output(self, name: str, value: str) -> None:
        path = self._environ.get("GITHUB_OUTPUT")
        if not path:
            logger.info("output", name=name, value=value)
            return
        self._append(path, format_file_command(name, value))

    @staticmethod
    def _append(path: str, text: str) -> None:
        with open(path, "a", encoding="utf-8") as f:
            f.write(text)
