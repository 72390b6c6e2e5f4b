"""Endpoint key and timer variable derivation.

Gatus addresses external endpoints by ``<GROUP>_<NAME>`` where a handful of
characters in each part are replaced by ``-``. The same key namespaces the
start timestamp exported between a ``start`` and a ``report`` invocation, so
both calls agree on the variable name without coordinating.
"""

from __future__ import annotations

import re

TIMER_PREFIX = "GATUS_SNITCHER_START_"

_KEY_CHARS = re.compile(r"[ /_,.#]")


def sanitize(value: str) -> str:
    """Replace space, ``/``, ``_``, ``,``, ``.`` and ``#`` with ``-``."""
    return _KEY_CHARS.sub("-", value)


def derive_key(group: str, name: str) -> str:
    return f"{sanitize(group)}_{sanitize(name)}"


def timer_variable(timer_id: str) -> str:
    """Environment variable name holding the start timestamp for *timer_id*."""
    return TIMER_PREFIX + sanitize(timer_id).replace("-", "_").upper()
