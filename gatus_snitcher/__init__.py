"""Report CI job results to Gatus external endpoints."""

from gatus_snitcher.config import ActionInputs, Config, resolve_config
from gatus_snitcher.log import get_logger

__all__ = ["ActionInputs", "Config", "get_logger", "resolve_config"]
