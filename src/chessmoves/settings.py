"""Runtime configuration for the command-line tool."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from chessmoves.core.service import DEFAULT_SEPARATOR

_LOGGER = logging.getLogger(__name__)

ENV_LOG_LEVEL = "CHESSMOVES_LOG_LEVEL"
ENV_SEPARATOR = "CHESSMOVES_SEPARATOR"

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CliSettings:
    """All user-configurable settings."""

    log_level: str = "WARNING"
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CliSettings:
        """Defaults overridden by ``CHESSMOVES_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()
        if ENV_LOG_LEVEL in env:
            settings = settings.with_log_level(env[ENV_LOG_LEVEL])
        if ENV_SEPARATOR in env:
            settings = replace(settings, separator=env[ENV_SEPARATOR])
        return settings

    def with_log_level(self, name: str) -> CliSettings:
        """Copy with *name* as log level; unknown names keep the current one."""
        level = name.strip().upper()
        if level not in LOG_LEVELS:
            _LOGGER.warning("Ignoring unknown log level %r", name)
            return self
        return replace(self, log_level=level)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
