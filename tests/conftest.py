"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from chessmoves.core import MoveQueryService, RuleRegistry
from chessmoves.settings import ENV_LOG_LEVEL, ENV_SEPARATOR


@pytest.fixture
def service() -> MoveQueryService:
    """Query service bound to the default rules."""
    return MoveQueryService(RuleRegistry())


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's CHESSMOVES_* variables out of the tests."""
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_SEPARATOR, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """The CLI sets the package logger level; restore it between tests."""
    logger = logging.getLogger("chessmoves")
    level = logger.level
    yield
    logger.setLevel(level)
