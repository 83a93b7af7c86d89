from __future__ import annotations

import logging
import queue

import pytest
import structlog

from reliability_scanner.cluster import ServiceResource
from reliability_scanner.context import ExecutionContext
from reliability_scanner.errors import QueryError


class FakeLister:
    def __init__(
        self,
        services: list[ServiceResource] | None = None,
        *,
        error: Exception | None = None,
    ) -> None:
        self.services = list(services or [])
        self.error = error
        self.calls = 0

    def list_services(self, context: ExecutionContext) -> list[ServiceResource]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.services)


@pytest.fixture
def make_lister():
    def _make(*services: ServiceResource, error: Exception | None = None) -> FakeLister:
        return FakeLister(list(services), error=error)

    return _make


@pytest.fixture
def failing_lister() -> FakeLister:
    return FakeLister(error=QueryError("connection refused"))


@pytest.fixture
def context() -> ExecutionContext:
    return ExecutionContext(results=queue.Queue(maxsize=1))


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
