from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass, field
from typing import Any

from .log import get_logger
from .models import CheckSummary


@dataclass
class ExecutionContext:
    """Per-invocation state handed to a querier's ``start``.

    Carries the cancellation signal, an optional monotonic deadline, the
    logger and the sink that receives exactly one summary per check.
    """

    results: queue.Queue[CheckSummary]
    logger: Any = field(default_factory=get_logger)
    deadline: float | None = None
    cancel_event: threading.Event = field(default_factory=threading.Event)

    @classmethod
    def with_timeout(
        cls,
        results: queue.Queue[CheckSummary],
        timeout: float | None,
        *,
        logger: Any = None,
        cancel_event: threading.Event | None = None,
    ) -> ExecutionContext:
        deadline = None if timeout is None else time.monotonic() + timeout
        return cls(
            results=results,
            logger=logger if logger is not None else get_logger(),
            deadline=deadline,
            cancel_event=cancel_event if cancel_event is not None else threading.Event(),
        )

    def cancel(self) -> None:
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def remaining(self) -> float | None:
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    @property
    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0.0
