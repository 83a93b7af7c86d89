from __future__ import annotations

import queue
import threading
from typing import Any, Protocol

from .context import ExecutionContext
from .log import get_logger
from .models import CheckSummary, ScanReport


class Querier(Protocol):
    check_name: str

    def add_to_runner(self, runner: Runner) -> None: ...

    def start(self, context: ExecutionContext) -> None: ...


class Runner:
    """Holds registered queriers and runs each of them once."""

    def __init__(self, name: str = "reliability-scanner", *, logger: Any = None) -> None:
        self.name = name
        self.logger = logger if logger is not None else get_logger()
        self.queriers: list[Querier] = []
        self.cancel_event = threading.Event()

    def cancel(self) -> None:
        self.cancel_event.set()

    def run(self, *, timeout: float | None = None) -> ScanReport:
        # Sized so a sequential run never blocks on its own sink.
        results: queue.Queue[CheckSummary] = queue.Queue(maxsize=max(1, len(self.queriers)))
        summaries: list[CheckSummary] = []
        for querier in self.queriers:
            context = ExecutionContext.with_timeout(
                results,
                timeout,
                logger=self.logger,
                cancel_event=self.cancel_event,
            )
            querier.start(context)
            summary = self._collect(querier, results)
            self.logger.info(
                "check collected",
                check_name=summary.name,
                ok=summary.ok,
                items=len(summary.items),
            )
            summaries.append(summary)
        report = ScanReport.from_summaries(self.name, summaries)
        self.logger.info(
            "scan complete",
            checks_run=len(summaries),
            status=report.status.value,
        )
        return report

    def _collect(
        self, querier: Querier, results: queue.Queue[CheckSummary]
    ) -> CheckSummary:
        try:
            return results.get_nowait()
        except queue.Empty:
            self.logger.warning(
                "check posted no result", check_name=querier.check_name
            )
            summary = CheckSummary(name=querier.check_name)
            summary.mark_failed()
            return summary

    def __repr__(self) -> str:
        return f"Runner(name={self.name}, queriers={len(self.queriers)})"
