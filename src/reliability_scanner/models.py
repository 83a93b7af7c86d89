from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable


class CheckStatus(str, Enum):
    passed = "passed"
    failed = "failed"


@dataclass(frozen=True)
class ItemDetails:
    annotations: dict[str, str] | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.annotations is not None:
            out["annotations"] = dict(self.annotations)
        if self.error is not None:
            out["error"] = self.error
        return out


@dataclass(frozen=True)
class ResourceItem:
    name: str
    status: CheckStatus
    details: ItemDetails = field(default_factory=ItemDetails)

    @classmethod
    def passed_result(
        cls,
        *,
        name: str,
        annotations: dict[str, str] | None = None,
    ) -> ResourceItem:
        return cls(
            name=name,
            status=CheckStatus.passed,
            details=ItemDetails(annotations=annotations),
        )

    @classmethod
    def failed_result(
        cls,
        *,
        name: str,
        error: str,
        annotations: dict[str, str] | None = None,
    ) -> ResourceItem:
        return cls(
            name=name,
            status=CheckStatus.failed,
            details=ItemDetails(annotations=annotations, error=error),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "details": self.details.to_dict(),
        }


@dataclass
class CheckSummary:
    """Top-level report entry for one check run.

    The status only moves from ``passed`` to ``failed``; ``mark_failed`` is the
    single way to change it.
    """

    name: str
    status: CheckStatus = CheckStatus.passed
    items: list[ResourceItem] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == CheckStatus.passed

    def mark_failed(self) -> None:
        self.status = CheckStatus.failed

    def add_item(self, item: ResourceItem) -> None:
        if item.status == CheckStatus.failed:
            self.mark_failed()
        self.items.append(item)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class ScanReport:
    name: str
    status: CheckStatus
    items: list[CheckSummary]

    @classmethod
    def from_summaries(cls, name: str, summaries: Iterable[CheckSummary]) -> ScanReport:
        collected = list(summaries)
        failed = any(summary.status == CheckStatus.failed for summary in collected)
        return cls(
            name=name,
            status=CheckStatus.failed if failed else CheckStatus.passed,
            items=collected,
        )

    @property
    def ok(self) -> bool:
        return self.status == CheckStatus.passed

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status.value,
            "items": [summary.to_dict() for summary in self.items],
        }
