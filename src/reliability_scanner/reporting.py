from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import CheckSummary, ScanReport


def report_to_dict(report: ScanReport | CheckSummary) -> dict[str, Any]:
    return report.to_dict()


def render_yaml_report(report: ScanReport | CheckSummary) -> str:
    return yaml.safe_dump(report_to_dict(report), sort_keys=False)


def save_yaml_report(report: ScanReport | CheckSummary, path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_yaml_report(report), encoding="utf-8")
    return target
