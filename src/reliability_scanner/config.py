from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError


class QuerierSpec(BaseModel):
    """Settings for the Service annotation check.

    ``key`` may be empty, in which case only annotation capture runs.
    ``validate_url`` is accepted but not evaluated yet.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = ""
    validate_url: bool = False
    include_annotations: bool = False


class CheckConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: str = Field(min_length=1)
    spec: dict[str, Any] = Field(default_factory=dict)


class ScannerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = "reliability-scanner"
    timeout_seconds: float | None = Field(default=None, gt=0)
    checks: list[CheckConfig] = Field(default_factory=list)


def parse_config(raw: Any) -> ScannerConfig:
    if raw is None:
        raw = {}
    try:
        return ScannerConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid scanner configuration: {exc}") from exc


def load_config(path: str | Path) -> ScannerConfig:
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file '{config_path}': {exc}") from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Config file '{config_path}' is not valid YAML: {exc}") from exc
    return parse_config(raw)
