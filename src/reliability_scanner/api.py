from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .checks.annotations import KIND as ANNOTATIONS_KIND
from .checks.annotations import querier_from_mapping
from .config import ScannerConfig, load_config
from .errors import ConfigurationError
from .models import ScanReport
from .registry import CheckRegistry
from .runner import Runner


def create_registry(*, load_entrypoints: bool = True) -> CheckRegistry:
    registry = CheckRegistry()
    registry.register_check(kind=ANNOTATIONS_KIND, factory=querier_from_mapping)
    if load_entrypoints:
        registry.register_entrypoint_plugins()
    return registry


def build_runner(
    config: ScannerConfig,
    *,
    registry: CheckRegistry | None = None,
    logger: Any = None,
) -> Runner:
    """Construct every configured check and register it with a new runner.

    Construction errors propagate; no check is registered past the first
    failure.
    """
    active_registry = registry or create_registry()
    runner = Runner(config.name, logger=logger)
    for check in config.checks:
        try:
            querier = active_registry.build(check.kind, check.spec)
        except KeyError as exc:
            raise ConfigurationError(str(exc.args[0])) from exc
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid spec for check '{check.kind}': {exc}"
            ) from exc
        querier.add_to_runner(runner)
    return runner


def run_scan(
    config: ScannerConfig | str | Path,
    *,
    registry: CheckRegistry | None = None,
    timeout: float | None = None,
    logger: Any = None,
) -> ScanReport:
    active_config = config if isinstance(config, ScannerConfig) else load_config(config)
    runner = build_runner(active_config, registry=registry, logger=logger)
    return runner.run(
        timeout=timeout if timeout is not None else active_config.timeout_seconds
    )
