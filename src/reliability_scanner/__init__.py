"""Cluster reliability checks for Kubernetes Services."""

from .api import build_runner, create_registry, run_scan
from .checks import AnnotationsQuerier, new_querier
from .cluster import KubernetesServiceLister, ServiceLister, ServiceResource
from .config import CheckConfig, QuerierSpec, ScannerConfig, load_config
from .context import ExecutionContext
from .errors import (
    ClientInitError,
    ConfigurationError,
    MissingKeyError,
    QueryError,
    ScannerError,
)
from .models import CheckStatus, CheckSummary, ItemDetails, ResourceItem, ScanReport
from .registry import CheckRegistry
from .reporting import render_yaml_report, report_to_dict, save_yaml_report
from .runner import Runner

__all__ = [
    "AnnotationsQuerier",
    "CheckConfig",
    "CheckRegistry",
    "CheckStatus",
    "CheckSummary",
    "ClientInitError",
    "ConfigurationError",
    "ExecutionContext",
    "ItemDetails",
    "KubernetesServiceLister",
    "MissingKeyError",
    "QuerierSpec",
    "QueryError",
    "ResourceItem",
    "Runner",
    "ScanReport",
    "ScannerConfig",
    "ScannerError",
    "ServiceLister",
    "ServiceResource",
    "build_runner",
    "create_registry",
    "load_config",
    "new_querier",
    "render_yaml_report",
    "report_to_dict",
    "run_scan",
    "save_yaml_report",
]
