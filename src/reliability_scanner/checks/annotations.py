from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from ..cluster import KubernetesServiceLister, ServiceLister, ServiceResource
from ..config import QuerierSpec
from ..context import ExecutionContext
from ..errors import MissingKeyError, QueryError
from ..log import CHECK_COMPLETE_MSG, CHECK_START_MSG, CHECK_WRITE_MSG
from ..models import CheckSummary, ResourceItem

if TYPE_CHECKING:
    from ..runner import Runner

KIND = "service/annotations"
AGGREGATOR_LABEL = "sonobuoy-component"
AGGREGATOR_VALUE = "aggregator"


def is_aggregator(service: ServiceResource) -> bool:
    return service.labels.get(AGGREGATOR_LABEL) == AGGREGATOR_VALUE


class AnnotationsQuerier:
    """Checks that every Service carries a required annotation key."""

    check_name: ClassVar[str] = "annotations"

    def __init__(self, spec: QuerierSpec, lister: ServiceLister) -> None:
        self.spec = spec
        self._lister = lister

    def add_to_runner(self, runner: Runner) -> None:
        runner.queriers.append(self)
        runner.logger.info("complete", check_name=self.check_name, phase="add")

    def evaluate(self, service: ServiceResource) -> ResourceItem:
        # Labels, not annotations, are captured under the "annotations" entry.
        captured = dict(service.labels) if self.spec.include_annotations else None

        key = self.spec.key
        if key.strip() and key not in service.annotations:
            return ResourceItem.failed_result(
                name=service.name,
                error=str(MissingKeyError(key)),
                annotations=captured,
            )
        return ResourceItem.passed_result(name=service.name, annotations=captured)

    def start(self, context: ExecutionContext) -> None:
        logger = context.logger.bind(check_name=self.check_name)
        logger.info(CHECK_START_MSG, phase="start")

        summary = CheckSummary(name=self.check_name)
        services: list[ServiceResource] = []
        try:
            services = self._lister.list_services(context)
        except QueryError as exc:
            logger.warning("query failed", phase="query", error=str(exc))
            summary.mark_failed()

        for service in services:
            if is_aggregator(service):
                continue
            summary.add_item(self.evaluate(service))

        logger.info(CHECK_COMPLETE_MSG, component="check", phase="complete")
        context.results.put(summary)
        logger.info(CHECK_WRITE_MSG, component="check", phase="write")


def new_querier(
    spec: QuerierSpec,
    *,
    lister: ServiceLister | None = None,
) -> AnnotationsQuerier:
    """Build a querier bound to the in-cluster Kubernetes API.

    Raises ``ConfigurationError`` when in-cluster credentials are unavailable
    and ``ClientInitError`` when the API client cannot be built.
    """
    if lister is None:
        lister = KubernetesServiceLister.in_cluster()
    return AnnotationsQuerier(spec, lister)


def querier_from_mapping(raw_spec: dict[str, Any]) -> AnnotationsQuerier:
    return new_querier(QuerierSpec.model_validate(raw_spec))
