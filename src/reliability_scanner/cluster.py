from __future__ import annotations

import queue
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from kubernetes import client, config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException
from urllib3.exceptions import HTTPError

from .errors import ClientInitError, ConfigurationError, QueryError

if TYPE_CHECKING:
    from .context import ExecutionContext


@dataclass(frozen=True)
class ServiceResource:
    name: str
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_v1_service(cls, service: Any) -> ServiceResource:
        metadata = service.metadata
        return cls(
            name=str(metadata.name or ""),
            namespace=str(metadata.namespace or ""),
            labels=dict(metadata.labels or {}),
            annotations=dict(metadata.annotations or {}),
        )


class ServiceLister(Protocol):
    def list_services(self, context: ExecutionContext) -> list[ServiceResource]: ...


def in_cluster_config() -> client.Configuration:
    configuration = client.Configuration()
    try:
        config.load_incluster_config(client_configuration=configuration)
    except ConfigException as exc:
        raise ConfigurationError(
            f"Unable to load in-cluster configuration: {exc}"
        ) from exc
    return configuration


def new_core_api(configuration: client.Configuration) -> client.CoreV1Api:
    # One attempt per request; urllib3 would otherwise retry three times.
    configuration.retries = False
    try:
        api_client = client.ApiClient(configuration=configuration)
        return client.CoreV1Api(api_client=api_client)
    except (TypeError, ValueError) as exc:
        raise ClientInitError(f"Unable to create Kubernetes client: {exc}") from exc


class KubernetesServiceLister:
    """Lists Services in every namespace through ``CoreV1Api``.

    The request runs on a daemon thread while the caller polls the context,
    so a cancel or an expired deadline fails the query even when the API
    server never answers. An abandoned request is left to its own socket
    timeout.
    """

    poll_interval: float = 0.1

    def __init__(self, core_api: client.CoreV1Api) -> None:
        self._core_api = core_api

    @classmethod
    def in_cluster(cls) -> KubernetesServiceLister:
        return cls(new_core_api(in_cluster_config()))

    def list_services(self, context: ExecutionContext) -> list[ServiceResource]:
        if context.cancelled:
            raise QueryError("Service listing cancelled before it started.")
        if context.expired:
            raise QueryError("Deadline exceeded before listing services.")
        kwargs: dict[str, Any] = {}
        remaining = context.remaining()
        if remaining is not None:
            kwargs["_request_timeout"] = remaining

        outcome: queue.Queue[tuple[Any, Exception | None]] = queue.Queue(maxsize=1)

        def _request() -> None:
            try:
                outcome.put((self._core_api.list_service_for_all_namespaces(**kwargs), None))
            except Exception as exc:
                outcome.put((None, exc))

        threading.Thread(target=_request, name="list-services", daemon=True).start()

        while True:
            if context.cancelled:
                raise QueryError("Service listing cancelled.")
            if context.expired:
                raise QueryError("Deadline exceeded while listing services.")
            wait = self.poll_interval
            remaining = context.remaining()
            if remaining is not None:
                wait = min(wait, remaining)
            try:
                response, error = outcome.get(timeout=wait)
            except queue.Empty:
                continue
            break

        if error is not None:
            if isinstance(error, (ApiException, HTTPError, OSError)):
                raise QueryError(f"Listing services failed: {error}") from error
            raise error
        return [ServiceResource.from_v1_service(item) for item in response.items or []]
