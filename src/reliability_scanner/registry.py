from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import entry_points
from typing import Any, Callable

from .runner import Querier

_ENTRYPOINT_GROUP = "reliability_scanner.checks"

QuerierFactory = Callable[[dict[str, Any]], Querier]


@dataclass(frozen=True)
class RegisteredCheck:
    kind: str
    factory: QuerierFactory
    plugin: str


class CheckRegistry:
    def __init__(self) -> None:
        self._checks: dict[str, RegisteredCheck] = {}

    def register_check(
        self, *, kind: str, factory: QuerierFactory, plugin: str = "builtin"
    ) -> None:
        if kind in self._checks:
            raise ValueError(f"Check kind '{kind}' is already registered.")
        self._checks[kind] = RegisteredCheck(kind=kind, factory=factory, plugin=plugin)

    def register_entrypoint_plugins(self) -> None:
        for ep in entry_points(group=_ENTRYPOINT_GROUP):
            self.register_check(kind=ep.name, factory=ep.load(), plugin=ep.value)

    def list_kinds(self) -> tuple[str, ...]:
        return tuple(sorted(self._checks))

    def get_check(self, kind: str) -> RegisteredCheck:
        try:
            return self._checks[kind]
        except KeyError as exc:
            known = ", ".join(sorted(self._checks))
            raise KeyError(
                f"Unknown check kind '{kind}'. Registered kinds: {known}"
            ) from exc

    def build(self, kind: str, spec: dict[str, Any]) -> Querier:
        return self.get_check(kind).factory(spec)
