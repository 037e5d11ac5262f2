"""Route and RouteMatch frozen dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pathmux._pattern import PathPattern
    from pathmux._request import Request
    from pathmux._types import Handler


@dataclass(frozen=True, slots=True)
class Route:
    """A registered (pattern, methods, handler) binding.

    Created once per registration and never mutated. ``methods`` keeps
    registration order with duplicates removed; membership is exact and
    case-sensitive.
    """

    pattern: PathPattern
    methods: tuple[str, ...]
    handler: Handler

    def allows(self, method: str) -> bool:
        return method in self.methods

    def match(self, method: str, path: str) -> Mapping[str, str] | None:
        """Captured params if both method and path are accepted, else None."""
        if not self.allows(method):
            return None
        return self.pattern.match(path)

    @property
    def handler_name(self) -> str:
        """Dotted name of the handler, for listings and logs."""
        h = self.handler
        name = getattr(h, "__qualname__", None) or type(h).__qualname__
        module = getattr(h, "__module__", None)
        return f"{module}:{name}" if module else name


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful dispatch."""

    route: Route
    params: Mapping[str, str]

    @property
    def handler(self) -> Handler:
        return self.route.handler

    def bind(self, request: Request) -> Request:
        """Return ``request`` carrying the extracted path parameters."""
        return request.with_params(self.params)
