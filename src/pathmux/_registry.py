"""Route registry — build the route table, then dispatch against it.

Architecture:
- RegistryBuilder → .build() → Registry (immutable)
- register() compiles each pattern once, at startup
- Registry.get_handler() scans routes in registration order (first-match-wins)

Example::

    builder = RegistryBuilder()
    builder.register("/users/:id", get_user, ["GET"])
    builder.register("/users/:id", update_user, ["PUT", "PATCH"])
    registry = builder.build()

    handler = registry.get_handler(request)
    response = handler(request)

Registration is a single-threaded startup phase. The built Registry holds
only frozen values and can be shared by any number of threads or tasks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pathmux._pattern import RouteError, compile_pattern
from pathmux._resolve import resolve_handler
from pathmux._response import not_found
from pathmux._route import Route, RouteMatch

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from pathmux._config import RouteTableConfig
    from pathmux._types import Handler, Routable

logger = logging.getLogger("pathmux")

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class InvalidRouteError(RouteError):
    """register() was called with unusable arguments."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid route {pattern!r}: {reason}")


class UnknownHandlerError(RouteError):
    """A route config names a handler that was not supplied."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown handler: {name!r} (available: {registered})"
        else:
            msg = f"unknown handler: {name!r} (no handlers were supplied)"
        super().__init__(msg)


class InvalidConfigError(RouteError):
    """A route config could not be turned into routes."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"invalid config: {source}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════


class RegistryBuilder:
    """Accumulates routes in registration order.

    Call build() to produce an immutable Registry. Routes registered after
    build() only show up in registries built later.
    """

    def __init__(self) -> None:
        self._routes: list[Route] = []

    def register(
        self, pattern: str, handler: Handler, methods: Iterable[str]
    ) -> RegistryBuilder:
        """Compile ``pattern`` and append a route for it.

        Raises:
            PatternError: pattern is malformed
            InvalidRouteError: handler is not callable, or methods is empty
                or contains a non-string
        """
        if not callable(handler):
            msg = f"handler must be callable, got {type(handler).__name__}"
            raise InvalidRouteError(str(pattern), msg)
        if isinstance(methods, str):
            msg = f"methods must be a sequence of strings, got the string {methods!r}"
            raise InvalidRouteError(str(pattern), msg)

        allowed = tuple(dict.fromkeys(methods))
        if not allowed:
            raise InvalidRouteError(str(pattern), "at least one method is required")
        for method in allowed:
            if not isinstance(method, str) or not method:
                msg = f"methods must be non-empty strings, got {method!r}"
                raise InvalidRouteError(str(pattern), msg)

        route = Route(
            pattern=compile_pattern(pattern), methods=allowed, handler=handler
        )
        self._routes.append(route)
        logger.debug(
            "registered route #%d %s %s -> %s",
            len(self._routes),
            ",".join(allowed),
            pattern,
            route.handler_name,
        )
        return self

    def load(
        self,
        config: RouteTableConfig,
        handlers: Mapping[str, Handler] | None = None,
    ) -> RegistryBuilder:
        """Register every route of a parsed route table, in order.

        With ``handlers``, each route's handler string is looked up by name.
        Without it, handler strings are ``"module:attribute"`` references
        that are imported.

        Raises:
            UnknownHandlerError: handler name missing from ``handlers``
            InvalidConfigError: handler reference cannot be imported
            PatternError: a route path is malformed
        """
        for route_config in config.routes:
            handler = self._lookup_handler(route_config.handler, handlers)
            self.register(route_config.path, handler, route_config.methods)
        return self

    def build(self) -> Registry:
        """Freeze the current route list into a Registry."""
        registry = Registry(routes=tuple(self._routes))
        logger.debug("built registry with %d routes", len(registry))
        return registry

    def __len__(self) -> int:
        return len(self._routes)

    @staticmethod
    def _lookup_handler(
        name: str, handlers: Mapping[str, Handler] | None
    ) -> Handler:
        if handlers is not None:
            try:
                return handlers[name]
            except KeyError:
                raise UnknownHandlerError(name, handlers.keys()) from None
        try:
            return resolve_handler(name)
        except (ImportError, AttributeError, TypeError, ValueError) as e:
            raise InvalidConfigError(str(e)) from e


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable, ordered route table.

    Constructed via RegistryBuilder. Dispatch never raises: a request no
    route accepts gets the not_found handler.

    INV: first-match-wins. A route is selected only when its pattern accepts
    the path AND its methods contain the request method. Later routes are
    never consulted once one is selected.
    """

    routes: tuple[Route, ...] = ()

    def get_handler(self, request: Routable) -> Handler:
        """Select the handler for ``request``; ``not_found`` on a miss."""
        result = self.resolve(request)
        if result is None:
            return not_found
        return result.handler

    def resolve(self, request: Routable) -> RouteMatch | None:
        """Select the first route accepting ``request``, with its params."""
        method = request.method
        path = request.path
        if not isinstance(path, str):
            return None
        for route in self.routes:
            params = route.match(method, path)
            if params is not None:
                return RouteMatch(route=route, params=params)
        return None

    def allowed_methods(self, path: str) -> tuple[str, ...]:
        """Methods of every route whose pattern accepts ``path``.

        Empty if no pattern accepts it. A transport can use this to answer
        405 instead of 404; get_handler() itself never does.
        """
        if not isinstance(path, str):
            return ()
        methods: dict[str, None] = {}
        for route in self.routes:
            if route.pattern.matches(path):
                methods.update(dict.fromkeys(route.methods))
        return tuple(methods)

    def __len__(self) -> int:
        return len(self.routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)
