"""Request — immutable request context handed to handlers.

Holds method, path (without query string), headers (case-insensitive)
and the path parameters extracted by the route that selected the handler.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class Request:
    """Request context for dispatch.

    The path should be provided as-is from the wire (may include query string).
    Query parameters are parsed and the path is cleaned.

    Headers are stored with lowercased keys for case-insensitive lookup.
    ``path_params`` is empty until a RouteMatch binds its captures.
    """

    method: str = "GET"
    raw_path: str = "/"
    headers: dict[str, str] = field(default_factory=dict)
    path_params: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    # Computed from raw_path and headers
    _clean_path: str = field(init=False, repr=False)
    _query_params: dict[str, str] = field(init=False, repr=False)
    _lower_headers: dict[str, str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        path, _, query_string = self.raw_path.partition("?")
        params: dict[str, str] = {}
        for part in query_string.split("&"):
            if "=" in part:
                k, v = part.split("=", 1)
                params[k] = v
            elif part:
                params[part] = ""
        object.__setattr__(self, "_clean_path", path)
        object.__setattr__(self, "_query_params", params)
        object.__setattr__(
            self,
            "_lower_headers",
            {k.lower(): v for k, v in self.headers.items()},
        )

    @property
    def path(self) -> str:
        """Path without query string."""
        return self._clean_path

    @property
    def query_params(self) -> dict[str, str]:
        """Parsed query parameters."""
        return self._query_params

    def header(self, name: str) -> str | None:
        """Get a header value by name (case-insensitive)."""
        return self._lower_headers.get(name.lower())

    def param(self, name: str) -> str | None:
        """Get an extracted path parameter by name."""
        return self.path_params.get(name)

    def with_params(self, params: Mapping[str, str]) -> Request:
        """Return a copy carrying ``params`` as its path parameters."""
        return replace(self, path_params=MappingProxyType(dict(params)))
