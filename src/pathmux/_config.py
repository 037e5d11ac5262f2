"""Config types for route tables.

Config-driven route table construction path:
  dict / YAML → parse_route_config() → RouteTableConfig → RegistryBuilder.load() → Registry

Shape::

    routes:
      - path: /users/:id
        methods: [GET, HEAD]
        handler: myapp.handlers:get_user

Only the document shape is checked here. Patterns are compiled, and
handler references resolved, when the config is loaded into a builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """One route entry: pattern, allowed methods, handler reference."""

    path: str
    methods: tuple[str, ...]
    handler: str


@dataclass(frozen=True, slots=True)
class RouteTableConfig:
    """An ordered list of route entries. Order is dispatch order."""

    routes: tuple[RouteConfig, ...]


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigParseError(Exception):
    """Error parsing a config document into config types."""


def parse_route_config(data: dict[str, Any]) -> RouteTableConfig:
    """Parse a dict into a RouteTableConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_routes = data.get("routes")
    if raw_routes is None:
        msg = "missing required field 'routes'"
        raise ConfigParseError(msg)
    if not isinstance(raw_routes, list):
        msg = f"'routes' must be a list, got {type(raw_routes).__name__}"
        raise ConfigParseError(msg)

    return RouteTableConfig(
        routes=tuple(_parse_route(i, r) for i, r in enumerate(raw_routes))
    )


def load_route_config(path: str | Path) -> RouteTableConfig:
    """Read a YAML route table from ``path`` and parse it.

    Raises:
        ConfigParseError: If the file is not valid YAML or is malformed.
        OSError: If the file cannot be read.
    """
    with Path(path).open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"{path}: invalid YAML: {e}"
            raise ConfigParseError(msg) from e
    if data is None:
        msg = f"{path}: document is empty"
        raise ConfigParseError(msg)
    return parse_route_config(data)


def _parse_route(index: int, data: dict[str, Any]) -> RouteConfig:
    """Parse a single route entry."""
    where = f"routes[{index}]"
    if not isinstance(data, dict):
        msg = f"{where} must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    for required in ("path", "methods", "handler"):
        if required not in data:
            msg = f"{where} missing required field {required!r}"
            raise ConfigParseError(msg)

    path = data["path"]
    if not isinstance(path, str):
        msg = f"{where}.path must be a string, got {type(path).__name__}"
        raise ConfigParseError(msg)

    handler = data["handler"]
    if not isinstance(handler, str) or not handler:
        msg = f"{where}.handler must be a non-empty string"
        raise ConfigParseError(msg)

    methods = data["methods"]
    if isinstance(methods, str):
        methods = [methods]
    if not isinstance(methods, list) or not methods:
        msg = f"{where}.methods must be a non-empty list of strings"
        raise ConfigParseError(msg)
    for method in methods:
        if not isinstance(method, str):
            msg = f"{where}.methods entries must be strings, got {type(method).__name__}"
            raise ConfigParseError(msg)

    return RouteConfig(path=path, methods=tuple(methods), handler=handler)
