"""pathmux — first-match-wins request routing over named-parameter path patterns.

All public types are exported from this module for flat imports:

    from pathmux import RegistryBuilder, Request, not_found
"""

__version__ = "0.1.0"

# Config types, see pathmux._config
from pathmux._config import (
    ConfigParseError,
    RouteConfig,
    RouteTableConfig,
    load_route_config,
    parse_route_config,
)

# Pattern compiler
from pathmux._pattern import (
    MAX_PATTERN_LENGTH,
    DuplicateParamError,
    LiteralSegment,
    ParamSegment,
    PathPattern,
    PatternError,
    PatternTooLongError,
    RouteError,
    Segment,
    compile_pattern,
    parse_segments,
)

# Registry, see pathmux._registry
from pathmux._registry import (
    InvalidConfigError,
    InvalidRouteError,
    Registry,
    RegistryBuilder,
    UnknownHandlerError,
)
from pathmux._request import Request
from pathmux._resolve import resolve_handler
from pathmux._response import NOT_FOUND_BODY, Response, not_found
from pathmux._route import Route, RouteMatch

# Protocols
from pathmux._types import Handler, Routable

__all__ = [
    # Protocols
    "Handler",
    "Routable",
    # Request / response
    "Request",
    "Response",
    "not_found",
    "NOT_FOUND_BODY",
    # Pattern compiler
    "compile_pattern",
    "parse_segments",
    "PathPattern",
    "LiteralSegment",
    "ParamSegment",
    "Segment",
    "MAX_PATTERN_LENGTH",
    # Routes
    "Route",
    "RouteMatch",
    # Registry
    "RegistryBuilder",
    "Registry",
    "resolve_handler",
    # Config types
    "RouteConfig",
    "RouteTableConfig",
    "parse_route_config",
    "load_route_config",
    # Errors
    "RouteError",
    "PatternError",
    "DuplicateParamError",
    "PatternTooLongError",
    "InvalidRouteError",
    "UnknownHandlerError",
    "InvalidConfigError",
    "ConfigParseError",
]
