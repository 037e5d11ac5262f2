"""Pattern compiler — path pattern string → PathPattern matcher.

A pattern is a ``/``-delimited template. Each segment is either a literal
or a named parameter written ``:name``:

    "/users/:id/items" -> [Literal(""), Literal("users"), Param("id"), Literal("items")]

Segments are compiled once into an anchored ``google-re2`` expression and
the resulting PathPattern is reused for every request. RE2 guarantees
linear-time matching regardless of the path supplied by a client.

Malformed patterns raise at compile time. A broken route table is a
configuration error, never a request-time condition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

import re2

if TYPE_CHECKING:
    from collections.abc import Mapping

PARAM_SENTINEL = ":"
SEPARATOR = "/"
MAX_PATTERN_LENGTH = 8192

# One or more characters, no whitespace, never crossing a separator.
PARAM_EXPRESSION = r"[^\s/]+"

_PARAM_NAME = re2.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_PARAM_VALUE = re2.compile(PARAM_EXPRESSION)


class RouteError(Exception):
    """Base for all pathmux errors raised while building a route table."""


class PatternError(RouteError):
    """A path pattern is malformed."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid path pattern {pattern!r}: {reason}")


class DuplicateParamError(PatternError):
    """A parameter name appears more than once in a pattern."""

    def __init__(self, pattern: str, name: str) -> None:
        self.name = name
        super().__init__(pattern, f"duplicate parameter name {name!r}")


class PatternTooLongError(PatternError):
    """A path pattern exceeds the length limit."""

    def __init__(self, pattern: str, length: int, max_: int) -> None:
        self.length = length
        self.max = max_
        super().__init__(
            pattern[:64] + "...", f"length {length} exceeds maximum {max_}"
        )


@dataclass(frozen=True, slots=True)
class LiteralSegment:
    """A segment that must equal ``value`` exactly."""

    value: str

    def expression(self) -> str:
        return re2.escape(self.value)


@dataclass(frozen=True, slots=True)
class ParamSegment:
    """A segment captured under ``name``."""

    name: str

    def expression(self) -> str:
        return f"(?P<{self.name}>{PARAM_EXPRESSION})"


Segment: TypeAlias = LiteralSegment | ParamSegment


@dataclass(frozen=True, slots=True)
class PathPattern:
    """Compiled path pattern.

    Stateless after construction and safe to share between threads.
    ``match`` is anchored to the whole path: ``/health`` does not match
    ``/health/`` or ``/healthcheck``.

    ``matches(value) -> bool`` is the predicate form of ``match``: it
    answers False for anything that is not a matching ``str``.

    Paths RE2 cannot encode (lone surrogates from a ``surrogateescape``
    decoded request line) never match.
    """

    pattern: str
    segments: tuple[Segment, ...]
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        expression = SEPARATOR.join(seg.expression() for seg in self.segments)
        try:
            compiled = re2.compile(expression)
        except re2.error as e:
            raise PatternError(self.pattern, str(e)) from e
        object.__setattr__(self, "_compiled", compiled)

    @property
    def param_names(self) -> tuple[str, ...]:
        """Parameter names in the order they appear."""
        return tuple(
            seg.name for seg in self.segments if isinstance(seg, ParamSegment)
        )

    @property
    def is_static(self) -> bool:
        """True if the pattern has no parameters."""
        return not self.param_names

    def match(self, path: str) -> Mapping[str, str] | None:
        """Match ``path`` end-to-end.

        Returns the captured parameters (empty for a static pattern), or
        None if the path does not match.
        """
        try:
            m = self._compiled.fullmatch(path)
        except UnicodeEncodeError:
            return None
        if m is None:
            return None
        return MappingProxyType(m.groupdict())

    def matches(self, value: object, /) -> bool:
        if not isinstance(value, str):
            return False
        try:
            return self._compiled.fullmatch(value) is not None
        except UnicodeEncodeError:
            return False

    def expand(self, params: Mapping[str, str]) -> str:
        """Build a concrete path from parameter values.

        Raises:
            PatternError: If a parameter is missing or its value could
                never be matched by this pattern.
        """
        parts: list[str] = []
        for seg in self.segments:
            match seg:
                case LiteralSegment(value=v):
                    parts.append(v)
                case ParamSegment(name=name):
                    if name not in params:
                        raise PatternError(self.pattern, f"missing value for {name!r}")
                    value = str(params[name])
                    if not _is_segment_value(value):
                        msg = f"value {value!r} for {name!r} is not a single path segment"
                        raise PatternError(self.pattern, msg)
                    parts.append(value)
        return SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.pattern


def _is_segment_value(value: str) -> bool:
    try:
        return _PARAM_VALUE.fullmatch(value) is not None
    except UnicodeEncodeError:
        return False


def parse_segments(pattern: str) -> tuple[Segment, ...]:
    """Split a pattern into literal and parameter segments.

    Raises:
        PatternError: On empty patterns, bad or repeated parameter names,
            and segments mixing literal text with the sentinel.
    """
    if not isinstance(pattern, str):
        msg = f"expected str, got {type(pattern).__name__}"
        raise PatternError(repr(pattern), msg)
    if not pattern:
        raise PatternError(pattern, "pattern is empty")
    if len(pattern) > MAX_PATTERN_LENGTH:
        raise PatternTooLongError(pattern, len(pattern), MAX_PATTERN_LENGTH)

    segments: list[Segment] = []
    seen: set[str] = set()
    for part in pattern.split(SEPARATOR):
        if part.startswith(PARAM_SENTINEL):
            name = part[1:]
            if not _PARAM_NAME.fullmatch(name):
                msg = f"parameter name {name!r} is not a valid identifier"
                raise PatternError(pattern, msg)
            if name in seen:
                raise DuplicateParamError(pattern, name)
            seen.add(name)
            segments.append(ParamSegment(name))
        elif PARAM_SENTINEL in part:
            msg = f"segment {part!r} mixes literal text and a parameter"
            raise PatternError(pattern, msg)
        else:
            segments.append(LiteralSegment(part))
    return tuple(segments)


def compile_pattern(pattern: str) -> PathPattern:
    """Compile a path pattern into a reusable PathPattern.

    >>> p = compile_pattern("/users/:id/items")
    >>> dict(p.match("/users/42/items"))
    {'id': '42'}
    >>> p.match("/users/42/43/items") is None
    True
    """
    return PathPattern(pattern=pattern, segments=parse_segments(pattern))
