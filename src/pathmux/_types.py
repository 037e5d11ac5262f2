"""Core protocols and type aliases for pathmux.

- Routable is the request port: anything with a method and a path
- Handler is the capability every route, and the not_found fallback, provides
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathmux._request import Request
    from pathmux._response import Response


@runtime_checkable
class Routable(Protocol):
    """The minimum a request must expose to be dispatched.

    The registry only reads these two attributes. Transports may pass
    their own request objects as long as they provide them.
    """

    @property
    def method(self) -> str: ...

    @property
    def path(self) -> str: ...


@runtime_checkable
class Handler(Protocol):
    """Map a request to a response.

    Failure is signalled by raising. The registry never calls a handler;
    invoking it and translating its exceptions is the transport's job.
    """

    def __call__(self, request: Request, /) -> Response: ...
