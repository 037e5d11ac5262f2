"""Response value and the built-in not_found handler."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathmux._types import Routable

NOT_FOUND_BODY = "The requested path is not found."


@dataclass(frozen=True, slots=True)
class Response:
    """What a handler returns. Opaque to the registry."""

    status_code: int
    body: str | bytes = ""
    headers: tuple[tuple[str, str], ...] = ()

    def header(self, name: str) -> str | None:
        """First header value for ``name`` (case-insensitive)."""
        lowered = name.lower()
        for key, value in self.headers:
            if key.lower() == lowered:
                return value
        return None


def not_found(request: Routable, /) -> Response:
    """Default handler when no route accepts a request. Never raises."""
    return Response(status_code=HTTPStatus.NOT_FOUND, body=NOT_FOUND_BODY)
