"""Test utilities for pathmux.

Ready-made handlers for tests, examples and route-table files. These are
NOT meant for production routes; they exist to reduce boilerplate when
exploring a route table.

Every object here is importable by reference, so a YAML route table can
point at ``pathmux.testing:ok`` or ``pathmux.testing:echo_params``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from pathmux._response import Response

if TYPE_CHECKING:
    from pathmux._request import Request


@dataclass(frozen=True, slots=True)
class StaticHandler:
    """Always answer with the same status and body.

    >>> from pathmux import Request
    >>> StaticHandler("hi")(Request()).body
    'hi'
    """

    body: str = ""
    status_code: int = HTTPStatus.OK

    def __call__(self, request: Request, /) -> Response:
        return Response(status_code=self.status_code, body=self.body)


def ok(request: Request, /) -> Response:
    """200 with an empty body."""
    return Response(status_code=HTTPStatus.OK)


def echo_params(request: Request, /) -> Response:
    """200 with the request's path parameters as a JSON object."""
    body = json.dumps(dict(request.path_params), sort_keys=True)
    return Response(
        status_code=HTTPStatus.OK,
        body=body,
        headers=(("Content-Type", "application/json"),),
    )


def fail(request: Request, /) -> Response:
    """Raise, to exercise a transport's handler-error path."""
    msg = f"handler failed for {request.method} {request.path}"
    raise RuntimeError(msg)
