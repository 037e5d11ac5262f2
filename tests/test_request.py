"""Tests for Request, Response and the pathmux.testing handlers."""

from __future__ import annotations

import json

import pytest

from pathmux import Handler, Request, Response, Routable, not_found
from pathmux.testing import StaticHandler, echo_params, fail, ok


class TestRequest:
    def test_defaults(self) -> None:
        r = Request()
        assert r.method == "GET"
        assert r.path == "/"
        assert r.path_params == {}

    def test_query_string_stripped(self) -> None:
        r = Request("GET", "/search?q=router&page=2&flag")
        assert r.path == "/search"
        assert r.raw_path == "/search?q=router&page=2&flag"
        assert r.query_params == {"q": "router", "page": "2", "flag": ""}

    def test_no_query_string(self) -> None:
        assert Request("GET", "/a").query_params == {}

    def test_headers_case_insensitive(self) -> None:
        r = Request("GET", "/", headers={"Content-Type": "text/plain"})
        assert r.header("content-type") == "text/plain"
        assert r.header("CONTENT-TYPE") == "text/plain"
        assert r.header("accept") is None

    def test_with_params_copies(self) -> None:
        original = Request("GET", "/users/1?x=1", headers={"A": "b"})
        bound = original.with_params({"id": "1"})

        assert bound.param("id") == "1"
        assert bound.path == "/users/1"
        assert bound.query_params == {"x": "1"}
        assert bound.header("a") == "b"
        assert original.param("id") is None

    def test_params_read_only(self) -> None:
        bound = Request().with_params({"id": "1"})
        with pytest.raises(TypeError):
            bound.path_params["id"] = "2"  # type: ignore[index]

    def test_is_routable(self) -> None:
        assert isinstance(Request(), Routable)


class TestResponse:
    def test_header_lookup(self) -> None:
        r = Response(200, "x", headers=(("Content-Type", "text/plain"),))
        assert r.header("content-type") == "text/plain"
        assert r.header("etag") is None

    def test_bytes_body(self) -> None:
        assert Response(200, b"\x00\x01").body == b"\x00\x01"


class TestHandlers:
    def test_not_found_is_a_handler(self) -> None:
        assert isinstance(not_found, Handler)

    def test_static_handler(self) -> None:
        h = StaticHandler("teapot", status_code=418)
        response = h(Request())
        assert response.status_code == 418
        assert response.body == "teapot"

    def test_ok(self) -> None:
        assert ok(Request()) == Response(200)

    def test_echo_params(self) -> None:
        response = echo_params(Request().with_params({"b": "2", "a": "1"}))
        assert json.loads(response.body) == {"a": "1", "b": "2"}
        assert response.header("content-type") == "application/json"

    def test_fail_raises(self) -> None:
        with pytest.raises(RuntimeError, match="GET /boom"):
            fail(Request("GET", "/boom"))
