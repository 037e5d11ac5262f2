"""Tests for the pathmux command line (pathmux.cli)."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from pathmux.cli import main


def _run(*args: str):  # noqa: ANN202
    return CliRunner().invoke(main, list(args))


class TestRoutes:
    def test_lists_routes_in_order(self, route_table: Path) -> None:
        result = _run("routes", str(route_table))
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0].split() == ["#", "METHOD", "PATH", "HANDLER"]
        assert lines[1].split() == ["1", "GET", "/health", "pathmux.testing:ok"]
        assert lines[2].split() == ["2", "GET,", "HEAD", "/users/:id", "pathmux.testing:echo_params"]
        assert lines[3].split() == ["3", "DELETE", "/users/:id", "pathmux.testing:fail"]

    def test_empty_table(self, tmp_path: Path) -> None:
        path = tmp_path / "routes.yaml"
        path.write_text("routes: []\n", encoding="utf-8")
        result = _run("routes", str(path))
        assert result.exit_code == 0
        assert "No routes registered." in result.output

    def test_bad_pattern(self, tmp_path: Path) -> None:
        path = tmp_path / "routes.yaml"
        path.write_text(
            'routes:\n  - {path: "/a/:x/:x", methods: [GET], handler: "pathmux.testing:ok"}\n',
            encoding="utf-8",
        )
        result = _run("routes", str(path))
        assert result.exit_code == 2
        assert "duplicate parameter name 'x'" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = _run("routes", str(tmp_path / "nope.yaml"))
        assert result.exit_code != 0


class TestMatch:
    def test_match_with_params(self, route_table: Path) -> None:
        result = _run("match", str(route_table), "GET", "/users/42")
        assert result.exit_code == 0, result.output
        assert "route #2 /users/:id -> pathmux.testing:echo_params" in result.output
        assert "id = 42" in result.output

    def test_match_other_method(self, route_table: Path) -> None:
        result = _run("match", str(route_table), "DELETE", "/users/42")
        assert result.exit_code == 0
        assert "route #3" in result.output

    def test_query_string_ignored(self, route_table: Path) -> None:
        result = _run("match", str(route_table), "GET", "/health?verbose=1")
        assert result.exit_code == 0
        assert "route #1 /health" in result.output

    def test_no_match(self, route_table: Path) -> None:
        result = _run("match", str(route_table), "GET", "/nowhere")
        assert result.exit_code == 1
        assert "404 GET /nowhere: no route matched" in result.output
        assert "allowing" not in result.output

    def test_path_matched_other_methods(self, route_table: Path) -> None:
        result = _run("match", str(route_table), "POST", "/users/42")
        assert result.exit_code == 1
        assert "path matched routes allowing: GET, HEAD, DELETE" in result.output

    def test_verbose_flag(self, route_table: Path) -> None:
        result = _run("-v", "match", str(route_table), "GET", "/health")
        assert result.exit_code == 0
