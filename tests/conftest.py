"""Conformance fixture loader for pathmux.

Loads YAML fixtures from tests/fixtures/ and converts them to pathmux
types for parametrized testing. Each fixture document is a route table
with named handlers plus the requests dispatched against it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from pathmux import Registry, RegistryBuilder, Request, parse_route_config
from pathmux.testing import StaticHandler

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class DispatchCase:
    """A single request from a dispatch fixture."""

    fixture_name: str
    case_name: str
    registry: Registry
    handlers: dict[str, StaticHandler]
    request: Request
    expect: str | None
    params: dict[str, str] | None


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_dispatch_fixtures() -> list[DispatchCase]:
    """Load every dispatch fixture document."""
    cases: list[DispatchCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[DispatchCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[DispatchCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            fixture_name = doc["name"]
            config = parse_route_config({"routes": doc["routes"]})
            handlers = {r.handler: StaticHandler(r.handler) for r in config.routes}
            registry = RegistryBuilder().load(config, handlers=handlers).build()

            for case in doc["cases"]:
                params = case.get("params")
                cases.append(
                    DispatchCase(
                        fixture_name=fixture_name,
                        case_name=case["name"],
                        registry=registry,
                        handlers=handlers,
                        request=_parse_request(case["request"]),
                        expect=case["expect"],
                        params={str(k): str(v) for k, v in params.items()}
                        if params is not None
                        else None,
                    )
                )
    return cases


def _parse_request(spec: dict[str, Any]) -> Request:
    """Parse a YAML request spec into a Request."""
    return Request(
        method=str(spec.get("method", "GET")),
        raw_path=str(spec.get("path", "/")),
    )


# ─── Shared fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def route_table(tmp_path: Path) -> Path:
    """A YAML route table on disk using pathmux.testing handlers."""
    path = tmp_path / "routes.yaml"
    path.write_text(
        """\
routes:
  - path: "/health"
    methods: [GET]
    handler: "pathmux.testing:ok"
  - path: "/users/:id"
    methods: [GET, HEAD]
    handler: "pathmux.testing:echo_params"
  - path: "/users/:id"
    methods: [DELETE]
    handler: "pathmux.testing:fail"
""",
        encoding="utf-8",
    )
    return path
