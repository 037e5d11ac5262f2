"""``pathmux`` command line — inspect a YAML route table.

Usage:
    pathmux routes routes.yaml
    pathmux match routes.yaml GET /users/42

Handler references in the table are imported, so run it in an environment
where the application package is importable.
"""

from __future__ import annotations

import logging
import sys

import click

from pathmux._config import ConfigParseError, load_route_config
from pathmux._pattern import RouteError
from pathmux._registry import Registry, RegistryBuilder
from pathmux._request import Request

logger = logging.getLogger("pathmux.cli")


def _load_registry(config_path: str) -> Registry:
    try:
        config = load_route_config(config_path)
        registry = RegistryBuilder().load(config).build()
    except (ConfigParseError, RouteError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    logger.debug("loaded %d routes from %s", len(registry), config_path)
    return registry


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Inspect pathmux route tables."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
def routes(config_path: str) -> None:
    """List routes in dispatch order."""
    registry = _load_registry(config_path)
    if not len(registry):
        click.echo("No routes registered.")
        return

    rows = [
        (str(i), ", ".join(route.methods), route.pattern.pattern, route.handler_name)
        for i, route in enumerate(registry, start=1)
    ]
    headers = ("#", "METHOD", "PATH", "HANDLER")
    widths = [max(len(r[col]) for r in (headers, *rows)) for col in range(3)]
    fmt = f"{{:>{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    click.echo(fmt.format(*headers))
    for row in rows:
        click.echo(fmt.format(*row))


@main.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("method")
@click.argument("path")
def match(config_path: str, method: str, path: str) -> None:
    """Show which route a METHOD PATH request is dispatched to."""
    registry = _load_registry(config_path)
    request = Request(method=method, raw_path=path)
    result = registry.resolve(request)

    if result is None:
        click.echo(f"404 {method} {request.path}: no route matched")
        allowed = registry.allowed_methods(request.path)
        if allowed:
            click.echo(f"  path matched routes allowing: {', '.join(allowed)}")
        sys.exit(1)

    position = registry.routes.index(result.route) + 1
    click.echo(f"route #{position} {result.route.pattern.pattern} -> {result.route.handler_name}")
    for name, value in result.params.items():
        click.echo(f"  {name} = {value}")


if __name__ == "__main__":
    main()
