import json
import logging
from typing import Any, Dict, List, Optional

import typer

from jsonrest.client import METHODS, ApiClient
from jsonrest.configs import load_config, setup_logging
from jsonrest.configs.config import parse_header_string
from jsonrest.errors import ApiHTTPError, ApiTransportError, InvalidRequest

logger = logging.getLogger(__name__)

app = typer.Typer(help="Call JSON REST APIs from the command line")


def _parse_query(items: List[str]) -> Dict[str, Any]:
    query: Dict[str, Any] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {item!r}", param_hint="--query")
        if key in query:
            # repeated keys become a multi-valued parameter
            previous = query[key]
            query[key] = previous + [value] if isinstance(previous, list) else [previous, value]
        else:
            query[key] = value
    return query


def _parse_headers(items: List[str]) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    for item in items:
        try:
            headers.update(parse_header_string(item))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--header") from exc
    return headers


@app.command()
def call(
    method: str = typer.Argument(..., help="GET, POST, PUT, PATCH or DELETE"),
    path: str = typer.Argument("", help="Path relative to the base URL"),
    base_url: Optional[str] = typer.Option(None, "--base-url", "-u", help="Overrides JSONREST_BASE_URL"),
    query: List[str] = typer.Option([], "--query", "-q", help="Query parameter as key=value"),
    header: List[str] = typer.Option([], "--header", "-H", help="Header as 'Name: value'"),
    data: Optional[str] = typer.Option(None, "--data", "-d", help="JSON request body"),
    keep_alive: Optional[bool] = typer.Option(None, "--keep-alive/--no-keep-alive"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Seconds to wait for the server"),
    config_path: Optional[str] = typer.Option(None, "--config", help="YAML configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Send one request and print the normalized response as JSON."""
    config = load_config(config_path)
    if verbose:
        config.debug = True
    setup_logging(config)

    method = method.upper()
    if method not in METHODS:
        raise typer.BadParameter(f"must be one of {', '.join(METHODS)}", param_hint="METHOD")
    if method == "GET" and data is not None:
        raise typer.BadParameter("GET requests cannot carry a body", param_hint="--data")

    body = None
    if data is not None:
        try:
            body = json.loads(data)
        except ValueError as exc:
            raise typer.BadParameter(f"invalid JSON: {exc}", param_hint="--data") from exc

    if base_url:
        config.base_url = base_url
    if keep_alive is not None:
        config.keep_alive = keep_alive
    if timeout is not None:
        config.timeout = timeout
    config.default_headers.update(_parse_headers(header))

    try:
        client = ApiClient.from_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--base-url") from exc

    with client:
        try:
            future = client.request(method, path, query=_parse_query(query), body=body)
        except InvalidRequest as exc:
            raise typer.BadParameter(str(exc)) from exc
        try:
            response = future.result()
        except ApiHTTPError as exc:
            typer.echo(exc.response.model_dump_json(indent=2))
            raise typer.Exit(code=1)
        except ApiTransportError as exc:
            logger.debug("Transport failure", exc_info=True)
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=2)

    typer.echo(response.model_dump_json(indent=2))


if __name__ == "__main__":
    app()
