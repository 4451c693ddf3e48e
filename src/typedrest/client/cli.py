"""
typedrest CLI commands.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
from typing import Any
import xml.etree.ElementTree as ET

import click
from rich.console import Console
from rich.syntax import Syntax

from typedrest.client.base import RESTClientBase
from typedrest.client.envelope import RESTResponse
from typedrest.config import ClientConfig
from typedrest.errors import ProtocolError, RESTClientError
from typedrest.logging_config import configure_logging
from typedrest.marshal.kinds import ResponseKind


RESPONSE_TYPES = {
    ResponseKind.JSON: Any,
    ResponseKind.XML: ET.Element,
    ResponseKind.TEXT: str,
}


def parse_headers(header_strings: list[str]) -> dict[str, str]:
    """Parse header strings in 'Name: Value' format."""
    headers = {}
    for h in header_strings:
        if ":" in h:
            name, value = h.split(":", 1)
            headers[name.strip()] = value.strip()
    return headers


def parse_fields(field_strings: list[str]) -> dict[str, str]:
    """Parse form fields in 'name=value' format, keeping their order."""
    fields = {}
    for f in field_strings:
        if "=" not in f:
            raise click.BadParameter(f"expected name=value, got '{f}'", param_hint="--form")
        name, value = f.split("=", 1)
        fields[name] = value
    return fields


def format_value(value: Any, kind: ResponseKind) -> Syntax | str:
    """Render a decoded value for the console."""
    if kind is ResponseKind.XML:
        ET.indent(value, space="  ")
        return Syntax(ET.tostring(value, encoding="unicode"), "xml", theme="monokai")
    if kind is ResponseKind.TEXT:
        return value
    return Syntax(json.dumps(value, indent=2, default=str), "json", theme="monokai")


def print_response(console: Console, resp: RESTResponse, kind: ResponseKind, verbose: bool) -> None:
    status_color = "green" if resp.is_success else "yellow"
    console.print(f"[{status_color}]{resp.status_code}[/{status_color}]")

    if verbose:
        console.print("\n[cyan]Response Headers:[/cyan]")
        for h_name, h_value in resp.headers.items():
            console.print(f"  [dim]{h_name}:[/dim] {h_value}")

    if resp.value is not None:
        console.print()
        console.print(format_value(resp.value, kind))


@click.group()
def rest():
    """Typed REST client commands."""
    pass


@rest.command("request")
@click.argument("url")
@click.option("-X", "--method", default="GET",
              type=click.Choice(["GET", "PUT", "POST", "DELETE", "HEAD"], case_sensitive=False),
              help="HTTP method")
@click.option("-H", "--header", multiple=True, help="Headers in 'Name: Value' format")
@click.option("--json", "json_data", help="JSON request body")
@click.option("--xml", "xml_data", help="XML request body")
@click.option("-f", "--form", "form_fields", multiple=True,
              help="Form field in 'name=value' format (sent with POST)")
@click.option("--as", "response_as", default="json",
              type=click.Choice([k.value for k in ResponseKind]),
              help="How to decode a 200/201 response body")
@click.option("-t", "--timeout", "timeout_ms", type=click.IntRange(min=1), default=None,
              help="Timeout in milliseconds (default from TYPEDREST_TIMEOUT_MS or 600000)")
@click.option("-k", "--insecure", is_flag=True, help="Disable SSL verification")
@click.option("-v", "--verbose", is_flag=True, help="Show response headers")
@click.option("--debug", is_flag=True, help="Log every request and response at DEBUG")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this rotating file")
def request_cmd(url: str, method: str, header: tuple, json_data: str | None,
                xml_data: str | None, form_fields: tuple, response_as: str,
                timeout_ms: int | None, insecure: bool, verbose: bool, debug: bool,
                log_file: str | None):
    """Invoke a REST resource and decode the response.

    Examples:
        typedrest request https://api.example.com/users
        typedrest request https://api.example.com/users -X POST --json '{"name": "test"}'
        typedrest request https://api.example.com/login -X POST -f user=bob -f pass=secret
        typedrest request https://api.example.com/feed.xml --as xml
    """
    console = Console()
    if debug or log_file:
        configure_logging(debug=debug, log_file=log_file)

    if sum(bool(b) for b in (json_data, xml_data, form_fields)) > 1:
        console.print("[red]Error:[/red] Use only one of --json, --xml, --form")
        raise SystemExit(1)

    method = method.upper()
    if form_fields and method != "POST":
        console.print("[red]Error:[/red] --form requires -X POST")
        raise SystemExit(1)
    if (json_data or xml_data) and method in ("GET", "HEAD"):
        console.print(f"[red]Error:[/red] {method} does not send a request body")
        raise SystemExit(1)

    payload: Any = None
    if json_data:
        try:
            payload = json.loads(json_data)
        except json.JSONDecodeError as e:
            console.print(f"[red]Error:[/red] Invalid JSON: {e}")
            raise SystemExit(1)
    elif xml_data:
        try:
            payload = ET.fromstring(xml_data)
        except ET.ParseError as e:
            console.print(f"[red]Error:[/red] Invalid XML: {e}")
            raise SystemExit(1)

    config = ClientConfig.from_env()
    config.default_headers.update(parse_headers(list(header)))
    if timeout_ms is not None:
        config.timeout_ms = timeout_ms
    if insecure:
        config.verify_ssl = False

    client = RESTClientBase(url, config=config)
    kind = ResponseKind(response_as)
    response_type = RESPONSE_TYPES[kind]

    try:
        if method == "GET":
            resp = client.get(response_type, response_kind=kind)
        elif method == "HEAD":
            resp = client.head()
        elif method == "DELETE":
            resp = client.delete(payload, response_type, response_kind=kind)
        elif method == "PUT":
            resp = client.put(payload, response_type, response_kind=kind)
        elif form_fields:
            resp = client.post_as_form(parse_fields(list(form_fields)), response_type, response_kind=kind)
        else:
            resp = client.post(payload, response_type, response_kind=kind)
    except ProtocolError as e:
        console.print(f"[red]{e.status_code}[/red] {e}")
        if e.body:
            console.print(e.body)
        raise SystemExit(1)
    except RESTClientError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    print_response(console, resp, kind, verbose)


if __name__ == "__main__":
    rest()
