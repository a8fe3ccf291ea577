"""Command-line interface for gql-introspect."""

import asyncio
import logging

import click
import httpx

from .core.client import IntrospectionClient
from .core.errors import IntrospectionError
from .core.indexer import build_index
from .core.model import Schema
from .core.parser import load_file
from .core.printer import render_schema


def parse_headers(values: tuple[str, ...]) -> dict[str, str]:
    """Turn repeated ``Name: value`` options into a header dict."""
    headers = {}
    for value in values:
        name, sep, header_value = value.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(
                f"Expected 'Name: value', got {value!r}", param_hint="--header"
            )
        headers[name.strip()] = header_value.strip()
    return headers


def source_options(command):
    """Attach the options that select where the schema comes from."""
    options = [
        click.option(
            "--url",
            "-u",
            envvar="GQL_INTROSPECT_URL",
            help="GraphQL endpoint to introspect (env: GQL_INTROSPECT_URL).",
        ),
        click.option(
            "--file",
            "-f",
            "file_path",
            type=click.Path(exists=True, dir_okay=False),
            help="Saved introspection response (JSON) to read instead of a URL.",
        ),
        click.option(
            "--header",
            "-H",
            "headers",
            multiple=True,
            help="Extra request header as 'Name: value'. Repeatable.",
        ),
        click.option(
            "--timeout",
            default=30.0,
            show_default=True,
            type=float,
            help="Request timeout in seconds.",
        ),
        click.option(
            "--verbose",
            "-v",
            is_flag=True,
            help="Enable verbose output.",
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def load_schema(
    url: str | None,
    file_path: str | None,
    headers: tuple[str, ...],
    timeout: float,
    verbose: bool,
) -> Schema:
    """Load the schema from a file or a live endpoint."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if bool(url) == bool(file_path):
        raise click.UsageError("Provide exactly one of --url or --file.")

    try:
        if file_path:
            return load_file(file_path)
        return asyncio.run(_fetch(url, parse_headers(headers), timeout))
    except (IntrospectionError, httpx.HTTPError) as e:
        raise click.ClickException(str(e)) from e


async def _fetch(url: str, headers: dict[str, str], timeout: float) -> Schema:
    async with IntrospectionClient(url, headers, timeout=timeout) as client:
        return await client.introspect()


@click.group()
@click.version_option(package_name="gql-introspect")
def main():
    """Inspect GraphQL schemas through introspection.

    List every query, mutation, subscription and type an endpoint exposes,
    and print SDL-like renderings of them.
    """
    pass


@main.command()
@source_options
@click.option(
    "--prefix",
    "-p",
    default="",
    help="Only list keys starting with this prefix (e.g. 'query.').",
)
@click.option(
    "--keys-only",
    "-k",
    is_flag=True,
    help="Print only the keys, not the rendered members.",
)
def index(url, file_path, headers, timeout, verbose, prefix, keys_only):
    """List every schema member as '<namespace>.<name>'.

    Examples:

        gql-introspect index --url https://countries.trevorblades.com/graphql -k

        gql-introspect index -f schema.json --prefix query.
    """
    schema = load_schema(url, file_path, headers, timeout, verbose)
    entries = build_index(schema)

    for key in sorted(entries):
        if not key.startswith(prefix):
            continue
        if keys_only:
            click.echo(key)
        else:
            click.echo(f"{key}\t{entries[key]}")


@main.command()
@source_options
@click.argument("key")
def show(url, file_path, headers, timeout, verbose, key):
    """Print the rendering of one member, e.g. 'query.country'."""
    schema = load_schema(url, file_path, headers, timeout, verbose)
    entries = build_index(schema)

    if key not in entries:
        raise click.ClickException(f"No schema member named {key!r}")
    click.echo(entries[key])


@main.command()
@source_options
@click.option(
    "--skip-deprecated",
    is_flag=True,
    help="Leave out deprecated fields and enum values.",
)
def sdl(url, file_path, headers, timeout, verbose, skip_deprecated):
    """Print an SDL-like rendering of every declared type."""
    schema = load_schema(url, file_path, headers, timeout, verbose)
    click.echo(render_schema(schema, include_deprecated=not skip_deprecated))


if __name__ == "__main__":
    main()
