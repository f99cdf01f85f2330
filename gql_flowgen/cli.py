"""Command-line interface for gql-flowgen."""

import asyncio
import json
import shlex
from pathlib import Path

import click

from .core.auth import BearerAuth, CombinedAuth, HeaderAuth
from .core.hooks import (
    AddHeaderHook,
    ExternalFormatterHook,
    FilterTypesHook,
    FormatterError,
    HookRunner,
)
from .core.introspection import IntrospectionClient, IntrospectionError
from .core.ir import GeneratorOptions, IRSchema
from .core.module import ModuleGenerator
from .core.parser import IntrospectionParser, SchemaParseError
from .core.resolver import TypeDepthError

DEFAULT_OUTPUT_FILE = "graphql-export.flow.js"


def split_ignored_types(values: tuple[str, ...]) -> frozenset[str]:
    """Flatten repeated, comma-delimited --ignored-types values."""
    names = set()
    for value in values:
        names.update(name.strip() for name in value.split(",") if name.strip())
    return frozenset(names)


def split_command(value: str) -> list[str]:
    """Split a --formatter value into an argument list."""
    try:
        command = shlex.split(value)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--formatter")
    if not command:
        raise click.BadParameter("command is empty", param_hint="--formatter")
    return command


def build_auth(bearer_token: str | None, http_headers: tuple[str, ...]) -> CombinedAuth:
    handlers = []
    if bearer_token:
        handlers.append(BearerAuth(bearer_token))
    if http_headers:
        try:
            handlers.append(HeaderAuth.from_strings(http_headers))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--http-header")
    return CombinedAuth(*handlers)


def fetch_introspection(url: str, auth, timeout: float) -> dict:
    client = IntrospectionClient(url, auth=auth, timeout=timeout)
    try:
        return asyncio.run(client.fetch())
    except IntrospectionError as e:
        raise click.UsageError(f"Cannot introspect {url}: {e.message}")


def endpoint_options(f):
    """Options shared by commands that talk to an endpoint."""
    f = click.option(
        "--timeout",
        default=30.0,
        show_default=True,
        type=float,
        help="Request timeout in seconds.",
    )(f)
    f = click.option(
        "--http-header",
        "-H",
        "http_headers",
        multiple=True,
        help="Extra request header as 'Name: value' (repeatable).",
    )(f)
    f = click.option(
        "--bearer-token",
        envvar="GQL_FLOWGEN_TOKEN",
        help="Bearer token for the endpoint (env: GQL_FLOWGEN_TOKEN).",
    )(f)
    return f


@click.group()
@click.version_option()
def main():
    """Flow type generator for GraphQL schemas.

    Generate Flow type declarations from GraphQL introspection results.
    """
    pass


@main.command()
@click.argument("schema", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--url",
    help="GraphQL endpoint to introspect instead of reading SCHEMA.",
)
@click.option(
    "--output-file",
    "-o",
    default=DEFAULT_OUTPUT_FILE,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Output file for the generated declarations.",
)
@click.option(
    "--module-name",
    "-m",
    default="GQL",
    show_default=True,
    help="Name of the export module.",
)
@click.option(
    "--ignored-types",
    "-i",
    multiple=True,
    help="Names of types to ignore (comma delimited, repeatable).",
)
@click.option(
    "--export",
    "-e",
    "export",
    is_flag=True,
    help="Export the generated types.",
)
@click.option(
    "--post-fix",
    "-p",
    default="",
    help="Suffix added to every generated type name.",
)
@click.option(
    "--exclude-prefix",
    help="Drop schema types whose name starts with this prefix.",
)
@click.option(
    "--header",
    help="Banner text placed above the generated module.",
)
@click.option(
    "--formatter",
    help="Formatter command reading stdin, e.g. 'prettier --parser flow'.",
)
@click.option(
    "--template-dir",
    type=click.Path(exists=True, file_okay=False),
    help="Directory with a custom module.js.j2 template.",
)
@endpoint_options
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str | None,
    url: str | None,
    output_file: str,
    module_name: str,
    ignored_types: tuple[str, ...],
    export: bool,
    post_fix: str,
    exclude_prefix: str | None,
    header: str | None,
    formatter: str | None,
    template_dir: str | None,
    bearer_token: str | None,
    http_headers: tuple[str, ...],
    timeout: float,
    verbose: bool,
):
    """Generate Flow types from a GraphQL schema.

    SCHEMA is an introspection result (.json) or a GraphQL SDL file
    (.graphql, .graphqls, .gql).

    Examples:

        gql-flowgen generate schema.json -o types.flow.js

        gql-flowgen generate schema.graphql -e -p Gql -i Node,PageInfo

        gql-flowgen generate --url https://api.example.com/graphql
    """
    if bool(schema) == bool(url):
        raise click.UsageError("Provide exactly one of SCHEMA or --url.")

    options = GeneratorOptions(
        ignored_types=split_ignored_types(ignored_types),
        export=export,
        post_fix=post_fix,
        module_name=module_name,
    )
    output_path = Path(output_file).resolve()

    if verbose:
        click.echo(f"Schema: {schema or url}")
        click.echo(f"Output: {output_path}")
        if options.ignored_types:
            click.echo(f"Ignored types: {', '.join(sorted(options.ignored_types))}")

    parser = IntrospectionParser(schema)
    try:
        if url:
            click.echo(f"Introspecting {url}...")
            document = fetch_introspection(url, build_auth(bearer_token, http_headers), timeout)
            ir = parser.parse_document(document)
        else:
            click.echo("Parsing schema...")
            ir = parser.parse_file()
    except (SchemaParseError, TypeDepthError) as e:
        raise click.UsageError(str(e))

    if verbose:
        _echo_counts(ir)

    hooks = HookRunner()
    if exclude_prefix:
        hooks.add_pre_hook(FilterTypesHook(exclude_prefix=exclude_prefix))
    if formatter is not None:
        hooks.add_post_hook(ExternalFormatterHook(split_command(formatter)))
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    click.echo("Generating declarations...")
    generator = ModuleGenerator(ir, options, template_dir=template_dir, hooks=hooks)
    try:
        content = generator.write(str(output_path))
    except (FormatterError, TypeDepthError) as e:
        raise click.UsageError(str(e))

    if verbose:
        click.echo(f"  Lines: {len(content.splitlines())}")

    click.echo(f"Done! Generated declarations in {output_path}")


@main.command()
@click.option("--url", required=True, help="GraphQL endpoint to introspect.")
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False),
    help="Output file for the introspection JSON.",
)
@endpoint_options
def introspect(
    url: str,
    output: str,
    bearer_token: str | None,
    http_headers: tuple[str, ...],
    timeout: float,
):
    """Save the introspection result of an endpoint as JSON.

    Example:

        gql-flowgen introspect --url https://api.example.com/graphql -o schema.json
    """
    document = fetch_introspection(url, build_auth(bearer_token, http_headers), timeout)
    output_path = Path(output).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)
        f.write("\n")
    click.echo(f"Wrote introspection result to {output_path}")


def _echo_counts(ir: IRSchema):
    for kind, count in sorted(ir.count_by_kind().items(), key=lambda item: item[0].value):
        click.echo(f"  {kind.value.title().replace('_', ' ')}: {count}")
    click.echo(f"  Query type: {_root_label(ir, ir.query_type)}")
    click.echo(f"  Mutation type: {_root_label(ir, ir.mutation_type)}")


def _root_label(ir: IRSchema, name: str | None) -> str:
    if not name:
        return "-"
    if ir.get_type_by_name(name) is None:
        return f"{name} (not declared in schema)"
    return name


if __name__ == "__main__":
    main()
