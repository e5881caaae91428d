"""Command-line interface for graphdesc."""

import logging
import sys

import click
from pydantic import ValidationError

from .config import BuildSettings, DuplicatePolicy
from .description.builder import build_description
from .description.errors import DescriptionError
from .description.model import Description
from .description.serde import dumps, format_for_path, load
from .output.formatter import format_build_error, format_description, format_node_report
from .schema.errors import SchemaLoadError, SchemaValidationError
from .schema.loader import parse_declaration

DUPLICATE_CHOICES = [policy.value for policy in DuplicatePolicy]


def _duplicates_option(func):
    return click.option(
        "--duplicates",
        type=click.Choice(DUPLICATE_CHOICES),
        default=None,
        help="Duplicate edge policy (defaults to GRAPHDESC_DUPLICATES or allow_duplicates)",
    )(func)


def _load_settings(duplicates: str | None) -> BuildSettings:
    try:
        return BuildSettings.from_env().with_overrides(duplicates=duplicates)
    except ValidationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)


def _build_from_file(declaration_file: str, settings: BuildSettings, output_format: str) -> Description:
    """Parse and build a declaration, exiting with the right code on failure."""
    try:
        declaration = parse_declaration(declaration_file)
        return build_description(declaration, settings)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        _echo_schema_error(e)
        sys.exit(2)
    except DescriptionError as e:
        click.echo(format_build_error(e, output_format))  # type: ignore
        sys.exit(1)


def _echo_schema_error(error: SchemaValidationError) -> None:
    click.echo(f"Schema validation error: {error}", err=True)
    for err in error.errors:
        click.echo(f"  - {err['loc']}: {err['msg']}", err=True)


@click.group()
@click.version_option(package_name="graphdesc")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """graphdesc: compile node and edge group declarations into descriptions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("declaration_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@_duplicates_option
def check(declaration_file: str, output_format: str, duplicates: str | None):
    """Build a declaration file and print a summary.

    DECLARATION_FILE is the path to a YAML or JSON declaration.

    Exit codes:
      0 - Build succeeded
      1 - Build failed (duplicate or unknown names)
      2 - File, schema or configuration error
    """
    settings = _load_settings(duplicates)
    description = _build_from_file(declaration_file, settings, output_format)
    click.echo(format_description(description, output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.argument("declaration_file", type=click.Path(exists=True))
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the description to a file instead of stdout",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default=None,
    help="Serialization format (defaults to the output file suffix, else json)",
)
@_duplicates_option
def build(
    declaration_file: str,
    output_file: str | None,
    output_format: str | None,
    duplicates: str | None,
):
    """Build a declaration file and emit the serialized description.

    DECLARATION_FILE is the path to a YAML or JSON declaration.

    Exit codes:
      0 - Build succeeded
      1 - Build failed (duplicate or unknown names)
      2 - File, schema or configuration error
    """
    settings = _load_settings(duplicates)
    description = _build_from_file(declaration_file, settings, "text")

    if output_format is None:
        output_format = format_for_path(output_file) if output_file else "json"
    text = dumps(description, output_format)  # type: ignore

    if output_file:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(text)
        click.echo(f"Wrote: {output_file}")
    else:
        click.echo(text)
    sys.exit(0)


@main.command()
@click.argument("description_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--node", "node_name", default=None, help="Report queries for one node")
def show(description_file: str, output_format: str, node_name: str | None):
    """Load a serialized description and print it.

    DESCRIPTION_FILE is a JSON or YAML file written by ``graphdesc build``.
    It is validated exactly like a fresh build.

    Exit codes:
      0 - Loaded
      1 - Description failed validation, or --node names an unknown node
      2 - File or schema error
    """
    try:
        description = load(description_file)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        _echo_schema_error(e)
        sys.exit(2)
    except DescriptionError as e:
        click.echo(format_build_error(e, output_format))  # type: ignore
        sys.exit(1)

    if node_name is None:
        click.echo(format_description(description, output_format))  # type: ignore
        sys.exit(0)

    click.echo(format_node_report(description, node_name, output_format))  # type: ignore
    sys.exit(0 if description.node_id(node_name) is not None else 1)


if __name__ == "__main__":
    main()
