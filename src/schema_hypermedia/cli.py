"""CLI entry point for schema-hypermedia."""

import json
import logging
from pathlib import Path

import click
import yaml

from schema_hypermedia.errors import HypermediaError
from schema_hypermedia.generator import HypermediaGenerator
from schema_hypermedia.schema.loader import load_schema_file, read_document
from schema_hypermedia.schema.validator import validate_entity
from schema_hypermedia.template.scanner import LEFT_DELIM, RIGHT_DELIM, find_placeholders


def _load_entity(file_path: Path) -> dict:
    """Load the entity object from a JSON or YAML file."""
    try:
        entity = read_document(file_path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise click.ClickException(f"Entity file {file_path} cannot be parsed: {e}") from e
    if not isinstance(entity, dict):
        raise click.ClickException(f"Entity file {file_path} must contain an object")
    return entity


def _parse_data(values: tuple[str, ...]) -> dict[str, str]:
    """Turn KEY=VALUE pairs into placeholder tokens for the value cache."""
    data = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--data")
        data[f"{LEFT_DELIM}{key}{RIGHT_DELIM}"] = value
    return data


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log resolution details.")
def main(verbose: bool):
    """Schema Hypermedia — resolve schema link templates against entities."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("entity_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--data", "data", multiple=True, help="Extra placeholder value as KEY=VALUE.")
@click.option("--indent", default=2, type=int, help="JSON indentation of the output.")
def links(schema_path: Path, entity_path: Path, data: tuple[str, ...], indent: int):
    """Print the resolved links of an entity as JSON."""
    generator = HypermediaGenerator(additional_data=_parse_data(data))
    entity = _load_entity(entity_path)
    try:
        result = generator.get_links(load_schema_file(schema_path), entity)
    except HypermediaError as e:
        raise click.ClickException(str(e)) from e

    click.echo(json.dumps([link.model_dump() for link in result], indent=indent))


@main.command()
@click.argument("schema_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("entity_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(schema_path: Path, entity_path: Path):
    """Check an entity against a schema without resolving links."""
    entity = _load_entity(entity_path)
    try:
        validate_entity(load_schema_file(schema_path), entity)
    except HypermediaError as e:
        raise click.ClickException(str(e)) from e
    click.echo("valid")


@main.command()
@click.argument("template")
def placeholders(template: str):
    """List the placeholders of a link template, one per line."""
    for token in find_placeholders(template):
        click.echo(token)
