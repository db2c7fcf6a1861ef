import json
import logging
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .config import CodeGeneratorConfig, OutputMode
from .generator import TypeBoxGenerator
from .loader import SchemaLoadError, load_schema
from .writer import OutputExistsError, write_output


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Name of the root declaration")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--format", "format_", is_flag=True, default=False, help="Format the output with prettier")
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log translation details")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
def json_schema_to_typebox(name, config, format_, force, verbose, path, output):
    """Generate TypeBox declarations from the JSON Schema at PATH.

    The result is written to OUTPUT, or to stdout when OUTPUT is omitted.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        schema = load_schema(path)
    except SchemaLoadError as e:
        raise click.ClickException(str(e)) from e

    if config is not None:
        try:
            with open(config) as f:
                config = CodeGeneratorConfig.from_dict(json.load(f))
        except (json.JSONDecodeError, TypeError, ValueError) as e:
            raise click.ClickException(f"Invalid config file {config}: {e}") from e
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if format_:
        config.formatter.enabled = True
    if force:
        config.output.mode = OutputMode.FORCE

    if name is None and not isinstance(schema.get("title"), str):
        name = Path(path).stem

    command_line = reconstruct_command_line(json_schema_to_typebox)
    out = TypeBoxGenerator(schema, name, config, command_line).generate()

    if output is None:
        click.echo(out, nl=False)
        return

    try:
        write_output(output, out, config.output)
    except OutputExistsError as e:
        raise click.ClickException(str(e)) from e
