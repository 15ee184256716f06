import logging
import sys

import click

from .exceptions import SchemaToTsClientError
from .loader import DEFAULT_SCHEMA_SOURCE, load_schema
from .pipeline import GeneratorConfig, Materializer, PipelineGenerator

DEFAULT_OUTPUT_DIR = "src/generated"

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Send the package's log records to stderr."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%H:%M:%S"))

    package_logger = logging.getLogger("schema_to_ts_client")
    package_logger.setLevel(level)
    # Drop handlers from earlier calls in the same process
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every generated file")
@click.argument("source", default=DEFAULT_SCHEMA_SOURCE, type=str)
@click.argument("output", default=DEFAULT_OUTPUT_DIR, type=click.Path(file_okay=False, resolve_path=True))
def schema_to_ts_client(config, verbose, source, output):
    """Generate a TypeScript client from the schema at SOURCE into OUTPUT.

    SOURCE is an http(s) URL, unix:<socket>:<path>, or a JSON file.
    OUTPUT is removed and regenerated on every run.
    """
    configure_logging(verbose)

    logger.info("Generating code...")
    try:
        config = GeneratorConfig.from_file(config) if config is not None else GeneratorConfig()
        document = load_schema(source, timeout=config.schema_timeout)
        manifest = PipelineGenerator(document, config).generate()
    except SchemaToTsClientError as e:
        raise click.ClickException(str(e)) from e

    Materializer(output).write(manifest)
    click.echo(f"TypeScript client generated in {output}")
