import json
import logging

import click

from .pipeline import GenerationError, GeneratorConfig, OverrideStore, PipelineGenerator

logger = logging.getLogger(__name__)


def load_config(path: str) -> GeneratorConfig:
    """Load the generator configuration file, failing with a usage error when it is invalid."""
    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise click.ClickException(f"Invalid config file {path}: expected a JSON object, got {type(data).__name__}")
    if not isinstance(data.get("type_map", {}), dict):
        raise click.ClickException(f"Invalid config file {path}: 'type_map' must be an object")

    return GeneratorConfig.from_dict(data)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "--strip",
    is_flag=True,
    default=False,
    help="Do not emit documentation comments (overrides config file if set)",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every generated declaration")
@click.argument("complex_dir", type=click.Path(resolve_path=True))
@click.argument("simple_dir", type=click.Path(resolve_path=True))
@click.argument("output", type=click.Path(dir_okay=False, resolve_path=True))
@click.argument("overrides", required=False, default=None, type=click.Path(dir_okay=False, resolve_path=True))
def wsdl_to_types(config, strip, verbose, complex_dir, simple_dir, output, overrides):
    """Generate TypeScript declarations from WSDL schema fragments.

    COMPLEX_DIR and SIMPLE_DIR hold one JSON record per complex and simple
    schema type. OVERRIDES is an optional JSON file of override rules.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s - %(message)s",
    )

    if config is not None:
        config = load_config(config)
    else:
        config = GeneratorConfig()

    if strip:
        config.strip_comments = True
    logger.debug(f"Generator config: {config.to_dict()}")

    store = OverrideStore()
    store.load(overrides)

    codegen = PipelineGenerator(complex_dir, simple_dir, config, store)
    try:
        codegen.write(output)
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    degraded = [report for report in codegen.reports if not report.ok]
    logger.info(f"Generated {len(codegen.registry)} declarations, {len(degraded)} with warnings")
