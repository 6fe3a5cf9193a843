import json
import logging
from pathlib import Path

import click

from .pipeline import CodeGeneratorConfig, GenerationMode, OutputMode, PipelineGenerator, WsTsGenError, load_document


@click.command()
@click.option(
    "--mode",
    "-m",
    default=None,
    type=click.Choice([m.value for m in GenerationMode]),
    help="Generate the server side, the client side, or both (default: both)",
)
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite existing output files")
@click.option("--no-examples", is_flag=True, default=False, help="Skip index.ts and client-example.ts")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every pipeline stage")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("output", default="dist", type=click.Path(file_okay=False, resolve_path=True))
def ws_ts_gen(mode, config, force, no_examples, verbose, path, output):
    """Generate TypeScript WebSocket code from the AsyncAPI document at PATH into OUTPUT."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        try:
            with open(config) as f:
                config = CodeGeneratorConfig.from_dict(json.load(f))
        except (json.JSONDecodeError, ValueError, TypeError, AttributeError) as exc:
            raise click.ClickException(f"Invalid config file {config}: {exc}") from exc
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if mode is not None:
        config.mode = GenerationMode(mode)
    if force:
        config.output.mode = OutputMode.FORCE
    if no_examples:
        config.generate_examples = False

    try:
        document = load_document(path)
        codegen = PipelineGenerator(Path(path).stem, document, config)
        written = codegen.write(output)
    except (WsTsGenError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc

    for file_path in written:
        click.echo(f"Generated {file_path.name} at: {file_path}")
