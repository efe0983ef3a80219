import json
import sys

import click

from .cli_utils import reconstruct_command_line, setup_logging
from .pipeline import AnalyzerConfig, Compiler
from .pipeline.config import OUTPUT_FORMATS


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--format", "-f", "output_format", default=None, type=click.Choice(["text", "json"]))
@click.option(
    "--sort-roots",
    is_flag=True,
    default=False,
    help="Visit definitions alphabetically instead of in source order",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("path", type=click.File("r", encoding="utf-8"))
@click.argument("output", required=False, default="-", type=click.File("w", encoding="utf-8"))
def simcom(config, output_format, sort_roots, verbose, path, output):
    """Order the type definitions in PATH by dependency (PATH may be -)."""
    setup_logging(verbose)

    if config is not None:
        with open(config) as f:
            config = AnalyzerConfig.from_dict(json.load(f))
    else:
        config = AnalyzerConfig()

    # CLI flags override the config file
    if output_format is not None:
        config.output_format = output_format
    if sort_roots:
        config.sort_roots = True
    if config.output_format not in OUTPUT_FORMATS:
        raise click.BadParameter(
            f"Unknown output format {config.output_format!r}, expected one of: {', '.join(OUTPUT_FORMATS)}",
            param_hint="--config",
        )

    compiler = Compiler(config, reconstruct_command_line(simcom))
    report, ok = compiler.report(path.read())

    if not ok:
        click.echo(report, err=True, nl=False)
        sys.exit(1)

    output.write(report)
