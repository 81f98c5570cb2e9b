"""Main CLI entry point for gocam-analysis.

Provides command group with global options and subcommands for model analysis.
"""

import logging
from pathlib import Path

import click
import structlog

from gocam_analysis import __version__
from gocam_analysis.cli.common import load_config_from_context, parse_overrides
from gocam_analysis.cli.holes_cmd import find_holes_cmd
from gocam_analysis.cli.stats_cmd import stats_cmd
from gocam_analysis.cli.analyze_cmd import analyze_cmd
from gocam_analysis.cli.tuples_cmd import tuples_cmd


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Route structlog events through stdlib logging so stdout carries only report output
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.processors.KeyValueRenderer(key_order=["event"]),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
)


@click.group()
@click.option(
    '--config',
    type=click.Path(exists=True, path_type=Path),
    default='config/default.yaml',
    help='Path to analysis configuration YAML file'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Enable verbose logging (DEBUG level)'
)
@click.option(
    '--set',
    'overrides',
    multiple=True,
    metavar='KEY=VALUE',
    callback=parse_overrides,
    help='Override a config value, e.g. --set root_molecular_function_terms="[GO:0003674]" (repeatable)'
)
@click.pass_context
def cli(ctx, config, verbose, overrides):
    """gocam-analysis: find holes and summarize the structure of GO-CAM models.

    Reads GO-CAM JSON documents, reports activities whose causal chain is
    incomplete or inconsistent, and prints structural statistics.
    """
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config
    ctx.obj['verbose'] = verbose
    ctx.obj['overrides'] = overrides

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.debug("Verbose logging enabled")


@cli.command()
@click.pass_context
def info(ctx):
    """Display version and configuration summary."""
    config_path = ctx.obj['config_path']

    click.echo(f"gocam-analysis v{__version__}")
    click.echo(f"Config: {config_path}")
    click.echo()

    try:
        config = load_config_from_context(ctx)

        config_hash = config.config_hash()
        click.echo(f"Config Hash: {config_hash[:16]}...")
        if ctx.obj['overrides']:
            click.echo(f"Overrides: {', '.join(sorted(ctx.obj['overrides']))}")
        click.echo()

        click.echo(click.style("Causal Relations:", bold=True))
        for relation in config.causal_relations:
            click.echo(f"  {relation}")
        click.echo()

        click.echo(click.style("Root Molecular Function Terms:", bold=True))
        for term in config.root_molecular_function_terms:
            click.echo(f"  {term}")
        click.echo()

        click.echo(click.style("Enabler Prefixes:", bold=True))
        for kind, prefixes in config.enablers.model_dump().items():
            click.echo(f"  {kind}: {', '.join(prefixes)}")

    except Exception as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        ctx.exit(1)


# Register commands
cli.add_command(find_holes_cmd)
cli.add_command(stats_cmd)
cli.add_command(analyze_cmd)
cli.add_command(tuples_cmd)


if __name__ == '__main__':
    cli()
