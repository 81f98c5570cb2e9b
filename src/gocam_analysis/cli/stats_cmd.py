"""stats command: structural summary of GO-CAM models."""

import logging
from pathlib import Path

import click

from gocam_analysis.cli.common import iter_results, load_config_or_exit
from gocam_analysis.output import format_stats, write_stats_tsv, write_stats_yaml

logger = logging.getLogger(__name__)


@click.command('stats')
@click.argument(
    'paths',
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@click.option(
    '--output-dir',
    type=click.Path(path_type=Path),
    default=None,
    help='Write {model}.stats.yaml and per-distribution TSV files here instead of printing'
)
@click.pass_context
def stats_cmd(ctx, paths, output_dir):
    """Print structural statistics for GO-CAM models.

    Counts activities per molecular function and enabler kind, edges per
    relation, in/out-degree histograms and weakly-connected components.
    """
    config = load_config_or_exit(ctx)
    failures: list[Path] = []

    for result in iter_results(paths, config, failures):
        if output_dir is not None:
            yaml_path = write_stats_yaml(result, output_dir)
            write_stats_tsv(result, output_dir)
            click.echo(f"{result.model_id}: stats -> {yaml_path}")
        else:
            for line in format_stats(result):
                click.echo(line)

    if failures:
        ctx.exit(1)
