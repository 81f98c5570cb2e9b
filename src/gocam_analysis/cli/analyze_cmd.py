"""analyze command: holes and statistics in one pass per model."""

import logging
from pathlib import Path

import click

from gocam_analysis.cli.common import iter_results, load_config_or_exit
from gocam_analysis.output import (
    format_findings,
    format_stats,
    write_findings_tsv,
    write_stats_yaml,
)

logger = logging.getLogger(__name__)


@click.command('analyze')
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
    help='Write holes TSV and stats YAML per model here instead of printing'
)
@click.option(
    '--parallel',
    is_flag=True,
    help='Run hole detection and statistics concurrently for each model'
)
@click.pass_context
def analyze_cmd(ctx, paths, output_dir, parallel):
    """Run hole detection and statistics for GO-CAM models."""
    config = load_config_or_exit(ctx)
    failures: list[Path] = []

    for result in iter_results(paths, config, failures, parallel=parallel):
        if output_dir is not None:
            holes_path = write_findings_tsv(result, output_dir)
            stats_path = write_stats_yaml(result, output_dir)
            click.echo(f"{result.model_id}: {holes_path}, {stats_path}")
            continue

        click.echo(click.style(f"=== {result.model_id} ===", bold=True))
        for line in format_stats(result):
            click.echo(line)
        click.echo(f"  Findings: {len(result.findings)}")
        for line in format_findings(result):
            click.echo(f"  {line}")
        click.echo()

    if failures:
        ctx.exit(1)
