"""find-holes command: report activities with incomplete causal context."""

import logging
from pathlib import Path

import click

from gocam_analysis.cli.common import iter_results, load_config_or_exit
from gocam_analysis.output import format_findings, write_findings_tsv

logger = logging.getLogger(__name__)


@click.command('find-holes')
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
    help='Write one {model}.holes.tsv per model here instead of printing'
)
@click.pass_context
def find_holes_cmd(ctx, paths, output_dir):
    """Find holes in GO-CAM models.

    Prints one tab-separated line per finding: model id, activity id, hole
    kind and detail. Findings are ordered by activity id, then kind.

    Examples:

        # Report holes for two models
        gocam-analysis find-holes model1.json model2.json

        # Write TSV files instead
        gocam-analysis find-holes --output-dir holes/ models/*.json
    """
    config = load_config_or_exit(ctx)
    failures: list[Path] = []
    total_findings = 0

    for result in iter_results(paths, config, failures):
        total_findings += len(result.findings)
        if output_dir is not None:
            path = write_findings_tsv(result, output_dir)
            click.echo(f"{result.model_id}: {len(result.findings)} findings -> {path}")
        else:
            for line in format_findings(result):
                click.echo(line)

    logger.info(f"Found {total_findings} holes in {len(paths) - len(failures)} models")

    if failures:
        ctx.exit(1)
