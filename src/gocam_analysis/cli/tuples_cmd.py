"""tuples command: flatten GO-CAM facts to labelled rows."""

import logging
from pathlib import Path

import click

from gocam_analysis.exceptions import DocumentError
from gocam_analysis.model import fact_tuples, load_document
from gocam_analysis.output import format_tuple, tuples_to_frame, write_frame_tsv

logger = logging.getLogger(__name__)


@click.command('tuples')
@click.argument(
    'paths',
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@click.option(
    '--output',
    type=click.Path(path_type=Path),
    default=None,
    help='Write all tuples to one TSV file instead of printing'
)
@click.pass_context
def tuples_cmd(ctx, paths, output):
    """Print every fact as model id, title, subject label/id, property, object label/id."""
    failures: list[Path] = []
    all_tuples = []

    for path in paths:
        try:
            document = load_document(path)
        except (FileNotFoundError, DocumentError) as e:
            click.echo(click.style(f"Error: {path}: {e}", fg='red'), err=True)
            failures.append(path)
            continue

        tuples = fact_tuples(document)
        if output is not None:
            all_tuples.extend(tuples)
        else:
            for fact in tuples:
                click.echo(format_tuple(fact))

    if output is not None:
        write_frame_tsv(tuples_to_frame(all_tuples), output)
        click.echo(f"Wrote {len(all_tuples)} tuples to {output}")

    if failures:
        ctx.exit(1)
