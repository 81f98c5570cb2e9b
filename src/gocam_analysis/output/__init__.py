"""Output generation: tables, file writers and terminal rendering."""

from gocam_analysis.output.tables import (
    FINDING_SCHEMA,
    TUPLE_SCHEMA,
    findings_to_frame,
    stats_to_frames,
    tuples_to_frame,
)
from gocam_analysis.output.text import format_findings, format_stats, format_tuple
from gocam_analysis.output.writers import (
    write_findings_tsv,
    write_frame_tsv,
    write_stats_tsv,
    write_stats_yaml,
)

__all__ = [
    "FINDING_SCHEMA",
    "TUPLE_SCHEMA",
    "findings_to_frame",
    "stats_to_frames",
    "tuples_to_frame",
    "format_findings",
    "format_stats",
    "format_tuple",
    "write_findings_tsv",
    "write_frame_tsv",
    "write_stats_tsv",
    "write_stats_yaml",
]
