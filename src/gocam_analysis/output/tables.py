"""Tabular views of findings, statistics and fact tuples."""

import polars as pl

from gocam_analysis.analysis.holes import Finding
from gocam_analysis.analysis.stats import StatsSummary
from gocam_analysis.model.loader import FactTuple

FINDING_SCHEMA = {
    "model_id": pl.Utf8,
    "activity_id": pl.Utf8,
    "kind": pl.Utf8,
    "detail": pl.Utf8,
}

TUPLE_SCHEMA = {
    "model_id": pl.Utf8,
    "model_title": pl.Utf8,
    "subject_label": pl.Utf8,
    "subject_id": pl.Utf8,
    "property_label": pl.Utf8,
    "object_label": pl.Utf8,
    "object_id": pl.Utf8,
}


def findings_to_frame(findings: list[Finding], model_id: str) -> pl.DataFrame:
    """
    Convert findings to a DataFrame, preserving their order.

    Args:
        findings: Findings as returned by find_holes
        model_id: Model id written in every row

    Returns:
        DataFrame with columns model_id, activity_id, kind, detail
    """
    return pl.DataFrame(
        {
            "model_id": [model_id] * len(findings),
            "activity_id": [f.activity_id for f in findings],
            "kind": [f.kind.value for f in findings],
            "detail": [f.detail for f in findings],
        },
        schema=FINDING_SCHEMA,
    )


def _count_frame(counts: dict, key_name: str) -> pl.DataFrame:
    return pl.DataFrame(
        {key_name: list(counts.keys()), "count": list(counts.values())},
        schema={key_name: pl.Utf8, "count": pl.Int64},
    )


def stats_to_frames(summary: StatsSummary) -> dict[str, pl.DataFrame]:
    """
    Split a StatsSummary into one DataFrame per distribution.

    Returns:
        Dict with keys:
        - molecular_function: term, count
        - enabler_kind: kind, count
        - location: term, count
        - relation: relation, count
        - degree: degree, in_count, out_count (one row per degree seen)
    """
    degrees = sorted(set(summary.in_degree_histogram) | set(summary.out_degree_histogram))
    degree_frame = pl.DataFrame(
        {
            "degree": degrees,
            "in_count": [summary.in_degree_histogram.get(d, 0) for d in degrees],
            "out_count": [summary.out_degree_histogram.get(d, 0) for d in degrees],
        },
        schema={"degree": pl.Int64, "in_count": pl.Int64, "out_count": pl.Int64},
    )

    return {
        "molecular_function": _count_frame(summary.activities_by_molecular_function, "term"),
        "enabler_kind": _count_frame(summary.activities_by_enabler_kind, "kind"),
        "location": _count_frame(summary.activities_by_location, "term"),
        "relation": _count_frame(summary.edges_by_relation, "relation"),
        "degree": degree_frame,
    }


def tuples_to_frame(tuples: list[FactTuple]) -> pl.DataFrame:
    """Convert fact tuples to a DataFrame in document order."""
    return pl.DataFrame(
        {name: [getattr(t, name) for t in tuples] for name in TUPLE_SCHEMA},
        schema=TUPLE_SCHEMA,
    )
