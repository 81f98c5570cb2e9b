"""Plain-text rendering of analysis output for the terminal."""

from gocam_analysis.analysis.runner import AnalysisResult
from gocam_analysis.model.loader import FactTuple


def format_findings(result: AnalysisResult) -> list[str]:
    """One tab-separated line per finding: model id, activity id, kind, detail."""
    return [
        f"{result.model_id}\t{f.activity_id}\t{f.kind.value}\t{f.detail}"
        for f in result.findings
    ]


def _format_counts(title: str, counts: dict) -> list[str]:
    lines = [f"  {title}:"]
    if not counts:
        lines.append("    (none)")
    for key, count in counts.items():
        lines.append(f"    {key}: {count}")
    return lines


def format_stats(result: AnalysisResult) -> list[str]:
    """Multi-line summary block for one model."""
    summary = result.summary
    lines = [
        f"{result.model_id}\t{result.model_title}",
        f"  Activities: {summary.activity_count}",
        f"  Activities without enabler: {summary.activities_without_enabler}",
        f"  Causal edges: {summary.edge_count}",
        f"  Connected components: {summary.component_count}",
    ]
    lines += _format_counts("Activities by enabler kind", summary.activities_by_enabler_kind)
    lines += _format_counts("Activities by molecular function", summary.activities_by_molecular_function)
    lines += _format_counts("Activities by location", summary.activities_by_location)
    lines += _format_counts("Edges by relation", summary.edges_by_relation)
    lines += _format_counts("In-degree histogram", summary.in_degree_histogram)
    lines += _format_counts("Out-degree histogram", summary.out_degree_histogram)
    return lines


def format_tuple(fact: FactTuple) -> str:
    return "\t".join([
        fact.model_id,
        fact.model_title,
        fact.subject_label,
        fact.subject_id,
        fact.property_label,
        fact.object_label,
        fact.object_id,
    ])
