"""Structural summary statistics for a GO-CAM model."""

from collections import Counter
from dataclasses import asdict, dataclass, field

import structlog

from gocam_analysis.analysis.traversal import build_adjacency, connected_components
from gocam_analysis.model.graph import ModelGraph

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StatsSummary:
    """Raw counts describing one model.

    Attributes:
        model_id: Id of the summarized model
        activity_count: Number of activities
        activities_by_molecular_function: Activity count per molecular function term id
        activities_by_enabler_kind: Activity count per enabler kind (gene, complex, ...)
        activities_without_enabler: Activities with no enabler
        activities_by_location: Activity count per located_in/occurs_in term id
        edge_count: Number of causal edges, including dangling and self-loop edges
        edges_by_relation: Edge count per relation label (relation id if unlabelled)
        in_degree_histogram: Number of activities per in-degree
        out_degree_histogram: Number of activities per out-degree
        component_count: Weakly-connected components among activities

    All mappings are sorted by key.
    """

    model_id: str
    activity_count: int = 0
    activities_by_molecular_function: dict[str, int] = field(default_factory=dict)
    activities_by_enabler_kind: dict[str, int] = field(default_factory=dict)
    activities_without_enabler: int = 0
    activities_by_location: dict[str, int] = field(default_factory=dict)
    edge_count: int = 0
    edges_by_relation: dict[str, int] = field(default_factory=dict)
    in_degree_histogram: dict[int, int] = field(default_factory=dict)
    out_degree_histogram: dict[int, int] = field(default_factory=dict)
    component_count: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def _sorted_counts(counter: Counter) -> dict:
    return dict(sorted(counter.items()))


def compute_stats(graph: ModelGraph) -> StatsSummary:
    """Summarize a model's structure.

    One pass over activities collects term, enabler, location and degree
    tallies; one pass over edges collects relation tallies; components are
    counted over the undirected graph of edges between known activities.

    Args:
        graph: ModelGraph of the model to summarize

    Returns:
        StatsSummary with raw counts
    """
    logger.info("compute_stats_start", model_id=graph.model.id, activity_count=len(graph))

    by_function: Counter = Counter()
    by_enabler: Counter = Counter()
    by_location: Counter = Counter()
    in_degrees: Counter = Counter()
    out_degrees: Counter = Counter()
    without_enabler = 0

    for activity in graph.all_activities():
        by_function[activity.molecular_function.id] += 1
        if activity.enabled_by is None:
            without_enabler += 1
        else:
            by_enabler[activity.enabled_by.kind.value] += 1
        # Count each location term once per activity
        for term_id in {term.id for term in activity.located_in + activity.occurs_in}:
            by_location[term_id] += 1
        in_degrees[len(graph.incoming_edges(activity.id))] += 1
        out_degrees[len(graph.outgoing_edges(activity.id))] += 1

    by_relation: Counter = Counter()
    for edge in graph.all_edges():
        by_relation[edge.relation_name()] += 1

    adjacency = build_adjacency(graph, graph.all_edges(), undirected=True)
    component_count = len(connected_components(adjacency))

    summary = StatsSummary(
        model_id=graph.model.id,
        activity_count=len(graph),
        activities_by_molecular_function=_sorted_counts(by_function),
        activities_by_enabler_kind=_sorted_counts(by_enabler),
        activities_without_enabler=without_enabler,
        activities_by_location=_sorted_counts(by_location),
        edge_count=len(graph.all_edges()),
        edges_by_relation=_sorted_counts(by_relation),
        in_degree_histogram=_sorted_counts(in_degrees),
        out_degree_histogram=_sorted_counts(out_degrees),
        component_count=component_count,
    )

    logger.info(
        "compute_stats_complete",
        model_id=summary.model_id,
        activity_count=summary.activity_count,
        edge_count=summary.edge_count,
        component_count=summary.component_count,
    )

    return summary
