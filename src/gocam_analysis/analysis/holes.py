"""Hole detection: activities whose annotation or causal context is incomplete.

Every check runs over every activity and an activity may collect several
findings. Malformed edges are reported, never raised, so detection always
completes and returns the full finding list.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum

import structlog

from gocam_analysis.analysis.traversal import build_adjacency, reachable_from
from gocam_analysis.config.schema import AnalysisConfig
from gocam_analysis.exceptions import LookupMiss
from gocam_analysis.model.graph import ModelGraph
from gocam_analysis.model.models import CausalEdge

logger = structlog.get_logger(__name__)


class HoleKind(str, Enum):
    """Closed set of hole kinds, declared in reporting order."""

    MISSING_ENABLER = "MissingEnabler"
    ROOT_MOLECULAR_FUNCTION = "RootMolecularFunction"
    NO_CAUSAL_NEIGHBOR = "NoCausalNeighbor"
    DANGLING_EDGE_REFERENCE = "DanglingEdgeReference"
    SELF_LOOP = "SelfLoop"
    ORPHAN_CHAIN = "OrphanChain"

    @property
    def order(self) -> int:
        return _KIND_ORDER[self]


_KIND_ORDER = {kind: position for position, kind in enumerate(HoleKind)}


@dataclass(frozen=True)
class Finding:
    """One hole found in a model.

    Attributes:
        activity_id: Activity the finding is about. For dangling references
            this is the id that failed to resolve.
        kind: HoleKind of the finding
        detail: Human-readable description
    """

    activity_id: str
    kind: HoleKind
    detail: str

    def sort_key(self) -> tuple[str, int, str]:
        return (self.activity_id, self.kind.order, self.detail)


def _describe_edge(edge: CausalEdge) -> str:
    return f"{edge.subject} -[{edge.relation_name()}]-> {edge.object}"


def check_activities(graph: ModelGraph, config: AnalysisConfig) -> list[Finding]:
    """Per-activity checks: missing enabler, root molecular function, isolation."""
    findings: list[Finding] = []

    for activity in graph.all_activities():
        if activity.enabled_by is None:
            findings.append(Finding(
                activity.id,
                HoleKind.MISSING_ENABLER,
                f"{activity.molecular_function.label_or_id()} has no enabler",
            ))

        if config.is_root_molecular_function(activity.molecular_function.id):
            findings.append(Finding(
                activity.id,
                HoleKind.ROOT_MOLECULAR_FUNCTION,
                f"molecular function is the unrefined term {activity.molecular_function.id}",
            ))

        if not graph.incoming_edges(activity.id) and not graph.outgoing_edges(activity.id):
            findings.append(Finding(
                activity.id,
                HoleKind.NO_CAUSAL_NEIGHBOR,
                "no incoming or outgoing causal edge",
            ))

    return findings


def check_edges(graph: ModelGraph) -> list[Finding]:
    """Per-edge checks: dangling endpoint references and self-loops."""
    findings: list[Finding] = []

    for edge in graph.all_edges():
        for role, endpoint in (("subject", edge.subject), ("object", edge.object)):
            try:
                graph.require_activity(endpoint)
            except LookupMiss as miss:
                findings.append(Finding(
                    miss.activity_id,
                    HoleKind.DANGLING_EDGE_REFERENCE,
                    f"{role} of edge {_describe_edge(edge)} is not an activity in the model",
                ))

        if graph.is_self_loop(edge):
            findings.append(Finding(
                edge.subject,
                HoleKind.SELF_LOOP,
                f"edge {_describe_edge(edge)} starts and ends at the same activity",
            ))

    return findings


def check_orphan_chains(graph: ModelGraph, config: AnalysisConfig) -> list[Finding]:
    """Flag activities no causal path reaches from any root activity.

    Roots are activities without an incoming edge from another activity,
    whatever the relation. Only edges whose relation is in the configured
    causal allow-list are followed. Self-loops and dangling edges are
    already reported by check_edges and play no part here.
    """
    ids = graph.activity_ids()
    edges = graph.resolved_edges()

    has_incoming = [False] * len(ids)
    for edge in edges:
        has_incoming[graph.activity_index(edge.object)] = True
    roots = [position for position, incoming in enumerate(has_incoming) if not incoming]

    causal_edges = [
        edge for edge in edges
        if config.is_causal_relation(edge.relation, edge.relation_label)
    ]
    visited = reachable_from(build_adjacency(graph, causal_edges), roots)

    return [
        Finding(
            ids[position],
            HoleKind.ORPHAN_CHAIN,
            "not reachable from a root activity through causal relations",
        )
        for position, seen in enumerate(visited)
        if not seen
    ]


def find_holes(graph: ModelGraph, config: AnalysisConfig) -> list[Finding]:
    """Run every hole check over a model.

    Args:
        graph: ModelGraph of the model to check
        config: AnalysisConfig with the causal relation and root term allow-lists

    Returns:
        Findings sorted by activity id, then kind, then detail
    """
    logger.info(
        "find_holes_start",
        model_id=graph.model.id,
        activity_count=len(graph),
        edge_count=len(graph.all_edges()),
    )

    findings = (
        check_activities(graph, config)
        + check_edges(graph)
        + check_orphan_chains(graph, config)
    )
    findings.sort(key=Finding.sort_key)

    kind_counts = Counter(finding.kind.value for finding in findings)
    logger.info(
        "find_holes_complete",
        model_id=graph.model.id,
        finding_count=len(findings),
        kind_counts=dict(sorted(kind_counts.items())),
    )

    return findings
