"""Model analyses: hole detection and structural statistics."""

from gocam_analysis.analysis.holes import (
    Finding,
    HoleKind,
    check_activities,
    check_edges,
    check_orphan_chains,
    find_holes,
)
from gocam_analysis.analysis.stats import StatsSummary, compute_stats
from gocam_analysis.analysis.runner import AnalysisResult, analyze_model

__all__ = [
    "Finding",
    "HoleKind",
    "check_activities",
    "check_edges",
    "check_orphan_chains",
    "find_holes",
    "StatsSummary",
    "compute_stats",
    "AnalysisResult",
    "analyze_model",
]
