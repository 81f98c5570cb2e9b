"""Run hole detection and statistics over one model."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import structlog

from gocam_analysis.analysis.holes import Finding, find_holes
from gocam_analysis.analysis.stats import StatsSummary, compute_stats
from gocam_analysis.config.schema import AnalysisConfig
from gocam_analysis.model.graph import ModelGraph
from gocam_analysis.model.models import Model

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Findings and summary for one model."""

    model_id: str
    model_title: str
    findings: tuple[Finding, ...]
    summary: StatsSummary


def analyze_model(
    model: Model,
    config: AnalysisConfig,
    parallel: bool = False,
) -> AnalysisResult:
    """Index a model once and run both analyses over it.

    The model is immutable, so with parallel=True the hole detector and the
    stats aggregator run as two concurrent tasks over the same graph.

    Args:
        model: Model to analyze
        config: AnalysisConfig for hole detection
        parallel: Run the two analyses concurrently

    Returns:
        AnalysisResult

    Raises:
        MalformedModel: If the model has duplicate activity ids
    """
    graph = ModelGraph(model)

    if parallel:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="gocam-analysis") as pool:
            holes_future = pool.submit(find_holes, graph, config)
            stats_future = pool.submit(compute_stats, graph)
            findings = holes_future.result()
            summary = stats_future.result()
    else:
        findings = find_holes(graph, config)
        summary = compute_stats(graph)

    logger.debug("analyze_model_complete", model_id=model.id, parallel=parallel)

    return AnalysisResult(
        model_id=model.id,
        model_title=model.title,
        findings=tuple(findings),
        summary=summary,
    )
