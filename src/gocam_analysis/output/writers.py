"""TSV and YAML writers for analysis output."""

from pathlib import Path

import polars as pl
import yaml

from gocam_analysis.analysis.runner import AnalysisResult
from gocam_analysis.output.tables import findings_to_frame, stats_to_frames


def _safe_filename(model_id: str) -> str:
    # Model ids look like "gomodel:66187e4700001744"
    return model_id.replace(":", "_").replace("/", "_")


def write_frame_tsv(df: pl.DataFrame, path: Path) -> Path:
    """Write a DataFrame as tab-separated text with a header row."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.write_csv(path, separator="\t", include_header=True)
    return path


def write_findings_tsv(result: AnalysisResult, output_dir: Path) -> Path:
    """
    Write the findings of one model to {output_dir}/{model}.holes.tsv.

    Returns:
        Path of the written file
    """
    df = findings_to_frame(list(result.findings), result.model_id)
    path = Path(output_dir) / f"{_safe_filename(result.model_id)}.holes.tsv"
    return write_frame_tsv(df, path)


def write_stats_yaml(result: AnalysisResult, output_dir: Path) -> Path:
    """
    Write the stats summary of one model to {output_dir}/{model}.stats.yaml.

    The YAML holds the full summary record plus the model title.

    Returns:
        Path of the written file
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{_safe_filename(result.model_id)}.stats.yaml"

    document = {"model_title": result.model_title, **result.summary.to_dict()}
    with open(path, "w") as f:
        yaml.dump(document, f, default_flow_style=False, sort_keys=False)

    return path


def write_stats_tsv(result: AnalysisResult, output_dir: Path) -> dict[str, Path]:
    """
    Write each stats distribution of one model as its own TSV file.

    Returns:
        Dict mapping distribution name to written path
    """
    base = _safe_filename(result.model_id)
    return {
        name: write_frame_tsv(df, Path(output_dir) / f"{base}.{name}.tsv")
        for name, df in stats_to_frames(result.summary).items()
    }
