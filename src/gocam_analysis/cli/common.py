"""Helpers shared by the per-model analysis commands."""

import logging
from collections.abc import Iterator
from pathlib import Path

import click
import yaml

from gocam_analysis.analysis import AnalysisResult, analyze_model
from gocam_analysis.config import AnalysisConfig, load_config, load_config_with_overrides
from gocam_analysis.exceptions import DocumentError, MalformedModel
from gocam_analysis.model import load_model

logger = logging.getLogger(__name__)


def parse_overrides(ctx, param, values: tuple[str, ...]) -> dict:
    """Parse repeated KEY=VALUE options into a config override dict.

    Values are read as YAML, so lists can be given inline:
    --set causal_relations="[RO:0002629, RO:0002413]"
    """
    overrides = {}
    for item in values:
        key, sep, raw_value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param=param)
        try:
            overrides[key.strip()] = yaml.safe_load(raw_value)
        except yaml.YAMLError as e:
            raise click.BadParameter(f"invalid value for {key}: {e}", param=param)
    return overrides


def load_config_from_context(ctx: click.Context) -> AnalysisConfig:
    """Load the --config file and apply any --set overrides."""
    config_path = ctx.obj["config_path"]
    overrides = ctx.obj.get("overrides")
    if overrides:
        return load_config_with_overrides(config_path, overrides)
    return load_config(config_path)


def load_config_or_exit(ctx: click.Context) -> AnalysisConfig:
    """Load the configuration, exiting with status 1 when it is invalid."""
    try:
        return load_config_from_context(ctx)
    except Exception as e:
        click.echo(click.style(f"Error loading config: {e}", fg='red'), err=True)
        ctx.exit(1)


def iter_results(
    paths: tuple[Path, ...],
    config: AnalysisConfig,
    failures: list[Path],
    parallel: bool = False,
) -> Iterator[AnalysisResult]:
    """Load and analyze each path in turn.

    Files that cannot be loaded, or whose model is malformed, are reported
    on stderr and appended to failures; the remaining paths still run.
    """
    for path in paths:
        try:
            model = load_model(path, config)
            result = analyze_model(model, config, parallel=parallel)
        except (FileNotFoundError, DocumentError, MalformedModel) as e:
            click.echo(click.style(f"Error: {path}: {e}", fg='red'), err=True)
            logger.debug("Failed to analyze %s", path, exc_info=True)
            failures.append(path)
            continue
        yield result
