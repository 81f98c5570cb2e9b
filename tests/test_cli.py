"""Integration tests for the CLI using CliRunner."""

import json

import pytest
from click.testing import CliRunner

from gocam_analysis.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def duplicate_file(tmp_path, gocam_document):
    """Document whose model has duplicate activity ids."""
    gocam_document["individuals"].append(gocam_document["individuals"][0])
    path = tmp_path / "duplicate.json"
    path.write_text(json.dumps(gocam_document))
    return path


def test_help(runner):
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ["find-holes", "stats", "analyze", "tuples", "info"]:
        assert command in result.output


def test_info(runner, config_file):
    result = runner.invoke(cli, ["--config", str(config_file), "info"])

    assert result.exit_code == 0
    assert "Config Hash:" in result.output
    assert "RO:0002629" in result.output
    assert "GO:0003674" in result.output


def test_find_holes(runner, config_file, gocam_file):
    result = runner.invoke(cli, ["--config", str(config_file), "find-holes", str(gocam_file)])

    assert result.exit_code == 0
    assert "gomodel:0001\tgomodel:0001/a3\tMissingEnabler" in result.output
    assert "gomodel:0001\tgomodel:0001/missing\tDanglingEdgeReference" in result.output


def test_find_holes_output_dir(runner, config_file, gocam_file, tmp_path):
    output_dir = tmp_path / "holes"

    result = runner.invoke(cli, [
        "--config", str(config_file),
        "find-holes", "--output-dir", str(output_dir), str(gocam_file),
    ])

    assert result.exit_code == 0
    assert "4 findings" in result.output
    assert (output_dir / "gomodel_0001.holes.tsv").exists()


def test_find_holes_missing_file_continues(runner, config_file, gocam_file, tmp_path):
    missing = tmp_path / "missing.json"

    result = runner.invoke(cli, [
        "--config", str(config_file), "find-holes", str(missing), str(gocam_file),
    ])

    assert result.exit_code == 1
    assert "MissingEnabler" in result.output


def test_find_holes_malformed_model(runner, config_file, duplicate_file):
    result = runner.invoke(cli, ["--config", str(config_file), "find-holes", str(duplicate_file)])

    assert result.exit_code == 1
    assert "duplicate activity ids" in result.output


def test_stats(runner, config_file, gocam_file):
    result = runner.invoke(cli, ["--config", str(config_file), "stats", str(gocam_file)])

    assert result.exit_code == 0
    assert "Activities: 3" in result.output
    assert "Causal edges: 2" in result.output
    assert "Connected components: 2" in result.output


def test_stats_output_dir(runner, config_file, gocam_file, tmp_path):
    output_dir = tmp_path / "stats"

    result = runner.invoke(cli, [
        "--config", str(config_file), "stats", "--output-dir", str(output_dir), str(gocam_file),
    ])

    assert result.exit_code == 0
    assert (output_dir / "gomodel_0001.stats.yaml").exists()
    assert (output_dir / "gomodel_0001.degree.tsv").exists()


def test_analyze_parallel(runner, config_file, gocam_file):
    result = runner.invoke(cli, [
        "--config", str(config_file), "analyze", "--parallel", str(gocam_file),
    ])

    assert result.exit_code == 0
    assert "=== gomodel:0001 ===" in result.output
    assert "Findings: 4" in result.output


def test_tuples(runner, config_file, gocam_file):
    result = runner.invoke(cli, ["--config", str(config_file), "tuples", str(gocam_file)])

    assert result.exit_code == 0
    assert "cdc2\tPomBase:SPBC11B10.09" in result.output


def test_tuples_output_file(runner, config_file, gocam_file, tmp_path):
    output = tmp_path / "tuples.tsv"

    result = runner.invoke(cli, [
        "--config", str(config_file), "tuples", "--output", str(output), str(gocam_file),
    ])

    assert result.exit_code == 0
    assert "Wrote 6 tuples" in result.output
    assert output.exists()


def test_requires_paths(runner, config_file):
    result = runner.invoke(cli, ["--config", str(config_file), "find-holes"])

    assert result.exit_code != 0


def test_set_overrides_root_terms(runner, config_file, gocam_file):
    """--set replaces a config list for the whole run."""
    result = runner.invoke(cli, [
        "--config", str(config_file),
        "--set", "root_molecular_function_terms=[GO:0004674]",
        "find-holes", str(gocam_file),
    ])

    assert result.exit_code == 0
    assert "gomodel:0001/a1\tRootMolecularFunction" in result.output
    assert "gomodel:0001/a3\tRootMolecularFunction" not in result.output


def test_set_overrides_shown_in_info(runner, config_file):
    result = runner.invoke(cli, [
        "--config", str(config_file),
        "--set", "causal_relations=[RO:0002304]",
        "--set", "enablers.chemical=['CHEBI:', 'SMILES:']",
        "info",
    ])

    assert result.exit_code == 0
    assert "Overrides: causal_relations, enablers.chemical" in result.output
    assert "RO:0002304" in result.output
    assert "RO:0002629" not in result.output
    assert "chemical: CHEBI:, SMILES:" in result.output


def test_set_requires_key_value(runner, config_file):
    result = runner.invoke(cli, ["--config", str(config_file), "--set", "causal_relations", "info"])

    assert result.exit_code == 2
    assert "KEY=VALUE" in result.output


def test_set_invalid_value_fails(runner, config_file, gocam_file):
    result = runner.invoke(cli, [
        "--config", str(config_file),
        "--set", "causal_relations=[]",
        "stats", str(gocam_file),
    ])

    assert result.exit_code == 1
    assert "Error loading config" in result.output
