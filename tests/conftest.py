"""Shared fixtures and model builders for gocam-analysis tests."""

import json

import pytest

from gocam_analysis.config.schema import AnalysisConfig
from gocam_analysis.model.models import (
    Activity,
    CausalEdge,
    Enabler,
    EnablerKind,
    Model,
    Term,
)

DIRECTLY_POSITIVELY_REGULATES = "RO:0002629"
PROVIDES_INPUT_FOR = "RO:0002413"
PART_OF = "BFO:0000050"
KINASE_ACTIVITY = "GO:0004674"
MOLECULAR_FUNCTION = "GO:0003674"


def make_activity(
    activity_id: str,
    molecular_function: str = KINASE_ACTIVITY,
    enabled_by: str | None = "PomBase:SPBC11B10.09",
    located_in: tuple[str, ...] = (),
) -> Activity:
    """Build an Activity; pass enabled_by=None for an activity with no enabler."""
    enabler = None
    if enabled_by is not None:
        enabler = Enabler(term=Term(id=enabled_by, label="cdc2"), kind=EnablerKind.GENE)
    return Activity(
        id=activity_id,
        molecular_function=Term(id=molecular_function),
        enabled_by=enabler,
        located_in=tuple(Term(id=term) for term in located_in),
    )


def make_edge(
    subject: str,
    object_: str,
    relation: str = DIRECTLY_POSITIVELY_REGULATES,
    label: str | None = None,
) -> CausalEdge:
    return CausalEdge(subject=subject, object=object_, relation=relation, relation_label=label)


def make_model(activities=(), edges=(), model_id: str = "gomodel:test") -> Model:
    return Model(
        id=model_id,
        title="Test model",
        activities=tuple(activities),
        causal_edges=tuple(edges),
    )


@pytest.fixture
def config() -> AnalysisConfig:
    """Config recognizing two RO causal relations and the GO molecular function root."""
    return AnalysisConfig(
        causal_relations=[DIRECTLY_POSITIVELY_REGULATES, PROVIDES_INPUT_FOR],
        root_molecular_function_terms=[MOLECULAR_FUNCTION],
    )


def _individual(individual_id, type_id, type_label, root_id, root_label):
    return {
        "id": individual_id,
        "type": [{"type": "class", "id": type_id, "label": type_label}],
        "root-type": [{"type": "class", "id": root_id, "label": root_label}],
    }


def _fact(subject, object_, property_id, property_label):
    return {
        "subject": subject,
        "object": object_,
        "property": property_id,
        "property-label": property_label,
    }


@pytest.fixture
def gocam_document() -> dict:
    """
    Small GO-CAM document in Minerva JSON form.

    Contents:
    - a1 (kinase, enabled by cdc2, part of G1/S transition, has input ATP)
      directly positively regulates a2
    - a2 (transcription factor, enabled by atf1, occurs in nucleus)
      directly positively regulates an id with no individual (dangling)
    - a3 (root molecular function term, no enabler, no facts)
    """
    return {
        "id": "gomodel:0001",
        "annotations": [
            {"key": "title", "value": "Cell cycle test model"},
            {"key": "state", "value": "production"},
        ],
        "individuals": [
            _individual("gomodel:0001/a1", KINASE_ACTIVITY,
                        "protein serine/threonine kinase activity",
                        MOLECULAR_FUNCTION, "molecular_function"),
            _individual("gomodel:0001/a2", "GO:0003700",
                        "DNA-binding transcription factor activity",
                        MOLECULAR_FUNCTION, "molecular_function"),
            _individual("gomodel:0001/a3", MOLECULAR_FUNCTION, "molecular_function",
                        MOLECULAR_FUNCTION, "molecular_function"),
            _individual("gomodel:0001/g1", "PomBase:SPBC11B10.09", "cdc2",
                        "CHEBI:36080", "protein"),
            _individual("gomodel:0001/g2", "PomBase:SPBC29B5.01", "atf1",
                        "CHEBI:36080", "protein"),
            _individual("gomodel:0001/nucleus", "GO:0005634", "nucleus",
                        "GO:0005575", "cellular_component"),
            _individual("gomodel:0001/bp", "GO:0000082", "G1/S transition of mitotic cell cycle",
                        "GO:0008150", "biological_process"),
            _individual("gomodel:0001/atp", "CHEBI:15422", "ATP",
                        "CHEBI:24431", "chemical entity"),
        ],
        "facts": [
            _fact("gomodel:0001/a1", "gomodel:0001/g1", "RO:0002333", "enabled by"),
            _fact("gomodel:0001/a2", "gomodel:0001/g2", "RO:0002333", "enabled by"),
            _fact("gomodel:0001/a1", "gomodel:0001/a2", DIRECTLY_POSITIVELY_REGULATES,
                  "directly positively regulates"),
            _fact("gomodel:0001/a2", "gomodel:0001/nucleus", "BFO:0000066", "occurs in"),
            _fact("gomodel:0001/a1", "gomodel:0001/bp", PART_OF, "part of"),
            _fact("gomodel:0001/a1", "gomodel:0001/atp", "RO:0002233", "has input"),
            _fact("gomodel:0001/a2", "gomodel:0001/missing", DIRECTLY_POSITIVELY_REGULATES,
                  "directly positively regulates"),
        ],
    }


@pytest.fixture
def gocam_file(tmp_path, gocam_document):
    """Write the sample document to a JSON file."""
    path = tmp_path / "gomodel_0001.json"
    path.write_text(json.dumps(gocam_document))
    return path


@pytest.fixture
def config_file(tmp_path):
    """Minimal config YAML matching the config fixture."""
    path = tmp_path / "config.yaml"
    path.write_text(f"""
causal_relations:
  - {DIRECTLY_POSITIVELY_REGULATES}
  - {PROVIDES_INPUT_FOR}
root_molecular_function_terms:
  - {MOLECULAR_FUNCTION}
""")
    return path
