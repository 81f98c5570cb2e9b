"""GO-CAM model representation: records, document loading and the model graph."""

from gocam_analysis.model.models import (
    Activity,
    CausalEdge,
    Enabler,
    EnablerKind,
    Model,
    Term,
)
from gocam_analysis.model.document import (
    Fact,
    GoCamDocument,
    Individual,
    IndividualType,
)
from gocam_analysis.model.loader import (
    FactTuple,
    build_model,
    classify_enabler,
    fact_tuples,
    load_document,
    load_model,
)
from gocam_analysis.model.graph import ModelGraph

__all__ = [
    "Activity",
    "CausalEdge",
    "Enabler",
    "EnablerKind",
    "Model",
    "Term",
    "Fact",
    "GoCamDocument",
    "Individual",
    "IndividualType",
    "FactTuple",
    "build_model",
    "classify_enabler",
    "fact_tuples",
    "load_document",
    "load_model",
    "ModelGraph",
]
