"""Data models for GO-CAM activities and the causal edges between them."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Term(BaseModel):
    """Reference to an ontology term or entity.

    Attributes:
        id: Term identifier (e.g. GO:0003674, PomBase:SPBC11B10.09)
        label: Human-readable term label, None if the document carries none
    """

    model_config = ConfigDict(frozen=True)

    id: str
    label: str | None = None

    def label_or_id(self) -> str:
        return self.label if self.label else self.id


class EnablerKind(str, Enum):
    """Kind of entity that enables an activity."""

    GENE = "gene"
    COMPLEX = "complex"
    CHEMICAL = "chemical"
    MODIFIED_PROTEIN = "modified_protein"
    UNKNOWN = "unknown"


class Enabler(BaseModel):
    """Gene product, complex or chemical enabling an activity."""

    model_config = ConfigDict(frozen=True)

    term: Term
    kind: EnablerKind = EnablerKind.UNKNOWN


class Activity(BaseModel):
    """One molecular-function enactment within a GO-CAM model.

    Attributes:
        id: Individual id, unique within the model
        molecular_function: Molecular function term of the activity
        enabled_by: Enabling entity - None when the model never states one
        located_in: Cellular component terms from "located in" facts
        occurs_in: Cellular component terms from "occurs in" facts
        part_of: Biological process the activity is part of
        has_input: Input terms from "has input" facts
        has_output: Output terms from "has output" facts

    A missing enabler is kept as None, never replaced by a placeholder term:
    the hole detector reports it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    molecular_function: Term
    enabled_by: Enabler | None = None
    located_in: tuple[Term, ...] = ()
    occurs_in: tuple[Term, ...] = ()
    part_of: Term | None = None
    has_input: tuple[Term, ...] = ()
    has_output: tuple[Term, ...] = ()


class CausalEdge(BaseModel):
    """Directed relation from a regulating activity to a regulated one.

    Endpoints are plain ids and may not resolve to an activity in the model.
    """

    model_config = ConfigDict(frozen=True)

    subject: str
    object: str
    relation: str
    relation_label: str | None = None
    fact_id: str | None = None

    def relation_name(self) -> str:
        return self.relation_label if self.relation_label else self.relation


class Model(BaseModel):
    """Root entity for one GO-CAM document.

    Activities are kept as a sequence rather than a mapping so that a
    document with duplicate ids survives loading; ModelGraph rejects it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    activities: tuple[Activity, ...] = ()
    causal_edges: tuple[CausalEdge, ...] = ()
