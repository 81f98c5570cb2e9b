"""Load GO-CAM JSON documents and build the activity graph model from them."""

from dataclasses import dataclass, field
from pathlib import Path

import structlog
from pydantic import ValidationError

from gocam_analysis.config.schema import AnalysisConfig, EnablerPrefixes
from gocam_analysis.exceptions import DocumentError
from gocam_analysis.model.document import Fact, GoCamDocument, Individual
from gocam_analysis.model.models import (
    Activity,
    CausalEdge,
    Enabler,
    EnablerKind,
    Model,
    Term,
)

logger = structlog.get_logger(__name__)

# Root of the molecular function branch: individuals under it are activities
MOLECULAR_FUNCTION_ID = "GO:0003674"

ENABLED_BY = "enabled by"
HAS_INPUT = "has input"
HAS_OUTPUT = "has output"
LOCATED_IN = "located in"
OCCURS_IN = "occurs in"
PART_OF = "part of"

# Facts with these property labels annotate their subject activity unless
# their object is itself an activity; every other fact between activities is
# an edge.
ANNOTATION_PROPERTIES = frozenset(
    [ENABLED_BY, HAS_INPUT, HAS_OUTPUT, LOCATED_IN, OCCURS_IN, PART_OF]
)


@dataclass
class _ActivityParts:
    """Mutable accumulator for one activity while facts are applied."""

    id: str
    molecular_function: Term
    enabled_by: Enabler | None = None
    located_in: list[Term] = field(default_factory=list)
    occurs_in: list[Term] = field(default_factory=list)
    part_of: Term | None = None
    has_input: list[Term] = field(default_factory=list)
    has_output: list[Term] = field(default_factory=list)

    def freeze(self) -> Activity:
        return Activity(
            id=self.id,
            molecular_function=self.molecular_function,
            enabled_by=self.enabled_by,
            located_in=tuple(self.located_in),
            occurs_in=tuple(self.occurs_in),
            part_of=self.part_of,
            has_input=tuple(self.has_input),
            has_output=tuple(self.has_output),
        )


@dataclass(frozen=True)
class FactTuple:
    """One fact of a document flattened to labelled subject/property/object columns."""

    model_id: str
    model_title: str
    subject_label: str
    subject_id: str
    property_label: str
    object_label: str
    object_id: str


def load_document(path: Path | str) -> GoCamDocument:
    """Read and validate a GO-CAM JSON document.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed GoCamDocument

    Raises:
        FileNotFoundError: If the file doesn't exist
        DocumentError: If the JSON is not a valid GO-CAM document
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"GO-CAM file not found: {path}")

    try:
        document = GoCamDocument.model_validate_json(path.read_bytes())
    except ValidationError as e:
        raise DocumentError(
            f"Invalid GO-CAM document {path}: {e.error_count()} validation error(s)",
            details={"path": str(path), "errors": e.errors(include_url=False)},
        ) from e

    logger.debug(
        "load_document_complete",
        path=str(path),
        model_id=document.id,
        individual_count=len(document.individuals),
        fact_count=len(document.facts),
    )

    return document


def classify_enabler(term_id: str, prefixes: EnablerPrefixes) -> EnablerKind:
    """Classify an enabler identifier by prefix.

    Checks gene, chemical, complex and modified protein prefixes in that
    order; unmatched identifiers are EnablerKind.UNKNOWN.
    """
    for kind, kind_prefixes in (
        (EnablerKind.GENE, prefixes.gene),
        (EnablerKind.CHEMICAL, prefixes.chemical),
        (EnablerKind.COMPLEX, prefixes.complex),
        (EnablerKind.MODIFIED_PROTEIN, prefixes.modified_protein),
    ):
        if any(term_id.startswith(prefix) for prefix in kind_prefixes):
            return kind
    return EnablerKind.UNKNOWN


def _individual_term(individual: Individual) -> Term | None:
    individual_type = individual.primary_type()
    if individual_type is None or individual_type.id is None:
        return None
    return Term(id=individual_type.id, label=individual_type.label)


def _molecular_function_term(individual: Individual) -> Term:
    term = _individual_term(individual)
    if term is not None:
        return term
    # Untyped activities fall back to the molecular function root
    for root in individual.root_types:
        if root.id == MOLECULAR_FUNCTION_ID:
            return Term(id=root.id, label=root.label)
    return Term(id=MOLECULAR_FUNCTION_ID, label="molecular_function")


def _apply_annotation(
    parts: _ActivityParts,
    fact: Fact,
    term: Term,
    prefixes: EnablerPrefixes,
) -> None:
    label = fact.property_label
    if label == ENABLED_BY:
        kind = classify_enabler(term.id, prefixes)
        if kind == EnablerKind.UNKNOWN:
            logger.warning("unclassified_enabler", activity_id=parts.id, enabler_id=term.id)
        parts.enabled_by = Enabler(term=term, kind=kind)
    elif label == HAS_INPUT:
        parts.has_input.append(term)
    elif label == HAS_OUTPUT:
        parts.has_output.append(term)
    elif label == LOCATED_IN:
        parts.located_in.append(term)
    elif label == OCCURS_IN:
        parts.occurs_in.append(term)
    elif label == PART_OF:
        parts.part_of = term


def build_model(document: GoCamDocument, config: AnalysisConfig) -> Model:
    """Build the activity graph Model from a parsed document.

    Individuals rooted in the molecular function branch become activities.
    Annotation facts (enabled by, has input/output, located in, occurs in,
    part of) whose object is not an activity are folded into their subject
    activity. Any other fact whose endpoints are activities or unknown ids
    becomes a CausalEdge, so that non-causal links between activities,
    dangling references and self-loops survive as data for the hole detector.

    Args:
        document: Parsed GO-CAM document
        config: AnalysisConfig providing enabler classification prefixes

    Returns:
        Immutable Model
    """
    individuals_by_id: dict[str, Individual] = {}
    for individual in document.individuals:
        individuals_by_id.setdefault(individual.id, individual)

    activity_order: list[str] = []
    parts_by_id: dict[str, _ActivityParts] = {}
    for individual in document.individuals:
        if not individual.has_root_term(MOLECULAR_FUNCTION_ID):
            continue
        # Duplicate ids are kept in order so ModelGraph can reject them
        activity_order.append(individual.id)
        parts_by_id.setdefault(
            individual.id,
            _ActivityParts(
                id=individual.id,
                molecular_function=_molecular_function_term(individual),
            ),
        )

    edges: list[CausalEdge] = []
    skipped_facts = 0

    for fact in document.facts:
        # Annotation facts pointing at another activity are links between
        # activities and fall through to become edges
        if fact.property_label in ANNOTATION_PROPERTIES and fact.object not in parts_by_id:
            parts = parts_by_id.get(fact.subject)
            if parts is None:
                skipped_facts += 1
                logger.debug(
                    "skip_non_activity_fact",
                    fact_id=fact.fact_id(),
                    property=fact.property_label,
                )
                continue
            object_individual = individuals_by_id.get(fact.object)
            term = _individual_term(object_individual) if object_individual else None
            if term is None:
                logger.warning(
                    "unresolved_annotation_object",
                    activity_id=fact.subject,
                    property=fact.property_label,
                    object_id=fact.object,
                )
                continue
            _apply_annotation(parts, fact, term, config.enablers)
            continue

        subject_ok = fact.subject in parts_by_id or fact.subject not in individuals_by_id
        object_ok = fact.object in parts_by_id or fact.object not in individuals_by_id
        if not (subject_ok and object_ok):
            # e.g. chemical or process individuals linked to an activity
            skipped_facts += 1
            logger.debug(
                "skip_non_activity_fact",
                fact_id=fact.fact_id(),
                property=fact.property_label,
            )
            continue

        edges.append(
            CausalEdge(
                subject=fact.subject,
                object=fact.object,
                relation=fact.property,
                relation_label=fact.property_label or None,
                fact_id=fact.fact_id(),
            )
        )

    model = Model(
        id=document.id,
        title=document.title(),
        activities=tuple(parts_by_id[activity_id].freeze() for activity_id in activity_order),
        causal_edges=tuple(edges),
    )

    logger.info(
        "build_model_complete",
        model_id=model.id,
        activity_count=len(model.activities),
        edge_count=len(model.causal_edges),
        skipped_facts=skipped_facts,
    )

    return model


def load_model(path: Path | str, config: AnalysisConfig) -> Model:
    """Load a GO-CAM JSON file and build its Model."""
    return build_model(load_document(path), config)


def fact_tuples(document: GoCamDocument) -> list[FactTuple]:
    """Flatten every fact of a document into a labelled tuple.

    Facts whose subject or object is unknown or untyped are skipped.

    Args:
        document: Parsed GO-CAM document

    Returns:
        List of FactTuple in document fact order
    """
    individuals_by_id: dict[str, Individual] = {}
    for individual in document.individuals:
        individuals_by_id.setdefault(individual.id, individual)

    model_title = document.title()
    tuples: list[FactTuple] = []

    for fact in document.facts:
        subject = individuals_by_id.get(fact.subject)
        object_ = individuals_by_id.get(fact.object)
        subject_type = subject.primary_type() if subject else None
        object_type = object_.primary_type() if object_ else None
        if subject_type is None or object_type is None:
            continue

        tuples.append(
            FactTuple(
                model_id=document.id,
                model_title=model_title,
                subject_label=subject_type.label or "",
                subject_id=subject_type.id or subject_type.type_string,
                property_label=fact.property_label,
                object_label=object_type.label or "",
                object_id=object_type.id or object_type.type_string,
            )
        )

    return tuples
