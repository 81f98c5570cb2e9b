"""Pydantic schema for GO-CAM JSON documents (Minerva/Noctua export format)."""

from pydantic import BaseModel, ConfigDict, Field


class Annotation(BaseModel):
    """Key/value annotation attached to a model, individual or fact."""

    key: str
    value: str


class IndividualType(BaseModel):
    """Type assertion of an individual.

    Class types carry an id and label. Complement and other expression
    types may carry neither, so both are optional.
    """

    model_config = ConfigDict(populate_by_name=True)

    type_string: str = Field(default="class", alias="type")
    id: str | None = None
    label: str | None = None

    def label_or_id(self) -> str:
        return self.label or self.id or self.type_string


class Individual(BaseModel):
    """Instance node of a GO-CAM document."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    types: list[IndividualType] = Field(default_factory=list, alias="type")
    root_types: list[IndividualType] = Field(default_factory=list, alias="root-type")
    annotations: list[Annotation] = Field(default_factory=list)

    def primary_type(self) -> IndividualType | None:
        """Return the first asserted type, None for untyped individuals."""
        return self.types[0] if self.types else None

    def has_root_term(self, term_id: str) -> bool:
        return any(root.id == term_id for root in self.root_types)


class Fact(BaseModel):
    """Edge of a GO-CAM document: subject individual, property, object individual."""

    model_config = ConfigDict(populate_by_name=True)

    subject: str
    object: str
    property: str
    property_label: str = Field(default="", alias="property-label")
    annotations: list[Annotation] = Field(default_factory=list)

    def fact_id(self) -> str:
        return f"{self.subject}-{self.property}-{self.object}"


class GoCamDocument(BaseModel):
    """Whole GO-CAM document as exported by Minerva."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    annotations: list[Annotation] = Field(default_factory=list)
    individuals: list[Individual] = Field(default_factory=list)
    facts: list[Fact] = Field(default_factory=list)

    def title(self) -> str:
        for annotation in self.annotations:
            if annotation.key == "title":
                return annotation.value
        return ""
