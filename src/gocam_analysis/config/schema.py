"""Pydantic models for analysis configuration."""

import hashlib
import json

from pydantic import BaseModel, Field, field_validator


class EnablerPrefixes(BaseModel):
    """Identifier prefixes used to classify the entity enabling an activity.

    Prefixes are checked in field order (gene, chemical, complex,
    modified_protein); the first match wins.
    """

    gene: list[str] = Field(
        default_factory=lambda: [
            "PomBase:", "FB:", "UniProtKB:", "MGI:", "RGD:",
            "ZFIN:", "SGD:", "WB:", "HGNC:",
        ],
        description="Prefixes of gene product identifiers",
    )
    chemical: list[str] = Field(
        default_factory=lambda: ["CHEBI:"],
        description="Prefixes of chemical entity identifiers",
    )
    complex: list[str] = Field(
        default_factory=lambda: ["GO:", "ComplexPortal:"],
        description="Prefixes of protein-containing complex identifiers",
    )
    modified_protein: list[str] = Field(
        default_factory=lambda: ["PR:"],
        description="Prefixes of modified protein identifiers",
    )


class AnalysisConfig(BaseModel):
    """Main analysis configuration."""

    causal_relations: list[str] = Field(
        ...,
        min_length=1,
        description="Relation ids or labels treated as causal-chain links",
    )
    root_molecular_function_terms: list[str] = Field(
        ...,
        description="Molecular function terms that mark an unrefined annotation",
    )
    enablers: EnablerPrefixes = Field(
        default_factory=EnablerPrefixes,
        description="Enabler classification prefixes",
    )

    @field_validator("causal_relations", "root_molecular_function_terms")
    @classmethod
    def strip_terms(cls, v: list[str]) -> list[str]:
        """Strip whitespace and reject blank entries."""
        stripped = [term.strip() for term in v]
        if any(not term for term in stripped):
            raise ValueError("Term lists must not contain blank entries")
        return stripped

    def is_causal_relation(self, relation: str, label: str | None = None) -> bool:
        """Return True if a relation id or its label is in the causal allow-list."""
        allowed = set(self.causal_relations)
        return relation in allowed or (label is not None and label in allowed)

    def is_root_molecular_function(self, term_id: str) -> bool:
        return term_id in self.root_molecular_function_terms

    def config_hash(self) -> str:
        """
        Compute SHA-256 hash of the configuration.

        Returns a deterministic hash based on all config values, useful for
        telling apart reports produced under different allow-lists.
        """
        config_dict = self.model_dump(mode="python")
        config_json = json.dumps(
            config_dict,
            sort_keys=True,
            default=str,
        )
        return hashlib.sha256(config_json.encode()).hexdigest()
