# src/fhir_valueset_tool/models.py
"""
Data models for the ValueSet output and the conversion options.

The ValueSet side is a deliberately small pydantic rendition of the FHIR
ValueSet resource: only the fields this tool emits are modeled. Unset
optional fields are ``None`` and are dropped on serialization, while empty
strings are kept as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "STATUS_VALUES",
    "PublicationStatus",
    "Concept",
    "ValueSetInclude",
    "ValueSetCompose",
    "ValueSet",
    "ConversionOptions",
]

PublicationStatus = Literal["draft", "active", "retired", "unknown"]
STATUS_VALUES = ("draft", "active", "retired", "unknown")


class Concept(BaseModel):
    """A single code with optional display text and definition."""

    model_config = ConfigDict(extra="forbid")

    code: str
    display: Optional[str] = None
    definition: Optional[str] = None


class ValueSetInclude(BaseModel):
    """
    An inclusion group: concepts that share one source system.

    ``system`` is None when the source gave no system at all; an empty
    string is a distinct, literal system value.
    """

    model_config = ConfigDict(extra="forbid")

    system: Optional[str] = None
    concept: List[Concept] = Field(default_factory=list)


class ValueSetCompose(BaseModel):
    model_config = ConfigDict(extra="forbid")

    include: List[ValueSetInclude] = Field(default_factory=list)


class ValueSet(BaseModel):
    """Output document."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    resource_type: Literal["ValueSet"] = Field(default="ValueSet", alias="resourceType")
    id: Optional[str] = None
    url: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    status: PublicationStatus
    compose: ValueSetCompose

    def to_json(self, indent: Optional[int] = 2) -> str:
        """
        Serialize to FHIR JSON, omitting unset fields.

        Output is a pure function of the model: no timestamps or generated
        ids, so the same input always yields the same bytes.
        """
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


@dataclass(frozen=True)
class ConversionOptions:
    """
    Caller-supplied ValueSet metadata.

    Any field left as None (or empty) is filled in by the converter from the
    input: the CodeSystem's own fields, or names derived from the CSV file.

    Attributes
    ----------
    url, name, description, id : str or None
        Explicit ValueSet metadata.
    status : str or None
        Explicit publication status (draft, active, retired, unknown).
    """

    url: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    id: Optional[str] = None
    status: Optional[str] = None
