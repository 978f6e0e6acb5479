# src/fhir_valueset_tool/transform/assemble.py
"""
Assemble the output ValueSet from resolved metadata and inclusion groups.
"""

from __future__ import annotations

from typing import List

from pydantic import ValidationError

from ..exceptions import ConversionError
from ..models import ValueSet, ValueSetCompose, ValueSetInclude
from .defaults import ValueSetMetadata


def assemble_value_set(
    metadata: ValueSetMetadata, groups: List[ValueSetInclude]
) -> ValueSet:
    """
    Build the ValueSet.

    Metadata fields left as None are omitted on serialization.

    Raises
    ------
    ConversionError
        If a metadata value is not acceptable (e.g., unknown status, or a
        non-string name copied from the CodeSystem).
    """
    try:
        return ValueSet(
            id=metadata.id,
            url=metadata.url,
            name=metadata.name,
            description=metadata.description,
            status=metadata.status,
            compose=ValueSetCompose(include=groups),
        )
    except ValidationError as e:
        raise ConversionError(f"invalid ValueSet metadata: {e}") from e
