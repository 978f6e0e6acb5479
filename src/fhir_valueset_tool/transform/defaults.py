# src/fhir_valueset_tool/transform/defaults.py
"""
Resolve ValueSet metadata from explicit options and input-derived fallbacks.

Two rule sets exist:

- CodeSystem input: unset url, name, description and id are copied from the
  CodeSystem's fields of the same name. The CodeSystem's own status is a
  different thing (the lifecycle of the CodeSystem) and is never copied.
- CSV input: id comes from the file name, url is built from the id, name
  falls back to the id.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from ..config import DEFAULT_CANONICAL_BASE
from ..models import ConversionOptions

# CodeSystem fields that may fill unset options; status is deliberately absent.
DEFAULTABLE_FIELDS = ("url", "name", "description", "id")

_CSV_SUFFIX = re.compile(r"\.csv$")


@dataclass(frozen=True)
class ValueSetMetadata:
    """Fully resolved top-level ValueSet fields."""

    status: str
    id: Optional[str] = None
    url: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


def merge_codesystem_fields(
    options: ConversionOptions, document: Mapping[str, Any]
) -> ConversionOptions:
    """
    Fill unset options from same-named CodeSystem fields.

    Only DEFAULTABLE_FIELDS are considered. An option counts as unset when it
    is falsy; the document value is copied whenever the document has the key,
    even if that value is itself empty.
    """
    filled = {
        field: document[field]
        for field in DEFAULTABLE_FIELDS
        if not getattr(options, field) and field in document
    }
    return replace(options, **filled) if filled else options


def resolve_codesystem_metadata(
    options: ConversionOptions,
    document: Mapping[str, Any],
    default_status: str = "draft",
) -> ValueSetMetadata:
    """Resolve metadata for a CodeSystem-derived ValueSet."""
    merged = merge_codesystem_fields(options, document)
    return ValueSetMetadata(
        status=merged.status or default_status,
        id=merged.id,
        url=merged.url,
        name=merged.name,
        description=merged.description,
    )


def id_from_filename(path: Path) -> str:
    """Return the base file name with a trailing ".csv" removed."""
    return _CSV_SUFFIX.sub("", path.name)


def resolve_flat_metadata(
    options: ConversionOptions,
    source: Path,
    canonical_base: str = DEFAULT_CANONICAL_BASE,
    default_status: str = "active",
) -> ValueSetMetadata:
    """
    Resolve metadata for a CSV-derived ValueSet.

    Evaluated in order: id (explicit, else from the file name), url
    (explicit, else canonical_base + id), name (explicit, else id),
    description (explicit only), status (explicit, else default_status).
    """
    vs_id = options.id or id_from_filename(source)
    return ValueSetMetadata(
        id=vs_id,
        url=options.url or f"{canonical_base}{vs_id}",
        name=options.name or vs_id,
        description=options.description,
        status=options.status or default_status,
    )
