# src/fhir_valueset_tool/transform/to_valueset/codesystem.py
"""
FHIR CodeSystem -> FHIR ValueSet.

Notes
-----
- The ValueSet includes every top-level concept of the CodeSystem in a
  single inclusion group whose system is the CodeSystem url.
- code, display and definition are carried over; definition only when the
  CodeSystem concept has one.
- Nested (child) concepts are not flattened into the ValueSet.
- Unset url, name, description and id are taken from the CodeSystem
  (see transform.defaults.merge_codesystem_fields).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError

from ...codesystem_parser import load_codesystem_json, load_codesystem_xml
from ...config import AppConfig
from ...exceptions import MissingConceptsError, ParseError
from ...models import Concept, ConversionOptions, ValueSet, ValueSetInclude
from ..assemble import assemble_value_set
from ..base import Converter
from ..defaults import resolve_codesystem_metadata
from ..registry import register

LOG = logging.getLogger(__name__)

KIND = "codesystem"
XML_SUFFIX = ".xml"


def extract_concepts(document: Mapping[str, Any]) -> List[Concept]:
    """
    Map the CodeSystem's concept list to ValueSet concepts.

    Raises
    ------
    MissingConceptsError
        If 'concept' is absent or empty.
    ParseError
        If 'concept' is not a list, or an entry is not an object with a
        string code.
    """
    raw = document.get("concept")
    if not raw:
        raise MissingConceptsError("CodeSystem must have at least one concept")
    if not isinstance(raw, list):
        raise ParseError(
            f"CodeSystem 'concept' must be a list, got {type(raw).__name__}"
        )

    concepts: List[Concept] = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            raise ParseError(f"concept[{i}] must be an object, got {type(entry).__name__}")
        try:
            concepts.append(
                Concept(
                    code=entry.get("code"),
                    display=entry.get("display"),
                    definition=entry.get("definition"),
                )
            )
        except ValidationError as e:
            raise ParseError(f"concept[{i}] is invalid: {e}") from e
    return concepts


def codesystem_to_value_set(
    document: Mapping[str, Any],
    options: ConversionOptions,
    default_status: str = "draft",
) -> ValueSet:
    """
    Build a ValueSet from a loaded CodeSystem.

    Parameters
    ----------
    document : Mapping
        CodeSystem resource as a JSON-like mapping.
    options : ConversionOptions
        Explicit metadata; unset url/name/description/id come from the
        CodeSystem.
    default_status : str, default "draft"
        Status used when options.status is unset.

    Returns
    -------
    ValueSet

    Raises
    ------
    MissingConceptsError
        If the CodeSystem has no concepts.
    ParseError
        If the concept list or the CodeSystem url is malformed.
    ConversionError
        If the resolved metadata is not valid.
    """
    concepts = extract_concepts(document)
    metadata = resolve_codesystem_metadata(options, document, default_status)
    try:
        group = ValueSetInclude(system=document.get("url"), concept=concepts)
    except ValidationError as e:
        raise ParseError(f"CodeSystem 'url' is invalid: {e}") from e
    return assemble_value_set(metadata, [group])


@register(KIND)
class CodeSystemConverter(Converter):
    """
    Converter for CodeSystem resources in FHIR JSON or XML.

    Used for every input no other converter claims.
    """

    kind = KIND
    fallback = True

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()

    def applies(self, path: Path) -> bool:
        return True

    def convert(self, path: Path, options: ConversionOptions) -> ValueSet:
        if path.suffix.lower() == XML_SUFFIX:
            document = load_codesystem_xml(path)
        else:
            document = load_codesystem_json(path)

        rtype = document.get("resourceType")
        if rtype is not None and rtype != "CodeSystem":
            LOG.warning("%s has resourceType %r, expected 'CodeSystem'", path, rtype)

        vs = codesystem_to_value_set(document, options, self.config.default_status)
        LOG.debug("Converted %d concept(s) from %s", len(vs.compose.include[0].concept), path)
        return vs
