# src/fhir_valueset_tool/codesystem_parser.py
"""
CodeSystem loading utilities.

Provides loaders for FHIR CodeSystem JSON and XML files. Both return the
resource as a plain JSON-like dict; no FHIR schema validation is done here,
the converter only checks the structure it actually needs.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from lxml import etree

from .exceptions import ParseError

# Elements that are always lists in FHIR JSON even when they occur once.
_LIST_ELEMENTS = frozenset({"concept", "designation", "property", "filter"})


# ------------------------------------------------------------------------------
# helpers
# ------------------------------------------------------------------------------


def _ensure_file(path: Path) -> None:
    """Validate that a path exists and is a file; raise ParseError if not."""
    if not isinstance(path, Path):
        raise ParseError(f"path must be pathlib.Path, got {type(path).__name__}")
    if not path.exists():
        raise ParseError(f"file does not exist: {path}")
    if not path.is_file():
        raise ParseError(f"not a file: {path}")


def _local(tag: str) -> str:
    """Return the local (namespace-stripped) tag name."""
    return tag.split("}", 1)[1] if "}" in tag else tag


def _xml_to_obj(elem) -> Any:
    """
    Convert a FHIR XML element subtree into a JSON-like object.

    Rules
    -----
    - If element has a 'value' attribute and no element children -> return that scalar.
    - Otherwise, build a dict of child elements; repeated child tags become lists.
    - Elements named in _LIST_ELEMENTS are always lists.
    - Attributes other than 'value' are ignored.
    - Namespaces are stripped; only local names are used.

    Unsupported
    -----------
    - FHIR primitive extensions (the _field mirror).
    - Narrative (<text><div>...</div></text>) is reduced to its child structure.
    """
    children = [c for c in elem if isinstance(c.tag, str)]
    val = elem.get("value")
    if val is not None and not children:
        return val

    out: Dict[str, Any] = {}
    for child in children:
        name = _local(child.tag)
        child_obj = _xml_to_obj(child)
        if name in out:
            # promote to a list on repeat
            if not isinstance(out[name], list):
                out[name] = [out[name]]
            out[name].append(child_obj)
        elif name in _LIST_ELEMENTS:
            out[name] = [child_obj]
        else:
            out[name] = child_obj
    return out


# ------------------------------------------------------------------------------
# loaders
# ------------------------------------------------------------------------------


def load_codesystem_json(path: Path) -> Dict[str, Any]:
    """
    Load a CodeSystem from a JSON file.

    Parameters
    ----------
    path : Path
        Path to a JSON file containing a CodeSystem resource.

    Returns
    -------
    Dict[str, Any]
        The decoded top-level JSON object.

    Raises
    ------
    ParseError
        If the path is invalid, the file is not UTF-8, the JSON is not
        valid, or the file does not contain a JSON object.
    """
    _ensure_file(path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"failed to read JSON: {e}") from e

    try:
        obj: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON: {e}") from e

    if not isinstance(obj, dict):
        raise ParseError("CodeSystem JSON must be an object at the top level")

    return obj


def load_codesystem_xml(path: Path) -> Dict[str, Any]:
    """
    Load a CodeSystem from a FHIR XML file.

    Parameters
    ----------
    path : Path
        Path to an XML file containing a CodeSystem resource.

    Returns
    -------
    Dict[str, Any]
        A JSON-like dict with 'resourceType' taken from the root element's
        local name and the children mapped by _xml_to_obj.

    Raises
    ------
    ParseError
        If the path is invalid or the XML cannot be parsed.
    """
    _ensure_file(path)

    try:
        tree = etree.parse(str(path))
        root = tree.getroot()
    except (etree.XMLSyntaxError, OSError) as e:
        raise ParseError(f"invalid XML: {e}") from e

    data: Dict[str, Any] = {"resourceType": _local(root.tag)}
    body = _xml_to_obj(root)
    if isinstance(body, dict):
        data.update(body)
    return data
