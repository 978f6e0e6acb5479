# src/fhir_valueset_tool/transform/__init__.py
"""
Transform package initializer.

Imports the to_valueset converter modules so their @register(...)
decorators run and populate the registry. The CSV converter is imported
first; CodeSystem is the fallback and is only tried after it.
"""

from __future__ import annotations

from .to_valueset import csv_file as _csv_file  # noqa: F401
from .to_valueset import codesystem as _codesystem  # noqa: F401
