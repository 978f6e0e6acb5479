# src/fhir_valueset_tool/__init__.py
"""
fhir_valueset_tool: CodeSystem / CSV -> FHIR ValueSet conversion utilities.

This package provides:
- A CLI for converting a FHIR CodeSystem (JSON or XML) or a flat CSV code
  list into a FHIR ValueSet.
- Parsers for the CSV and CodeSystem inputs.
- A converter registry that picks the conversion for a given input file.
"""

from __future__ import annotations

__version__ = "0.1.0"
__all__ = [
    "__version__",
]
