# src/fhir_valueset_tool/transform/to_valueset/__init__.py
"""
Converters from input files to FHIR ValueSets.

- csv_file:   flat CSV code lists (code,system,display)
- codesystem: FHIR CodeSystem JSON/XML (fallback for every other input)
"""
