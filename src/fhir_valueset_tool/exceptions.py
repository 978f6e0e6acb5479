# src/fhir_valueset_tool/exceptions.py
"""
Custom exceptions for fhir_valueset_tool.

All exceptions inherit from ValueSetToolError so that callers can catch
tool-specific errors without grabbing unrelated built-in exceptions.
"""


class ValueSetToolError(Exception):
    """Base class for all fhir_valueset_tool exceptions."""

    pass


class ParseError(ValueSetToolError):
    """Raised when a CSV or CodeSystem input cannot be parsed correctly."""

    pass


class ConversionError(ValueSetToolError):
    """Raised when an input cannot be converted to a ValueSet."""

    pass


class MissingConceptsError(ConversionError):
    """Raised when a CodeSystem carries no concepts to include."""

    pass
