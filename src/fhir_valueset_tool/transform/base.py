# src/fhir_valueset_tool/transform/base.py
"""
Converter protocol for input file -> FHIR ValueSet conversions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from ..models import ConversionOptions, ValueSet

__all__ = ["Converter"]


@runtime_checkable
class Converter(Protocol):
    """
    Interface for input converters.

    Implementations declare the input kind they handle (e.g., "csv"), decide
    if a given input path applies to them, and produce one ValueSet from it.
    A converter class may set ``fallback = True`` to be used for any path no
    other converter claims.
    """

    kind: str  # e.g., "csv"

    def applies(self, path: Path) -> bool:
        """
        Return True if this converter should handle the given input path.

        Parameters
        ----------
        path : Path
            Input file path.

        Returns
        -------
        bool
            True if the path matches this converter's input kind.
        """
        ...

    def convert(self, path: Path, options: ConversionOptions) -> ValueSet:
        """
        Read the input file and convert it into a ValueSet.

        Parameters
        ----------
        path : Path
            Input file path.
        options : ConversionOptions
            Explicit ValueSet metadata; unset fields are defaulted.

        Returns
        -------
        ValueSet
            The assembled ValueSet.
        """
        ...
