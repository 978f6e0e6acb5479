# src/fhir_valueset_tool/transform/registry.py
"""
Registry for input -> ValueSet converters.

Provides:
- a @register(kind) decorator to bind an input kind to a converter class,
- lookup by input path,
- listing of available kinds.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Type

from ..config import AppConfig
from .base import Converter

# Map input kind (e.g., "csv") to a converter class, in registration order.
_REGISTRY: Dict[str, Type[Converter]] = {}


def register(kind: str):
    """
    Decorator to register a Converter class for a specific input kind.

    Parameters
    ----------
    kind : str
        Input kind, e.g., "csv" or "codesystem".

    Raises
    ------
    ValueError
        If the kind is already registered.
    TypeError
        If the decorated object is not a class implementing the protocol.

    Returns
    -------
    callable
        A class decorator that registers the converter.
    """

    def _wrap(cls: Type[Converter]) -> Type[Converter]:
        if kind in _REGISTRY:
            raise ValueError(f"Converter already registered for kind {kind!r}")
        if not isinstance(cls, type):
            raise TypeError(
                f"Only classes can be registered as converters, got {type(cls)}"
            )
        if not callable(getattr(cls, "applies", None)) or not callable(
            getattr(cls, "convert", None)
        ):
            raise TypeError(f"Class {cls.__name__} does not implement Converter protocol")

        _REGISTRY[kind] = cls
        return cls

    return _wrap


def available_kinds() -> List[str]:
    """
    List all registered input kinds.

    Returns
    -------
    List[str]
        Sorted list of kinds (e.g., ["codesystem", "csv"]).
    """
    return sorted(_REGISTRY.keys())


def get_converter(path: Path, config: Optional[AppConfig] = None) -> Optional[Converter]:
    """
    Look up and instantiate a converter for the given input path.

    Converters that are not marked as fallback are asked first, in
    registration order. If none applies, the first fallback converter
    that applies is used.

    Parameters
    ----------
    path : Path
        Input file path.
    config : AppConfig or None
        Configuration handed to the converter; defaults when None.

    Returns
    -------
    Converter or None
        An instance of the matching converter class, or None if no
        converter handles the path.
    """
    cfg = config or AppConfig()
    specific = [c for c in _REGISTRY.values() if not getattr(c, "fallback", False)]
    fallback = [c for c in _REGISTRY.values() if getattr(c, "fallback", False)]
    for cls in specific + fallback:
        conv = cls(cfg)
        if conv.applies(path):
            return conv
    return None
