# src/fhir_valueset_tool/config.py
"""
Configuration utilities for fhir_valueset_tool.

Provides a simple dataclass-based configuration object and a loader that reads
YAML configuration files when present.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .models import STATUS_VALUES

DEFAULT_CANONICAL_BASE = "http://hl7.org/fhir/ValueSet/"


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable application configuration.

    Attributes
    ----------
    canonical_base : str
        Prefix used to synthesize a ValueSet url from its id for CSV input.
    default_status : str
        Status used by the CLI when --status is not given.
    csv_default_status : str
        Status used by the CSV conversion when no status is supplied at all.
    indent : int
        Indentation of the JSON output.
    """

    canonical_base: str = DEFAULT_CANONICAL_BASE
    default_status: str = "draft"
    csv_default_status: str = "active"
    indent: int = 2


def _check_status(key: str, value: Any, path: Path) -> str:
    if value not in STATUS_VALUES:
        raise ValueError(
            f"Config value {key!r} must be one of {', '.join(STATUS_VALUES)}, "
            f"got {value!r}. Config file: {path}"
        )
    return str(value)


def load_config(path: Optional[Path]) -> AppConfig:
    """
    Load application configuration from a YAML file.

    Parameters
    ----------
    path : Path or None
        Path to a YAML config file. If None, defaults are used.

    Returns
    -------
    AppConfig
        The loaded configuration. Keys missing from the file keep their
        defaults.

    Raises
    ------
    TypeError
        If the YAML file does not parse to a mapping at the top level, or
        if indent is not an integer.
    ValueError
        If a status key holds an unknown publication status.
    yaml.YAMLError
        If the file is not valid YAML.
    """
    if path is None:
        return AppConfig()

    data: Any = yaml.safe_load(path.read_text())

    if data is None:
        return AppConfig()

    if not isinstance(data, Mapping):
        raise TypeError(
            f"Config file must contain a mapping at top level, "
            f"got {type(data).__name__}. "
            f"Config file: {path}"
        )

    defaults = AppConfig()
    indent = data.get("indent", defaults.indent)
    if not isinstance(indent, int) or isinstance(indent, bool):
        raise TypeError(
            f"Config value 'indent' must be int, got {type(indent).__name__}. "
            f"Config file: {path}"
        )

    return AppConfig(
        canonical_base=str(data.get("canonical_base", defaults.canonical_base)),
        default_status=_check_status(
            "default_status", data.get("default_status", defaults.default_status), path
        ),
        csv_default_status=_check_status(
            "csv_default_status",
            data.get("csv_default_status", defaults.csv_default_status),
            path,
        ),
        indent=indent,
    )
