# src/fhir_valueset_tool/transform/to_valueset/csv_file.py
"""
CSV code list -> FHIR ValueSet.

Notes
-----
- One inclusion group per distinct system column value, in order of first
  appearance.
- CSV input carries no definitions; concepts get code and display only.
- Metadata not given explicitly is derived from the file name
  (see transform.defaults.resolve_flat_metadata).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from ...config import AppConfig
from ...csv_parser import FlatRecord, read_flat_records
from ...models import Concept, ConversionOptions, ValueSet
from ..assemble import assemble_value_set
from ..base import Converter
from ..defaults import resolve_flat_metadata
from ..grouping import group_by_system
from ..registry import register

LOG = logging.getLogger(__name__)

KIND = "csv"
CSV_SUFFIX = ".csv"


def records_to_value_set(
    records: Iterable[FlatRecord],
    source: Path,
    options: ConversionOptions,
    config: Optional[AppConfig] = None,
) -> ValueSet:
    """
    Build a ValueSet from parsed CSV records.

    Parameters
    ----------
    records : Iterable[FlatRecord]
        Records in file order.
    source : Path
        The CSV file the records came from; used to derive id/url/name.
    options : ConversionOptions
        Explicit metadata.
    config : AppConfig or None
        Supplies the canonical url base and the fallback status.

    Returns
    -------
    ValueSet
    """
    cfg = config or AppConfig()
    groups = group_by_system(
        (rec.system, Concept(code=rec.code, display=rec.display)) for rec in records
    )
    metadata = resolve_flat_metadata(
        options,
        source,
        canonical_base=cfg.canonical_base,
        default_status=cfg.csv_default_status,
    )
    return assemble_value_set(metadata, groups)


@register(KIND)
class CsvConverter(Converter):
    """
    Converter for flat CSV code lists (code,system,display).
    """

    kind = KIND

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()

    def applies(self, path: Path) -> bool:
        """Return True for names ending in ".csv" (case-sensitive)."""
        return path.name.endswith(CSV_SUFFIX)

    def convert(self, path: Path, options: ConversionOptions) -> ValueSet:
        records = read_flat_records(path)
        vs = records_to_value_set(records, path, options, self.config)
        LOG.debug(
            "Converted %d concept(s) in %d group(s) from %s",
            len(records),
            len(vs.compose.include),
            path,
        )
        return vs
