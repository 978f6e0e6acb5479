# src/fhir_valueset_tool/csv_parser.py
"""
Flat CSV code list parsing.

Expected layout (first line is a header and is always skipped):

    code,system,display
    A,http://sys,Alpha
    B,http://sys,Beta

Notes
-----
- Lines are split literally on the delimiter. There is no quoting or
  escaping, so a value that itself contains the delimiter cannot be
  represented; it spills into the following column.
- Columns beyond the third are ignored; missing trailing columns are None.
- Lines with an empty code (including blank lines) are dropped silently.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NamedTuple, Optional

LOG = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","


class FlatRecord(NamedTuple):
    """One data line of a CSV code list."""

    code: str
    system: Optional[str] = None
    display: Optional[str] = None


def _field(parts: List[str], index: int) -> Optional[str]:
    return parts[index] if index < len(parts) else None


def parse_flat_records(text: str, delimiter: str = DEFAULT_DELIMITER) -> List[FlatRecord]:
    """
    Parse CSV text into records, in file order.

    Parameters
    ----------
    text : str
        Full file content. Lines are separated by "\\n".
    delimiter : str, default ","
        Column separator, matched literally.

    Returns
    -------
    List[FlatRecord]
        One record per data line with a non-empty code.

    Raises
    ------
    ValueError
        If delimiter is empty.
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")

    records: List[FlatRecord] = []
    lines = text.split("\n")
    for lineno, line in enumerate(lines[1:], start=2):
        parts = line.split(delimiter)
        code = parts[0]
        if not code:
            continue
        records.append(FlatRecord(code, _field(parts, 1), _field(parts, 2)))
        LOG.debug("line %d: code=%r system=%r", lineno, code, _field(parts, 1))
    return records


def read_flat_records(path: Path, delimiter: str = DEFAULT_DELIMITER) -> List[FlatRecord]:
    """
    Read and parse a CSV code list file.

    The file is read as UTF-8 with universal newlines, so CRLF files parse
    the same as LF files. Read errors (missing file, permissions) are not
    wrapped and propagate as OSError.
    """
    text = path.read_text(encoding="utf-8")
    records = parse_flat_records(text, delimiter)
    LOG.debug("Parsed %d record(s) from %s", len(records), path)
    return records
