# src/fhir_valueset_tool/cli.py
"""
Command-line interface for fhir_valueset_tool.

Subcommands
-----------
convert
    Convert a CodeSystem (FHIR JSON or XML) or a CSV code list into a FHIR
    ValueSet and either:
        - print it to stdout (default), or
        - write it to a file (with --output [FILE]), or
        - list the supported input kinds (with --list).

Exit codes
----------
0  success
1  handled, expected error (ValueSetToolError or KeyboardInterrupt)
2  CLI usage error (argparse)

Notes
-----
- The ValueSet is fully built and serialized before anything is written, so
  a failed conversion never leaves a partial output file behind.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

import yaml

from pathlib import Path
from typing import Optional, Union

from . import __version__
from .config import AppConfig, load_config
from .exceptions import ValueSetToolError
from .logging_utils import configure_logging
from .models import STATUS_VALUES, ConversionOptions
from .transform.registry import available_kinds, get_converter

# ------------------------------------------------------------------------------
# globals
# ------------------------------------------------------------------------------

LOG = logging.getLogger("fhir_valueset_tool")

EXIT_OK = 0
EXIT_ERR = 1
EXIT_CLI = 2

VALUE_SET_SUFFIX = "-value-set.json"

# ------------------------------------------------------------------------------
# Parser construction
# ------------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argparse parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with the convert subcommand.
    """
    parser = argparse.ArgumentParser(
        prog="fhir-valueset",
        description="Convert a FHIR CodeSystem or a CSV code list to a FHIR ValueSet.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config file (overrides defaults).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv, -vvv).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"fhir-valueset-tool (cli) {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    s1 = sub.add_parser("convert", help="Convert CodeSystem or CSV to ValueSet.")
    s1.add_argument(
        "path",
        type=Path,
        nargs="?",
        help="Path to a CodeSystem JSON/XML file, or a .csv code list.",
    )
    s1.add_argument(
        "-o",
        "--output",
        nargs="?",
        const=True,
        default=None,
        help=(
            "Write the ValueSet to FILE instead of stdout. Without FILE the "
            "name is derived from the input (x.csv -> x.json, "
            "x.json -> x-value-set.json)."
        ),
    )
    s1.add_argument("-u", "--url", default=None, help="ValueSet url.")
    s1.add_argument("-n", "--name", default=None, help="ValueSet name.")
    s1.add_argument(
        "-d", "--description", default=None, help="ValueSet description."
    )
    s1.add_argument("-i", "--id", default=None, help="ValueSet id.")
    s1.add_argument(
        "-s",
        "--status",
        choices=STATUS_VALUES,
        default=None,
        help="ValueSet status (defaults to config.default_status, i.e. draft).",
    )
    s1.add_argument(
        "--list",
        action="store_true",
        help="List supported input kinds and exit.",
    )

    return parser


# ------------------------------------------------------------------------------
# Validation helpers
# ------------------------------------------------------------------------------


def _validate_existing_file(path: Path) -> None:
    """
    Validate that a path exists and is a readable file.

    Raises
    ------
    ValueSetToolError
        If the path does not exist, is not a file, or is not readable.
    """
    if not path.exists():
        raise ValueSetToolError(f"File not found: {path}")
    if not path.is_file():
        raise ValueSetToolError(f"Not a file: {path}")
    if not os.access(path, os.R_OK):
        raise ValueSetToolError(f"File is not readable: {path}")


def _derive_output_path(path: Path) -> Path:
    """
    Derive the output file name from the input file name.

    x.csv -> x.json; x.json and x.xml -> x-value-set.json; any other name
    gets "-value-set.json" appended to its stem.
    """
    name = path.name
    if name.endswith(".csv"):
        return path.with_name(name[: -len(".csv")] + ".json")
    for suffix in (".json", ".xml"):
        if name.endswith(suffix):
            return path.with_name(name[: -len(suffix)] + VALUE_SET_SUFFIX)
    return path.with_name(name + VALUE_SET_SUFFIX)


def _resolve_output_path(path: Path, output: Union[str, bool, None]) -> Optional[Path]:
    """
    Map the --output argument to a file path, or None for stdout.

    Parameters
    ----------
    path : Path
        Input file path.
    output : str, True or None
        None when --output was not given, True when given without a value,
        otherwise the requested file name.
    """
    if output is None:
        return None
    if output is True:
        return _derive_output_path(path)
    return Path(str(output))


def _write_output(text: str, out_path: Path) -> None:
    """
    Write serialized JSON to a file.

    Raises
    ------
    ValueSetToolError
        If the write fails.
    """
    try:
        out_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ValueSetToolError(f"Failed to write {out_path}: {e}") from e
    LOG.info("Wrote %s", out_path)


# ------------------------------------------------------------------------------
# Command handlers
# ------------------------------------------------------------------------------


def _cmd_convert(
    path: Optional[Path],
    options: ConversionOptions,
    output: Union[str, bool, None],
    list_only: bool,
    cfg: AppConfig,
) -> int:
    """
    Convert: build a ValueSet from a CodeSystem or CSV file.

    Parameters
    ----------
    path : Path or None
        Input file path. Only optional together with list_only.
    options : ConversionOptions
        Explicit ValueSet metadata from the command line.
    output : str, True or None
        Raw --output value (see _resolve_output_path).
    list_only : bool
        If True, list available input kinds and exit.
    cfg : AppConfig
        Loaded configuration.

    Returns
    -------
    int
        EXIT_OK on success.

    Raises
    ------
    ValueSetToolError
        For invalid input, missing concepts, or unwritable output.
    """
    if list_only:
        print("Registered input kinds:")
        for kind in available_kinds():
            print(f"    {kind}")
        return EXIT_OK

    if path is None:
        raise ValueSetToolError("An input file is required.")

    _validate_existing_file(path)

    converter = get_converter(path, cfg)
    if converter is None:
        raise ValueSetToolError(f"No converter registered for {path.name}")
    LOG.debug("Using %s converter for %s", converter.kind, path)

    value_set = converter.convert(path, options)
    text = value_set.to_json(indent=cfg.indent)

    out_path = _resolve_output_path(path, output)
    if out_path is None:
        sys.stdout.write(text)
        sys.stdout.write("\n")
        sys.stdout.flush()
    else:
        _write_output(text, out_path)

    return EXIT_OK


# ------------------------------------------------------------------------------
# Entrypoint
# ------------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    """
    CLI entrypoint.

    Parameters
    ----------
    argv : list[str] or None, default None
        Argument list for testing; None uses sys.argv[1:].

    Returns
    -------
    int
        Process exit code (EXIT_OK, EXIT_ERR, or EXIT_CLI).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        cfg = load_config(args.config)
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        LOG.error("Invalid config: %s", e)
        return EXIT_ERR

    try:
        if args.cmd == "convert":
            options = ConversionOptions(
                url=args.url,
                name=args.name,
                description=args.description,
                id=args.id,
                status=args.status or cfg.default_status,
            )
            return _cmd_convert(
                path=args.path,
                options=options,
                output=args.output,
                list_only=bool(args.list),
                cfg=cfg,
            )
        parser.error("Unknown command")
        return EXIT_CLI

    except ValueSetToolError as e:
        LOG.error("%s", e)
        return EXIT_ERR
    except KeyboardInterrupt:
        LOG.error("Interrupted")
        return EXIT_ERR


if __name__ == "__main__":
    raise SystemExit(main())
