from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides for the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from includetree.domain.constants import APP_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the IncludeTree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="includetree",
        description=(
            "Print the #include dependency tree of every .hpp/.cpp file in a "
            "project and a histogram of how often each resolved file is included."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        help="Project root directory to analyze (default: current directory).",
        default=None,
    )
    p.add_argument(
        "-I", "--include-path",
        dest="include_path",
        action="append",
        default=None,
        metavar="DIR",
        help="Additional search directory, in search order. Repeatable.",
    )
    p.add_argument(
        "--include-paths",
        dest="include_paths_csv",
        default=None,
        metavar="CSV",
        help="Comma-separated search directories, appended after -I entries.",
    )

    # --- Root Discovery ---
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes of directory/file names to skip as roots.",
    )

    # --- Output ---
    p.add_argument(
        "--quiet-trees",
        action="store_true",
        help="Only print the include count table.",
    )
    p.add_argument(
        "-o", "--output",
        dest="report_path",
        default=None,
        help="Also save the text report to this file.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the analysis result as JSON.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostic logs to this file (rotated).",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["report_path"] = args.report_path

    # Search order: repeated -I flags first, then the CSV list
    include_paths: List[str] = list(args.include_path or [])
    include_paths.extend(_split_csv(args.include_paths_csv) or [])
    if include_paths:
        overrides["include_paths"] = include_paths

    if args.exclude_patterns:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)

    if args.quiet_trees:
        overrides["print_trees"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped strings."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
