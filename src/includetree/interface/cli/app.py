from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults and
command-line overrides, configuration validation, analysis execution and
report rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List, Optional

from includetree.core.analysis.tree_renderer import render_report
from includetree.core.pipeline.engine import run_analysis
from includetree.core.pipeline.validator import validate_config
from includetree.domain.analysis_models import ERROR_INVALID_ROOT, AnalysisResult
from includetree.domain.config import CONFIG_KEYS, get_default_config
from includetree.infra.logging import LoggingConfig, configure_logging, get_logger
from includetree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_ARGUMENT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 analysis failure, 2 invalid root).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Merge command-line overrides into the defaults
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)

    # 4. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Pre-flight input verification
    input_path = clean_conf["input_path"]
    if not os.path.isdir(input_path):
        reason = "does not exist" if not os.path.exists(input_path) else "is not a directory"
        msg = f"Project root '{input_path}' {reason}."
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT

    # 6. Analysis phase
    try:
        result = run_analysis(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 7. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2, default=_json_default))
    else:
        _print_human_report(result, print_trees=clean_conf["print_trees"])

    if result.ok:
        return EXIT_OK
    if result.error_kind == ERROR_INVALID_ROOT:
        return EXIT_INVALID_ARGUMENT
    return EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.

    Args:
        base: The default configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_report(result: AnalysisResult, print_trees: bool = True) -> None:
    """
    Print the trees and the count table, or the error on failure.

    Args:
        result: The analysis result to render.
        print_trees: Whether to print the per-root trees.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    for line in render_report(result.trees, result.counters, include_trees=print_trees):
        print(line)


def _json_default(value: Any) -> Any:
    """Serialize enum members by value for the JSON view."""
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
