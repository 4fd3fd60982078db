from __future__ import annotations

"""
Include Analysis Engine.

Orchestrates a complete run: validates the project root, enumerates the
root files, walks every root with a shared edge counter, sorts the table
and optionally persists the text report. Fatal errors abort the whole run
and are converted into an error result without partial data.
"""

import logging
import os
import time
from typing import Any, Dict, List, Tuple

from includetree.core.analysis.counter import init_root_counters, sort_counters
from includetree.core.analysis.tree_renderer import render_report
from includetree.core.analysis.walker import walk_dependency_tree
from includetree.core.services.filters import compile_patterns
from includetree.core.services.scanner import enumerate_source_files, validate_project_root
from includetree.domain.analysis_models import (
    ERROR_INVALID_ROOT,
    ERROR_READ_FAILURE,
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from includetree.domain.errors import InvalidProjectPathError, SourceReadError
from includetree.domain.include_models import (
    DependencyTree,
    Include,
    IncludeCounter,
    IncludeKind,
    IncludeStatus,
)
from includetree.infra.fs import save_lines

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_analysis(cfg: Dict[str, Any]) -> AnalysisResult:
    """
    Execute the include analysis described by a validated configuration.

    Args:
        cfg: Configuration produced by validate_config.

    Returns:
        AnalysisResult: Trees and sorted counters, or an error result.
    """
    input_path = cfg.get("input_path", "")
    include_paths: List[str] = list(cfg.get("include_paths", []))

    try:
        base_path = validate_project_root(input_path)
    except InvalidProjectPathError as e:
        logger.error(str(e))
        return create_error_result(str(e), ERROR_INVALID_ROOT, input_path, include_paths)

    logger.info(f"Analyzing includes under: {base_path}")
    start = time.perf_counter()

    exclude_rx = compile_patterns(cfg.get("exclude_patterns", []))
    roots = enumerate_source_files(base_path, exclude_rx=exclude_rx)

    try:
        trees, counter = analyze_roots(base_path, roots, include_paths)
    except SourceReadError as e:
        logger.error(str(e))
        return create_error_result(
            str(e), ERROR_READ_FAILURE, base_path, include_paths,
            summary_extra={"roots": len(roots)},
        )

    counters = sort_counters(counter)
    elapsed = time.perf_counter() - start
    logger.info(f"Analyzed {len(roots)} root file(s) in {elapsed:.2f}s")

    report_path = ""
    target = cfg.get("report_path", "")
    if target:
        lines = render_report(trees, counters, include_trees=bool(cfg.get("print_trees", True)))
        if save_lines(target, lines):
            report_path = target

    summary = {
        "roots": len(roots),
        "edges": len(counters),
        "cycles": sum(1 for t in trees for r in t.records if r.status is IncludeStatus.CYCLE),
        "unresolved": sum(1 for t in trees for r in t.records if r.status is IncludeStatus.UNRESOLVED),
        "elapsed_seconds": round(elapsed, 3),
    }

    return create_success_result(
        base_path=base_path,
        include_paths=include_paths,
        trees=trees,
        counters=counters,
        report_path=report_path,
        summary_extra=summary,
    )


def analyze_roots(
        base_path: str,
        roots: List[str],
        include_paths: List[str],
) -> Tuple[List[DependencyTree], IncludeCounter]:
    """
    Walk every root file and accumulate the shared edge counter.

    Each root is a quoted reference relative to the project root, so its own
    counter key and chain key are (relative path, project root).

    Args:
        base_path: Canonical project root.
        roots: Relative root paths in stable order.
        include_paths: Ordered search directories.

    Returns:
        Tuple of the trees in root order and the unsorted counter.

    Raises:
        SourceReadError: If any resolved file cannot be read.
    """
    counter: IncludeCounter = {}
    init_root_counters(counter, roots, base_path)

    trees: List[DependencyTree] = []
    for root in roots:
        logger.debug(f"Walking root: {os.path.join(base_path, root)}")
        tree = walk_dependency_tree(
            Include(path=root, kind=IncludeKind.QUOTED),
            base_path,
            include_paths,
            counter,
        )
        trees.append(tree)

    return trees, counter
